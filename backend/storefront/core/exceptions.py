"""
Exceptions raised by the storefront package
"""

from typing import Optional


class StorefrontError(Exception):
    """Base class for storefront errors"""

    def __init__(self, message: str, *, details: Optional[dict] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidArgumentError(StorefrontError, ValueError):
    """A required argument was not supplied"""

    def __init__(self, argument: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"{argument} is required", details={"argument": argument})
        self.argument = argument
