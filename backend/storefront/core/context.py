"""
Request-scoped context passed explicitly into presentation operations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from storefront.models import Customer


@dataclass(frozen=True, slots=True)
class RequestContext:
    """Working language, current store and current customer of one request."""

    working_language_id: int
    store_id: int
    customer: Optional["Customer"] = None
