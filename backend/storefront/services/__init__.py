"""
Supporting services used by the presentation layer.
"""

from .customer_formatting import format_customer_name
from .datetime_helper import DateTimeHelper
from .picture_service import PictureService, PictureType
from .slug_service import SlugService

__all__ = [
    "format_customer_name",
    "DateTimeHelper",
    "PictureService",
    "PictureType",
    "SlugService",
]
