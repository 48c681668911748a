from __future__ import annotations

from typing import Optional

from storefront.core.config import CustomerNameFormat
from storefront.models import Customer


def format_customer_name(
    customer: Optional[Customer],
    name_format: CustomerNameFormat,
    guest_name: str = "Guest",
) -> str:
    """Return the public display name of ``customer``."""
    if customer is None:
        return ""
    if customer.is_guest:
        return guest_name

    if name_format == CustomerNameFormat.SHOW_EMAILS:
        return customer.email or ""
    if name_format == CustomerNameFormat.SHOW_USERNAMES:
        return customer.username or ""
    if name_format == CustomerNameFormat.SHOW_FULL_NAMES:
        return customer.full_name
    if name_format == CustomerNameFormat.SHOW_FIRST_NAME:
        return customer.first_name or ""
    return ""
