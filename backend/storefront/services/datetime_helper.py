"""
Conversion of stored UTC timestamps into the viewer's local time.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Optional

import pytz
from loguru import logger

from storefront.core.config import Settings
from storefront.models import Customer


class DateTimeHelper:
    """Resolves the viewer's time zone and converts UTC timestamps into it."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def _load_time_zone(self, time_zone_id: str) -> Optional[tzinfo]:
        try:
            return pytz.timezone(time_zone_id)
        except pytz.exceptions.UnknownTimeZoneError:
            logger.warning(f"Unknown timezone: {time_zone_id}")
            return None

    def get_default_store_time_zone(self) -> tzinfo:
        return self._load_time_zone(self._settings.DEFAULT_STORE_TIME_ZONE_ID) or pytz.UTC

    def get_customer_time_zone(self, customer: Optional[Customer]) -> tzinfo:
        if (
            self._settings.ALLOW_CUSTOMERS_TO_SET_TIMEZONE
            and customer is not None
            and customer.time_zone_id
        ):
            time_zone = self._load_time_zone(customer.time_zone_id)
            if time_zone is not None:
                return time_zone
        return self.get_default_store_time_zone()

    def convert_to_user_time(self, value: datetime, customer: Optional[Customer] = None) -> datetime:
        """
        Convert a UTC timestamp to the customer's time zone.

        Naive values are treated as UTC, which is how timestamps are stored.
        """
        if value.tzinfo is None:
            value = pytz.UTC.localize(value)
        return value.astimezone(self.get_customer_time_zone(customer))
