from __future__ import annotations

from datetime import datetime, timezone

from storefront.core.config import Settings
from storefront.models import Customer
from storefront.services.datetime_helper import DateTimeHelper


def test_naive_values_are_treated_as_utc() -> None:
    helper = DateTimeHelper(Settings(DEFAULT_STORE_TIME_ZONE_ID="Europe/Berlin"))

    local = helper.convert_to_user_time(datetime(2024, 7, 1, 10, 0))

    assert local.replace(tzinfo=None) == datetime(2024, 7, 1, 12, 0)
    assert local == datetime(2024, 7, 1, 10, 0, tzinfo=timezone.utc)


def test_customer_time_zone_only_when_allowed() -> None:
    customer = Customer(time_zone_id="America/New_York")
    value = datetime(2024, 1, 15, 15, 0)

    allowed = DateTimeHelper(Settings(ALLOW_CUSTOMERS_TO_SET_TIMEZONE=True, DEFAULT_STORE_TIME_ZONE_ID="UTC"))
    disallowed = DateTimeHelper(Settings(ALLOW_CUSTOMERS_TO_SET_TIMEZONE=False, DEFAULT_STORE_TIME_ZONE_ID="UTC"))

    assert allowed.convert_to_user_time(value, customer).replace(tzinfo=None) == datetime(2024, 1, 15, 10, 0)
    assert disallowed.convert_to_user_time(value, customer).replace(tzinfo=None) == value


def test_unknown_time_zones_fall_back() -> None:
    helper = DateTimeHelper(
        Settings(ALLOW_CUSTOMERS_TO_SET_TIMEZONE=True, DEFAULT_STORE_TIME_ZONE_ID="Not/AZone")
    )
    customer = Customer(time_zone_id="Also/Invalid")
    value = datetime(2024, 1, 15, 15, 0, tzinfo=timezone.utc)

    assert helper.convert_to_user_time(value, customer).utcoffset().total_seconds() == 0
