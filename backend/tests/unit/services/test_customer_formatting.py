from __future__ import annotations

import pytest

from storefront.core.config import CustomerNameFormat
from storefront.models import Customer
from storefront.services.customer_formatting import format_customer_name


def _customer(**overrides) -> Customer:
    data = dict(
        username="jdoe",
        email="jane@example.com",
        first_name="Jane",
        last_name="Doe",
        is_guest=False,
    )
    data.update(overrides)
    return Customer(**data)


@pytest.mark.parametrize(
    ("name_format", "expected"),
    [
        (CustomerNameFormat.SHOW_EMAILS, "jane@example.com"),
        (CustomerNameFormat.SHOW_USERNAMES, "jdoe"),
        (CustomerNameFormat.SHOW_FULL_NAMES, "Jane Doe"),
        (CustomerNameFormat.SHOW_FIRST_NAME, "Jane"),
    ],
)
def test_format_customer_name(name_format: CustomerNameFormat, expected: str) -> None:
    assert format_customer_name(_customer(), name_format) == expected


def test_full_name_skips_missing_parts() -> None:
    customer = _customer(last_name=None)

    assert format_customer_name(customer, CustomerNameFormat.SHOW_FULL_NAMES) == "Jane"


def test_guests_and_missing_customers() -> None:
    guest = _customer(is_guest=True)

    assert format_customer_name(guest, CustomerNameFormat.SHOW_EMAILS, "Gast") == "Gast"
    assert format_customer_name(None, CustomerNameFormat.SHOW_EMAILS) == ""
