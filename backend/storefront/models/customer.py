"""
Customer model
"""

from typing import Optional
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from storefront.utils.datetime_utils import utc_now_naive


class Customer(BaseModel):
    """Registered or guest storefront customer"""
    __tablename__ = "customers"

    username: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    first_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    is_guest: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
        comment="Customer belongs to the guests role",
    )
    avatar_picture_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        comment="Uploaded avatar picture identifier",
    )
    time_zone_id: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
        comment="Preferred IANA time zone",
    )
    created_on_utc: Mapped[datetime] = mapped_column(DateTime, default=utc_now_naive, nullable=False)

    @property
    def full_name(self) -> str:
        """First and last name joined, skipping the empty parts"""
        parts = [part for part in (self.first_name, self.last_name) if part]
        return " ".join(parts)

    def __repr__(self) -> str:
        return f"<Customer(id={self.id}, email={self.email}, guest={self.is_guest})>"
