"""
News item and news comment models
"""

from typing import Optional, List
from datetime import datetime

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, BaseModel
from storefront.utils.datetime_utils import utc_now_naive


news_item_store_mappings = Table(
    "news_item_store_mappings",
    Base.metadata,
    Column("news_item_id", Integer, ForeignKey("news_items.id", ondelete="CASCADE"), primary_key=True),
    Column("store_id", Integer, primary_key=True),
)


class NewsItem(BaseModel):
    """News item published on the storefront"""
    __tablename__ = "news_items"

    language_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("languages.id"),
        nullable=False,
        comment="Language the item is written in",
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    short: Mapped[str] = mapped_column(Text, nullable=False, default="", comment="Short description")
    full: Mapped[str] = mapped_column(Text, nullable=False, default="", comment="Full body")
    published: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    start_date_utc: Mapped[Optional[datetime]] = mapped_column(
        DateTime,
        nullable=True,
        comment="Scheduled publication start",
    )
    end_date_utc: Mapped[Optional[datetime]] = mapped_column(
        DateTime,
        nullable=True,
        comment="Scheduled publication end",
    )
    allow_comments: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    limited_to_stores: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
        comment="Visible only in the stores listed in news_item_store_mappings",
    )
    meta_keywords: Mapped[Optional[str]] = mapped_column(String(400), nullable=True)
    meta_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    meta_title: Mapped[Optional[str]] = mapped_column(String(400), nullable=True)
    created_on_utc: Mapped[datetime] = mapped_column(DateTime, default=utc_now_naive, nullable=False)

    # Relationships
    comments: Mapped[List["NewsComment"]] = relationship(
        "NewsComment",
        back_populates="news_item",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        Index('idx_news_language_published', 'language_id', 'published'),
    )

    def __repr__(self) -> str:
        return f"<NewsItem(id={self.id}, title={self.title[:50]})>"


class NewsComment(BaseModel):
    """Customer comment on a news item"""
    __tablename__ = "news_comments"

    news_item_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("news_items.id", ondelete="CASCADE"),
        nullable=False,
    )
    customer_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("customers.id"),
        nullable=True,
    )
    comment_title: Mapped[Optional[str]] = mapped_column(String(400), nullable=True)
    comment_text: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_approved: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_on_utc: Mapped[datetime] = mapped_column(DateTime, default=utc_now_naive, nullable=False)

    # Relationships
    news_item: Mapped["NewsItem"] = relationship("NewsItem", back_populates="comments")
    customer: Mapped[Optional["Customer"]] = relationship("Customer")

    __table_args__ = (
        Index('idx_news_comment_item_approved', 'news_item_id', 'is_approved'),
    )

    def __repr__(self) -> str:
        return f"<NewsComment(id={self.id}, news_item_id={self.news_item_id}, approved={self.is_approved})>"
