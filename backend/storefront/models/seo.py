"""
URL record (search engine friendly name) model
"""

from sqlalchemy import Boolean, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class UrlRecord(BaseModel):
    """Slug assigned to an entity for one language (0 = standard)"""
    __tablename__ = "url_records"

    entity_id: Mapped[int] = mapped_column(Integer, nullable=False)
    entity_name: Mapped[str] = mapped_column(String(400), nullable=False)
    slug: Mapped[str] = mapped_column(String(400), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    language_id: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    __table_args__ = (
        Index('idx_url_record_entity', 'entity_id', 'entity_name', 'language_id', 'is_active'),
    )

    def __repr__(self) -> str:
        return f"<UrlRecord(entity={self.entity_name}:{self.entity_id}, slug={self.slug})>"
