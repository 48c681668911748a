"""
Language model
"""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class Language(BaseModel):
    """Storefront language"""
    __tablename__ = "languages"

    name: Mapped[str] = mapped_column(String(100), nullable=False, comment="Display name")
    language_culture: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="Culture code, e.g. en-US",
    )
    published: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    display_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    def __repr__(self) -> str:
        return f"<Language(id={self.id}, culture={self.language_culture})>"
