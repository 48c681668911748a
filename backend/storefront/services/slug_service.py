"""
Lookup of search engine friendly names (slugs) of entities.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.models import Language, UrlRecord


class SlugService:
    """Reads active slugs from ``url_records``."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_active_slug(self, entity_name: str, entity_id: int, language_id: int) -> Optional[str]:
        stmt = (
            select(UrlRecord.slug)
            .where(
                UrlRecord.entity_name == entity_name,
                UrlRecord.entity_id == entity_id,
                UrlRecord.language_id == language_id,
                UrlRecord.is_active.is_(True),
            )
            .order_by(UrlRecord.id.desc())
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def count_published_languages(self) -> int:
        stmt = select(func.count(Language.id)).where(Language.published.is_(True))
        result = await self._session.execute(stmt)
        return result.scalar() or 0

    async def get_se_name(
        self,
        entity_name: str,
        entity_id: int,
        language_id: int,
        *,
        return_default_value: bool = True,
        ensure_two_published_languages: bool = True,
    ) -> str:
        """
        Return the slug of an entity for a language.

        The localized slug is only consulted when ``ensure_two_published_languages``
        is off or at least two languages are published. When nothing localized is
        found and ``return_default_value`` is set, the standard slug (language 0)
        is returned.
        """
        result: Optional[str] = None
        if language_id > 0:
            load_localized = True
            if ensure_two_published_languages:
                load_localized = await self.count_published_languages() >= 2
            if load_localized:
                result = await self.get_active_slug(entity_name, entity_id, language_id)

        if not result and return_default_value:
            result = await self.get_active_slug(entity_name, entity_id, 0)
        return result or ""
