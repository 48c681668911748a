"""
SQLAlchemy repository for reading published news.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import and_, exists, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from storefront.models import NewsComment, NewsItem, news_item_store_mappings
from storefront.utils.datetime_utils import utc_now_naive
from storefront.utils.paging import PagedList


class NewsRepository:
    """Encapsulates read operations for the news domain."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def fetch_by_id(self, news_id: int) -> Optional[NewsItem]:
        stmt = (
            select(NewsItem)
            .options(selectinload(NewsItem.comments).selectinload(NewsComment.customer))
            .where(NewsItem.id == news_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _build_criteria(
        self,
        language_id: int,
        store_id: int,
        show_hidden: bool,
    ) -> list:
        criteria = []

        if not show_hidden:
            now = utc_now_naive()
            criteria.append(NewsItem.published.is_(True))
            criteria.append(or_(NewsItem.start_date_utc.is_(None), NewsItem.start_date_utc <= now))
            criteria.append(or_(NewsItem.end_date_utc.is_(None), NewsItem.end_date_utc >= now))

        if language_id > 0:
            criteria.append(NewsItem.language_id == language_id)

        if store_id > 0:
            mapped_to_store = exists().where(
                and_(
                    news_item_store_mappings.c.news_item_id == NewsItem.id,
                    news_item_store_mappings.c.store_id == store_id,
                )
            )
            criteria.append(or_(NewsItem.limited_to_stores.is_(False), mapped_to_store))

        return criteria

    async def get_all_news(
        self,
        language_id: int = 0,
        store_id: int = 0,
        page_index: int = 0,
        page_size: int = 2**31 - 1,
        show_hidden: bool = False,
        include_comments: bool = False,
    ) -> PagedList[NewsItem]:
        """
        List news items, newest first.

        Items are ordered by their scheduled start time, falling back to the
        creation time. Comments and their authors are loaded eagerly only when
        ``include_comments`` is set.
        """
        criteria = self._build_criteria(language_id, store_id, show_hidden)

        stmt = select(NewsItem)
        if include_comments:
            stmt = stmt.options(selectinload(NewsItem.comments).selectinload(NewsComment.customer))
        count_stmt = select(func.count(NewsItem.id))
        if criteria:
            stmt = stmt.where(and_(*criteria))
            count_stmt = count_stmt.where(and_(*criteria))

        count_result = await self._session.execute(count_stmt)
        total = count_result.scalar() or 0

        sort_date = func.coalesce(NewsItem.start_date_utc, NewsItem.created_on_utc)
        stmt = (
            stmt.order_by(sort_date.desc(), NewsItem.id.desc())
            .offset(page_index * page_size)
            .limit(page_size)
        )
        result = await self._session.execute(stmt)
        return PagedList(
            items=list(result.scalars().all()),
            page_index=page_index,
            page_size=page_size,
            total_count=total,
        )

    async def get_news_comments_count(self, news_item: NewsItem, is_approved: Optional[bool] = None) -> int:
        """Count comments of a news item, optionally filtered by approval state."""
        stmt = select(func.count(NewsComment.id)).where(NewsComment.news_item_id == news_item.id)
        if is_approved is not None:
            stmt = stmt.where(NewsComment.is_approved.is_(is_approved))
        result = await self._session.execute(stmt)
        return result.scalar() or 0
