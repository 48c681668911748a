"""
News domain facade.

The facade provides a stable entry point for page handlers to build news
view models without knowing which repositories and services back them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.cache import MemoryCacheManager
from storefront.core.config import Settings, settings as default_settings
from storefront.core.context import RequestContext
from storefront.schemas.news import (
    HomePageNewsItemsModel,
    NewsItemListModel,
    NewsItemModel,
    NewsPagingFilteringModel,
)
from storefront.services.datetime_helper import DateTimeHelper
from storefront.services.picture_service import PictureService
from storefront.services.slug_service import SlugService

from .factory import NewsModelFactory
from .repositories import NewsRepository


@dataclass
class NewsFacade:
    """Facade wiring the news model factory to a database session."""

    session: AsyncSession
    cache: MemoryCacheManager
    settings: Settings = field(default_factory=lambda: default_settings)

    @property
    def repository(self) -> NewsRepository:
        return NewsRepository(self.session)

    @property
    def model_factory(self) -> NewsModelFactory:
        return NewsModelFactory(
            news_lookup=self.repository,
            slug_lookup=SlugService(self.session),
            time_converter=DateTimeHelper(self.settings),
            picture_resolver=PictureService(self.settings),
            cache=self.cache,
            settings=self.settings,
        )

    async def get_home_page_news(self, context: RequestContext) -> HomePageNewsItemsModel:
        return await self.model_factory.prepare_home_page_news_items_model(context)

    async def list_news(
        self,
        command: NewsPagingFilteringModel,
        context: RequestContext,
    ) -> NewsItemListModel:
        return await self.model_factory.prepare_news_item_list_model(command, context)

    async def get_news_item(self, news_id: int, context: RequestContext) -> Optional[NewsItemModel]:
        """Build the news item page model with its approved comments."""
        news_item = await self.repository.fetch_by_id(news_id)
        if news_item is None or not news_item.published:
            return None
        return await self.model_factory.prepare_news_item_model(
            NewsItemModel(),
            news_item,
            True,
            context,
        )
