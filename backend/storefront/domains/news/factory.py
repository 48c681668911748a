"""
Presentation model factory for news.

Projects news items and comments into view models for the home page block,
the news archive and the news item page.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger

from storefront.core.cache import HOMEPAGE_NEWSMODEL_KEY
from storefront.core.config import Settings
from storefront.core.context import RequestContext
from storefront.core.exceptions import InvalidArgumentError
from storefront.models import NewsComment, NewsItem
from storefront.schemas.news import (
    HomePageNewsItemsModel,
    NewsCommentModel,
    NewsItemListModel,
    NewsItemModel,
    NewsPagingFilteringModel,
)
from storefront.services.customer_formatting import format_customer_name
from storefront.services.picture_service import PictureType

from .interfaces import (
    CacheManager,
    NewsLookup,
    PictureUrlResolver,
    SlugLookup,
    UserTimeConverter,
)

NEWS_ITEM_ENTITY_NAME = "NewsItem"


class NewsModelFactory:
    """Builds news view models for the current request."""

    def __init__(
        self,
        *,
        news_lookup: NewsLookup,
        slug_lookup: SlugLookup,
        time_converter: UserTimeConverter,
        picture_resolver: PictureUrlResolver,
        cache: CacheManager,
        settings: Settings,
    ) -> None:
        self._news = news_lookup
        self._slugs = slug_lookup
        self._time = time_converter
        self._pictures = picture_resolver
        self._cache = cache
        self._settings = settings

    def prepare_news_comment_model(
        self,
        news_comment: Optional[NewsComment],
        context: RequestContext,
    ) -> NewsCommentModel:
        if news_comment is None:
            raise InvalidArgumentError("news_comment")

        customer = news_comment.customer
        model = NewsCommentModel(
            id=news_comment.id,
            customer_id=news_comment.customer_id,
            customer_name=format_customer_name(
                customer,
                self._settings.CUSTOMER_NAME_FORMAT,
                self._settings.GUEST_CUSTOMER_NAME,
            ),
            comment_title=news_comment.comment_title,
            comment_text=news_comment.comment_text,
            created_on=self._time.convert_to_user_time(news_comment.created_on_utc, context.customer),
            allow_viewing_profiles=(
                self._settings.ALLOW_VIEWING_PROFILES
                and customer is not None
                and not customer.is_guest
            ),
        )
        if self._settings.ALLOW_CUSTOMERS_TO_UPLOAD_AVATARS:
            avatar_picture_id = customer.avatar_picture_id if customer is not None else None
            model.customer_avatar_url = self._pictures.get_picture_url(
                avatar_picture_id or 0,
                self._settings.AVATAR_PICTURE_SIZE,
                self._settings.DEFAULT_AVATAR_ENABLED,
                default_picture_type=PictureType.AVATAR,
            )

        return model

    async def prepare_news_item_model(
        self,
        model: Optional[NewsItemModel],
        news_item: Optional[NewsItem],
        prepare_comments: bool,
        context: RequestContext,
    ) -> NewsItemModel:
        """
        Populate ``model`` in place from ``news_item`` and return it.

        Comments are only added when ``prepare_comments`` is set; then only
        approved comments are included, oldest first.
        """
        if model is None:
            raise InvalidArgumentError("model")
        if news_item is None:
            raise InvalidArgumentError("news_item")

        model.id = news_item.id
        model.meta_title = news_item.meta_title
        model.meta_description = news_item.meta_description
        model.meta_keywords = news_item.meta_keywords
        model.se_name = await self._slugs.get_se_name(
            NEWS_ITEM_ENTITY_NAME,
            news_item.id,
            news_item.language_id,
            ensure_two_published_languages=False,
        )
        model.title = news_item.title
        model.short = news_item.short
        model.full = news_item.full
        model.allow_comments = news_item.allow_comments
        model.created_on = self._time.convert_to_user_time(
            news_item.start_date_utc or news_item.created_on_utc,
            context.customer,
        )
        model.number_of_comments = await self._news.get_news_comments_count(news_item, is_approved=True)
        model.add_new_comment.display_captcha = (
            self._settings.CAPTCHA_ENABLED and self._settings.CAPTCHA_SHOW_ON_NEWS_COMMENT_PAGE
        )

        if prepare_comments:
            news_comments = sorted(
                (comment for comment in news_item.comments if comment.is_approved),
                key=lambda comment: comment.created_on_utc,
            )
            for news_comment in news_comments:
                model.comments.append(self.prepare_news_comment_model(news_comment, context))

        return model

    async def prepare_home_page_news_items_model(self, context: RequestContext) -> HomePageNewsItemsModel:
        cache_key = HOMEPAGE_NEWSMODEL_KEY.format(context.working_language_id, context.store_id)

        async def acquire() -> HomePageNewsItemsModel:
            news_items = await self._news.get_all_news(
                context.working_language_id,
                context.store_id,
                0,
                self._settings.MAIN_PAGE_NEWS_COUNT,
            )
            logger.debug(
                f"Building home page news for language {context.working_language_id}, "
                f"store {context.store_id}: {len(news_items.items)} items"
            )
            return HomePageNewsItemsModel(
                working_language_id=context.working_language_id,
                news_items=[
                    await self.prepare_news_item_model(NewsItemModel(), news_item, False, context)
                    for news_item in news_items.items
                ],
            )

        cached_model = await self._cache.get(cache_key, acquire)

        # Comments depend on the current customer and are not shown on the home page.
        # The cached model is shared between requests, so reset them on a copy only.
        model = cached_model.model_copy(deep=True)
        for news_item_model in model.news_items:
            news_item_model.comments.clear()
        return model

    async def prepare_news_item_list_model(
        self,
        command: NewsPagingFilteringModel,
        context: RequestContext,
    ) -> NewsItemListModel:
        model = NewsItemListModel(working_language_id=context.working_language_id)

        page_size = command.page_size if command.page_size > 0 else self._settings.NEWS_ARCHIVE_PAGE_SIZE
        page_number = command.page_number if command.page_number > 0 else 1

        news_items = await self._news.get_all_news(
            context.working_language_id,
            context.store_id,
            page_number - 1,
            page_size,
        )
        model.paging_filtering_context.load_paged_list(news_items)

        model.news_items = [
            await self.prepare_news_item_model(NewsItemModel(), news_item, False, context)
            for news_item in news_items.items
        ]
        return model
