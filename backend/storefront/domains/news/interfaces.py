"""
Collaborator interfaces used by the news model factory.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Awaitable, Callable, Optional, Protocol, TypeVar

from storefront.models import Customer, NewsItem
from storefront.services.picture_service import PictureType
from storefront.utils.paging import PagedList

T = TypeVar("T")


class NewsLookup(Protocol):
    """Read access to published news."""

    async def get_all_news(
        self,
        language_id: int = 0,
        store_id: int = 0,
        page_index: int = 0,
        page_size: int = 2**31 - 1,
    ) -> PagedList[NewsItem]:
        ...

    async def get_news_comments_count(self, news_item: NewsItem, is_approved: Optional[bool] = None) -> int:
        ...


class SlugLookup(Protocol):
    async def get_se_name(
        self,
        entity_name: str,
        entity_id: int,
        language_id: int,
        *,
        return_default_value: bool = True,
        ensure_two_published_languages: bool = True,
    ) -> str:
        ...


class UserTimeConverter(Protocol):
    def convert_to_user_time(self, value: datetime, customer: Optional[Customer] = None) -> datetime:
        ...


class PictureUrlResolver(Protocol):
    def get_picture_url(
        self,
        picture_id: int,
        target_size: int = 0,
        show_default_picture: bool = True,
        default_picture_type: PictureType = PictureType.ENTITY,
    ) -> str:
        ...


class CacheManager(Protocol):
    async def get(self, key: str, acquire: Callable[[], Awaitable[T]]) -> T:
        ...

    def remove(self, key: str) -> Any:
        ...

    def clear(self) -> Any:
        ...
