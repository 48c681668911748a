"""
Pydantic view models
"""

from .news import (
    AddNewsCommentModel,
    HomePageNewsItemsModel,
    NewsCommentModel,
    NewsItemListModel,
    NewsItemModel,
    NewsPagingFilteringModel,
)

__all__ = [
    "AddNewsCommentModel",
    "HomePageNewsItemsModel",
    "NewsCommentModel",
    "NewsItemListModel",
    "NewsItemModel",
    "NewsPagingFilteringModel",
]
