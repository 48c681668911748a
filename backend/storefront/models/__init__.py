"""
Models package
"""

from .base import Base, BaseModel
from .localization import Language
from .customer import Customer
from .news import NewsItem, NewsComment, news_item_store_mappings
from .seo import UrlRecord

__all__ = [
    "Base",
    "BaseModel",
    "Language",
    "Customer",
    "NewsItem",
    "NewsComment",
    "news_item_store_mappings",
    "UrlRecord",
]
