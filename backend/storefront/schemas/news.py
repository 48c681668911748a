"""
News view models rendered by storefront pages
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from storefront.utils.paging import PagedList


class NewsCommentModel(BaseModel):
    """Approved comment as shown under a news item"""
    id: int = Field(..., description="Comment ID")
    customer_id: Optional[int] = Field(None, description="Author customer ID")
    customer_name: str = Field("", description="Formatted author name")
    customer_avatar_url: Optional[str] = Field(None, description="Author avatar URL")
    comment_title: Optional[str] = Field(None, description="Comment title")
    comment_text: Optional[str] = Field(None, description="Comment text")
    created_on: datetime = Field(..., description="Creation time in the viewer's time zone")
    allow_viewing_profiles: bool = Field(False, description="Author profile link may be shown")


class AddNewsCommentModel(BaseModel):
    """Comment form attached to a news item"""
    comment_title: Optional[str] = Field(None, description="Comment title")
    comment_text: Optional[str] = Field(None, description="Comment text")
    display_captcha: bool = Field(False, description="Render captcha on the form")


class NewsItemModel(BaseModel):
    """News item as shown on the storefront"""
    id: int = 0
    meta_keywords: Optional[str] = None
    meta_description: Optional[str] = None
    meta_title: Optional[str] = None
    se_name: str = ""
    title: str = ""
    short: str = ""
    full: str = ""
    allow_comments: bool = False
    number_of_comments: int = 0
    created_on: Optional[datetime] = None
    comments: List[NewsCommentModel] = Field(default_factory=list)
    add_new_comment: AddNewsCommentModel = Field(default_factory=AddNewsCommentModel)


class HomePageNewsItemsModel(BaseModel):
    """News block of the home page"""
    working_language_id: int
    news_items: List[NewsItemModel] = Field(default_factory=list)


class NewsPagingFilteringModel(BaseModel):
    """Paging command of the news archive plus the pager state of the loaded page"""
    page_number: int = 0
    page_size: int = 0
    page_index: int = 0
    total_items: int = 0
    total_pages: int = 0
    first_item: int = 0
    last_item: int = 0
    has_previous_page: bool = False
    has_next_page: bool = False

    def load_paged_list(self, paged_list: PagedList) -> None:
        """Copy pager state from a loaded page"""
        self.page_index = paged_list.page_index
        self.page_number = paged_list.page_index + 1
        self.page_size = paged_list.page_size
        self.total_items = paged_list.total_count
        self.total_pages = paged_list.total_pages
        self.has_previous_page = paged_list.has_previous_page
        self.has_next_page = paged_list.has_next_page
        self.first_item = paged_list.page_index * paged_list.page_size + 1 if paged_list.total_count else 0
        self.last_item = min(paged_list.total_count, (paged_list.page_index + 1) * paged_list.page_size)


class NewsItemListModel(BaseModel):
    """One page of the news archive"""
    working_language_id: int
    paging_filtering_context: NewsPagingFilteringModel = Field(default_factory=NewsPagingFilteringModel)
    news_items: List[NewsItemModel] = Field(default_factory=list)
