from __future__ import annotations

from datetime import datetime

from storefront.schemas.news import NewsCommentModel, NewsItemModel, NewsPagingFilteringModel
from storefront.utils.paging import PagedList


def test_load_paged_list_last_page() -> None:
    paging = NewsPagingFilteringModel(page_number=3, page_size=4)

    paging.load_paged_list(PagedList(items=["a", "b"], page_index=2, page_size=4, total_count=10))

    assert paging.page_number == 3
    assert paging.total_pages == 3
    assert paging.first_item == 9
    assert paging.last_item == 10
    assert paging.has_previous_page is True
    assert paging.has_next_page is False


def test_load_empty_paged_list() -> None:
    paging = NewsPagingFilteringModel()

    paging.load_paged_list(PagedList(page_index=0, page_size=10, total_count=0))

    assert paging.page_number == 1
    assert paging.total_pages == 0
    assert paging.first_item == 0
    assert paging.last_item == 0
    assert paging.has_next_page is False


def test_news_item_models_do_not_share_comment_lists() -> None:
    first = NewsItemModel()
    second = NewsItemModel()

    first.comments.append(NewsCommentModel(id=1, created_on=datetime(2024, 1, 1)))

    assert second.comments == []
    assert first.add_new_comment is not second.add_new_comment
