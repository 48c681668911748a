from __future__ import annotations

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.services.slug_service import SlugService
from tests.utils.news_builders import create_language, create_url_record


@pytest.mark.asyncio
async def test_localized_slug_is_used_without_two_languages_check(async_session: AsyncSession) -> None:
    service = SlugService(async_session)
    language = await create_language(async_session)
    await create_url_record(async_session, entity_id=1, slug="standard-slug")
    await create_url_record(async_session, entity_id=1, slug="localized-slug", language_id=language.id)

    assert await service.get_se_name(
        "NewsItem", 1, language.id, ensure_two_published_languages=False
    ) == "localized-slug"
    # only one published language, so the standard slug wins
    assert await service.get_se_name("NewsItem", 1, language.id) == "standard-slug"


@pytest.mark.asyncio
async def test_localized_slug_with_two_published_languages(async_session: AsyncSession) -> None:
    service = SlugService(async_session)
    english = await create_language(async_session)
    await create_language(async_session, name="Deutsch", culture="de-DE")
    await create_url_record(async_session, entity_id=1, slug="standard-slug")
    await create_url_record(async_session, entity_id=1, slug="localized-slug", language_id=english.id)

    assert await service.count_published_languages() == 2
    assert await service.get_se_name("NewsItem", 1, english.id) == "localized-slug"


@pytest.mark.asyncio
async def test_falls_back_to_standard_slug(async_session: AsyncSession) -> None:
    service = SlugService(async_session)
    language = await create_language(async_session)
    await create_url_record(async_session, entity_id=2, slug="standard-slug")
    await create_url_record(
        async_session,
        entity_id=2,
        slug="inactive-localized",
        language_id=language.id,
        is_active=False,
    )

    assert await service.get_se_name(
        "NewsItem", 2, language.id, ensure_two_published_languages=False
    ) == "standard-slug"
    assert await service.get_se_name(
        "NewsItem", 2, language.id, return_default_value=False, ensure_two_published_languages=False
    ) == ""


@pytest.mark.asyncio
async def test_unknown_entity_has_empty_slug(async_session: AsyncSession) -> None:
    service = SlugService(async_session)
    await create_url_record(async_session, entity_id=3, slug="product-slug", entity_name="Product")

    assert await service.get_se_name("NewsItem", 3, 0) == ""
