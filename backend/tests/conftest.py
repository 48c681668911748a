"""Shared test fixtures for backend tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from storefront.core.cache import MemoryCacheManager
from storefront.core.config import Settings
from storefront.domains.news import NewsFacade
from storefront.models import Base


SQLITE_TEST_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def async_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Provide an async engine backed by a fresh in-memory SQLite database."""
    engine = create_async_engine(
        SQLITE_TEST_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def async_session_factory(
    async_engine: AsyncEngine,
) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Provide an async session factory bound to the test engine."""
    factory = async_sessionmaker(
        async_engine,
        expire_on_commit=False,
        class_=AsyncSession,
    )
    yield factory


@pytest_asyncio.fixture
async def async_session(
    async_session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Yield an AsyncSession and ensure rollback between tests."""
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with every optional storefront feature switched on."""
    return Settings(
        MAIN_PAGE_NEWS_COUNT=3,
        NEWS_ARCHIVE_PAGE_SIZE=10,
        ALLOW_CUSTOMERS_TO_UPLOAD_AVATARS=True,
        ALLOW_VIEWING_PROFILES=True,
        CAPTCHA_ENABLED=True,
        CAPTCHA_SHOW_ON_NEWS_COMMENT_PAGE=True,
        DEFAULT_STORE_TIME_ZONE_ID="UTC",
    )


@pytest.fixture
def cache() -> MemoryCacheManager:
    return MemoryCacheManager(default_ttl_seconds=3600)


@pytest_asyncio.fixture
async def news_facade(
    async_session: AsyncSession,
    cache: MemoryCacheManager,
    test_settings: Settings,
) -> AsyncGenerator[NewsFacade, None]:
    """Shortcut fixture to interact with the news domain facade."""
    yield NewsFacade(async_session, cache, test_settings)
