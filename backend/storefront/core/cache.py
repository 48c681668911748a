"""
In-memory cache manager with read-through population.

Entries are stored together with their expiry time, expired entries are
dropped lazily on access.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timedelta
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple, TypeVar

from loguru import logger

T = TypeVar("T")

# Format: storefront.pres.news.homepage-{language_id}-{store_id}
HOMEPAGE_NEWSMODEL_KEY = "storefront.pres.news.homepage-{}-{}"


class MemoryCacheManager:
    """Process-local cache keyed by opaque strings."""

    def __init__(self, default_ttl_seconds: int = 3600) -> None:
        self._default_ttl_seconds = default_ttl_seconds
        # Format: {key: (value, expiry_time)}
        self._entries: Dict[str, Tuple[Any, datetime]] = {}
        self._locks: Dict[str, asyncio.Lock] = {}

    def _lookup(self, key: str) -> Tuple[bool, Any]:
        entry = self._entries.get(key)
        if entry is None:
            return False, None
        value, expiry = entry
        if expiry < datetime.now():
            self._entries.pop(key, None)
            return False, None
        return True, value

    def is_set(self, key: str) -> bool:
        found, _ = self._lookup(key)
        return found

    def set(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> None:
        ttl = self._default_ttl_seconds if ttl_seconds is None else ttl_seconds
        self._entries[key] = (value, datetime.now() + timedelta(seconds=ttl))

    async def get(
        self,
        key: str,
        acquire: Callable[[], Awaitable[T]],
        ttl_seconds: Optional[int] = None,
    ) -> T:
        """
        Return the cached value for ``key``, computing it with ``acquire`` on a miss.

        Concurrent misses for the same key wait on one another so that
        ``acquire`` runs once per population.
        """
        found, value = self._lookup(key)
        if found:
            logger.debug(f"Cache hit: {key}")
            return value

        lock = self._locks.setdefault(key, asyncio.Lock())
        async with lock:
            found, value = self._lookup(key)
            if found:
                logger.debug(f"Cache hit after wait: {key}")
                return value

            logger.debug(f"Cache miss, populating: {key}")
            value = await acquire()
            self.set(key, value, ttl_seconds)
            return value

    def remove(self, key: str) -> None:
        """Invalidate a single entry."""
        self._locks.pop(key, None)
        if self._entries.pop(key, None) is not None:
            logger.info(f"Removed cache entry: {key}")

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()
        self._locks.clear()
        logger.info("Cache cleared")
