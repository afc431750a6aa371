"""Cache store - in-memory TTL storage for upstream payloads."""

import asyncio
import copy
import time
from collections.abc import Callable
from typing import Any

from loguru import logger

from app.models.common import CacheEntry


class CacheStore:
    """Process-wide key -> (value, expiry) map.

    Unbounded; entries only leave through expiry or `flush_all`. Expired
    entries are dropped lazily on read and by `sweep`. Values are deep-copied
    in and out so no caller can mutate what another one reads.

    All operations are coroutines so the store can be swapped for a remote one
    without touching callers; none of them suspends, so concurrent callers on
    one event loop always see a consistent map (last writer wins).
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._hits = 0
        self._misses = 0
        self._sweeper: asyncio.Task | None = None
        logger.debug("CacheStore initialized")

    def __len__(self) -> int:
        return len(self._entries)

    async def get(self, key: str) -> Any | None:
        """Cached value, or None when absent or expired."""
        entry = self._entries.get(key)
        if entry is None:
            self._misses += 1
            return None

        if entry.is_expired(self._clock()):
            del self._entries[key]
            self._misses += 1
            logger.debug("Cache expired: {}", key)
            return None

        self._hits += 1
        return copy.deepcopy(entry.value)

    async def set(self, key: str, value: Any, ttl: float) -> None:
        """Store value, replacing any previous entry and resetting its expiry."""
        self._entries[key] = CacheEntry(key=key, value=copy.deepcopy(value), expires_at=self._clock() + ttl)
        logger.debug("Cache saved: {} (ttl={}s)", key, ttl)

    async def flush_all(self) -> int:
        """Remove every entry. Returns how many were removed."""
        count = len(self._entries)
        self._entries.clear()
        logger.info("All cache cleared ({} entries)", count)
        return count

    async def sweep(self) -> int:
        """Drop expired entries. Returns how many were removed."""
        now = self._clock()
        expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug("Cache sweep removed {} entries", len(expired))
        return len(expired)

    def stats(self) -> dict[str, int]:
        return {"keys": len(self._entries), "hits": self._hits, "misses": self._misses}

    async def run_sweeper(self, interval: float) -> None:
        """Sweep forever every `interval` seconds."""
        while True:
            await asyncio.sleep(interval)
            await self.sweep()

    def start_sweeper(self, interval: float) -> asyncio.Task:
        """Schedule `run_sweeper` on the running loop (idempotent)."""
        if self._sweeper is None or self._sweeper.done():
            self._sweeper = asyncio.create_task(self.run_sweeper(interval))
            logger.info("Cache sweeper started: every {}s", interval)
        return self._sweeper

    async def stop_sweeper(self) -> None:
        if self._sweeper is not None:
            self._sweeper.cancel()
            try:
                await self._sweeper
            except asyncio.CancelledError:
                pass
            self._sweeper = None
