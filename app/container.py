"""Dependency Injection container - initialized at app startup."""

import asyncio
import threading
from collections.abc import Awaitable, Callable
from typing import Any

from loguru import logger

from app.repositories.common.cache import CacheStore
from app.repositories.upstream.repository import UpstreamRepository
from app.services.representatives.matcher import RepresentativeMatcher
from app.services.voting.aggregator import VoteAggregator
from app.services.voting.feed import VoteFeed
from congress_client import BillClient, RepresentativeClient, VotingClient
from settings import (
    CACHE_SINGLE_FLIGHT,
    CACHE_SWEEP_INTERVAL,
    DEFAULT_CONGRESS,
    DEFAULT_SESSION,
    MAX_CONCURRENT,
)


class Container:
    """Application DI container - holds all singleton instances.

    The cache store is created once here and handed to the repository that
    owns it; nothing else reaches it through module globals.
    """

    _instance = None
    _initialized = False
    _loop: asyncio.AbstractEventLoop | None = None
    _thread: threading.Thread | None = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(
        self,
        store: CacheStore | None = None,
        voting_client: VotingClient | None = None,
        bill_client: BillClient | None = None,
        rep_client: RepresentativeClient | None = None,
        single_flight: bool = CACHE_SINGLE_FLIGHT,
    ) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Storage and upstream clients
        self.store = store or CacheStore()
        self._clients = [
            voting_client or VotingClient(max_concurrent=MAX_CONCURRENT),
            bill_client or BillClient(max_concurrent=MAX_CONCURRENT),
            rep_client or RepresentativeClient(max_concurrent=MAX_CONCURRENT),
        ]

        # Repositories
        self.upstream = UpstreamRepository(self.store, *self._clients, single_flight=single_flight)

        # Services (with injected repos)
        self.aggregator = VoteAggregator(self.upstream, congress=DEFAULT_CONGRESS, session=DEFAULT_SESSION)
        self.feed = VoteFeed(self.upstream, self.aggregator)
        self.matcher = RepresentativeMatcher(self.upstream)

        self._initialized = True

    def reset(self) -> None:
        """Stop the loop and forget all instances so `init` can build new ones (tests)."""
        self.stop()
        self._initialized = False

    async def __aenter__(self):
        """Open upstream connections and start the cache sweeper."""
        self.init()
        for client in self._clients:
            client.open()
        self.store.start_sweeper(CACHE_SWEEP_INTERVAL)
        return self

    async def __aexit__(self, *_):
        await self.store.stop_sweeper()
        for client in self._clients:
            await client.aclose()
        logger.info("Container closed: cache {}", self.store.stats())

    # ========== Process-wide event loop ==========

    def start(self) -> asyncio.AbstractEventLoop:
        """Open the container on a background event loop owned by this process.

        Clients, the sweeper and every `run` call share that loop, so they stay
        open across callers on other threads. Idempotent.
        """
        with self._lock:
            if self._loop is None:
                self.init()
                loop = asyncio.new_event_loop()
                thread = threading.Thread(target=loop.run_forever, name="container-loop", daemon=True)
                thread.start()
                asyncio.run_coroutine_threadsafe(self.__aenter__(), loop).result()
                self._loop, self._thread = loop, thread
                logger.info("Container loop started")
            return self._loop

    def run(self, coro_fn: Callable[..., Awaitable[Any]], *args) -> Any:
        """Run `coro_fn(*args)` on the container loop and wait for the result."""
        loop = self.start()
        return asyncio.run_coroutine_threadsafe(coro_fn(*args), loop).result()

    def stop(self) -> None:
        """Close the container and shut its loop down."""
        with self._lock:
            if self._loop is None:
                return
            loop, thread = self._loop, self._thread
            self._loop, self._thread = None, None
        asyncio.run_coroutine_threadsafe(self.__aexit__(), loop).result()
        loop.call_soon_threadsafe(loop.stop)
        thread.join()
        loop.close()
        logger.info("Container loop stopped")


# Global container instance
container = Container()
