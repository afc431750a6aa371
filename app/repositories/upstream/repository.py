"""Upstream repository - cache-through access to every upstream resource class."""

import asyncio
import copy
from collections.abc import Awaitable, Callable

from loguru import logger

from app.models.common import cache_key, ttl_for
from app.repositories.common import CacheStore
from congress_client import BillClient, RepresentativeClient, ResourceClass, VotingClient
from congress_client.legislation import BILL_ENDPOINTS


class UpstreamRepository:
    """Fetch-or-cache wrapper around the upstream clients.

    Hit: return the cached copy, no upstream call. Miss: fetch, store under the
    resource class TTL, return. Failures propagate and are never cached, so the
    next call goes upstream again.

    Concurrent misses for one key each fetch upstream unless `single_flight`
    is on, in which case they share one in-flight call.
    """

    def __init__(
        self,
        store: CacheStore,
        voting_client: VotingClient,
        bill_client: BillClient,
        rep_client: RepresentativeClient,
        single_flight: bool = False,
    ):
        self._store = store
        self._voting = voting_client
        self._bills = bill_client
        self._reps = rep_client
        self._single_flight = single_flight
        self._in_flight: dict[str, asyncio.Task] = {}
        logger.debug("UpstreamRepository initialized (single_flight={})", single_flight)

    @property
    def store(self) -> CacheStore:
        return self._store

    async def fetch_or_cache(
        self,
        key: str,
        resource: ResourceClass,
        fetch: Callable[[], Awaitable[dict]],
    ) -> dict:
        """Cached value for `key`, or the result of `fetch` stored under the TTL of `resource`."""
        cached = await self._store.get(key)
        if cached is not None:
            logger.debug("Cache hit: {}", key)
            return cached

        logger.info("Cache miss: {} - fetching fresh data", key)
        if self._single_flight:
            return await self._fetch_shared(key, resource, fetch)
        return await self._fetch_and_store(key, resource, fetch)

    async def _fetch_and_store(self, key: str, resource: ResourceClass, fetch: Callable[[], Awaitable[dict]]) -> dict:
        data = await fetch()
        await self._store.set(key, data, ttl_for(resource))
        return data

    async def _fetch_shared(self, key: str, resource: ResourceClass, fetch: Callable[[], Awaitable[dict]]) -> dict:
        task = self._in_flight.get(key)
        if task is None:
            task = asyncio.ensure_future(self._fetch_and_store(key, resource, fetch))
            self._in_flight[key] = task
            task.add_done_callback(lambda done: self._forget(key, done))
        else:
            logger.debug("Joining in-flight fetch: {}", key)
        return copy.deepcopy(await task)

    def _forget(self, key: str, task: asyncio.Task) -> None:
        if self._in_flight.get(key) is task:
            del self._in_flight[key]

    # ========== Resource classes ==========

    async def vote_list(self, congress: int, session: int, limit: int) -> dict:
        resource = ResourceClass.VOTE_LIST
        return await self.fetch_or_cache(
            cache_key(resource, congress, session, limit),
            resource,
            lambda: self._voting.house_votes(congress, session, limit),
        )

    async def bill(self, congress: int, bill_type: str, number: str, endpoint: str) -> dict:
        resource = BILL_ENDPOINTS.get(endpoint)
        if resource is None:
            raise ValueError(f"Unsupported bill endpoint: {endpoint!r}")
        return await self.fetch_or_cache(
            cache_key(resource, congress, bill_type, number),
            resource,
            lambda: self._bills.bill_resource(congress, bill_type, number, endpoint),
        )

    async def bill_titles(self, congress: int, bill_type: str, number: str) -> dict:
        return await self.bill(congress, bill_type, number, "titles")

    async def bill_summaries(self, congress: int, bill_type: str, number: str) -> dict:
        return await self.bill(congress, bill_type, number, "summaries")

    async def vote_detail(self, congress: int, session: int, roll: int) -> dict:
        resource = ResourceClass.VOTE_DETAIL
        return await self.fetch_or_cache(
            cache_key(resource, congress, session, roll),
            resource,
            lambda: self._voting.house_vote(congress, session, roll),
        )

    async def vote_members(self, congress: int, session: int, roll: int) -> dict:
        resource = ResourceClass.VOTE_MEMBERS
        return await self.fetch_or_cache(
            cache_key(resource, congress, session, roll),
            resource,
            lambda: self._voting.house_vote_members(congress, session, roll),
        )

    async def rep_lookup(self, zip_code: str) -> dict:
        resource = ResourceClass.REP_LOOKUP
        return await self.fetch_or_cache(
            cache_key(resource, zip_code),
            resource,
            lambda: self._reps.members_by_zip(zip_code),
        )
