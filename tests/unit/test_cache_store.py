"""Tests for the in-memory cache store."""

import asyncio

import pytest

from app.models.common.cache import SIX_HOURS, TTL_POLICY, cache_key, ttl_for
from congress_client import ResourceClass


class TestGetSet:
    @pytest.mark.asyncio
    async def test_missing_key_is_absent(self, store):
        assert await store.get("nope") is None

    @pytest.mark.asyncio
    async def test_set_then_get(self, store):
        await store.set("k", {"a": 1}, ttl=60)
        assert await store.get("k") == {"a": 1}

    @pytest.mark.asyncio
    async def test_set_overwrites_and_resets_expiry(self, store, clock):
        await store.set("k", {"v": 1}, ttl=10)
        clock.advance(8)
        await store.set("k", {"v": 2}, ttl=10)
        clock.advance(8)
        assert await store.get("k") == {"v": 2}

    @pytest.mark.asyncio
    async def test_reads_are_copies(self, store):
        await store.set("k", {"items": [1, 2]}, ttl=60)
        first = await store.get("k")
        first["items"].append(3)
        assert await store.get("k") == {"items": [1, 2]}

    @pytest.mark.asyncio
    async def test_writes_are_copies(self, store):
        value = {"items": [1]}
        await store.set("k", value, ttl=60)
        value["items"].append(2)
        assert await store.get("k") == {"items": [1]}


class TestExpiry:
    @pytest.mark.asyncio
    async def test_present_strictly_before_ttl(self, store, clock):
        await store.set("k", {"v": 1}, ttl=SIX_HOURS)
        clock.advance(SIX_HOURS - 0.001)
        assert await store.get("k") == {"v": 1}

    @pytest.mark.asyncio
    async def test_absent_after_ttl(self, store, clock):
        await store.set("k", {"v": 1}, ttl=SIX_HOURS)
        clock.advance(SIX_HOURS + 0.001)
        assert await store.get("k") is None
        assert len(store) == 0

    @pytest.mark.asyncio
    async def test_sweep_removes_only_expired(self, store, clock):
        await store.set("short", {}, ttl=5)
        await store.set("long", {}, ttl=500)
        clock.advance(10)

        assert await store.sweep() == 1
        assert len(store) == 1
        assert await store.get("long") == {}

    @pytest.mark.asyncio
    async def test_sweeper_task_runs_and_stops(self, store, clock):
        await store.set("k", {}, ttl=1)
        clock.advance(2)

        task = store.start_sweeper(0.01)
        assert store.start_sweeper(0.01) is task
        await asyncio.sleep(0.05)
        await store.stop_sweeper()

        assert len(store) == 0
        assert task.cancelled()


class TestFlush:
    @pytest.mark.asyncio
    async def test_flush_all_removes_everything(self, store):
        await store.set("a", {}, ttl=60)
        await store.set("b", {}, ttl=60)

        assert await store.flush_all() == 2
        assert await store.get("a") is None
        assert await store.get("b") is None

    @pytest.mark.asyncio
    async def test_store_usable_after_flush(self, store):
        await store.set("a", {"v": 1}, ttl=60)
        await store.flush_all()
        await store.set("a", {"v": 2}, ttl=60)
        assert await store.get("a") == {"v": 2}


class TestStats:
    @pytest.mark.asyncio
    async def test_counts_hits_and_misses(self, store):
        await store.get("a")
        await store.set("a", {}, ttl=60)
        await store.get("a")
        assert store.stats() == {"keys": 1, "hits": 1, "misses": 1}


class TestPolicy:
    def test_ttl_per_resource_class(self):
        assert ttl_for(ResourceClass.VOTE_LIST) == 6 * 60 * 60
        assert ttl_for(ResourceClass.REP_LOOKUP) == 24 * 60 * 60
        for resource in (
            ResourceClass.BILL_TITLE,
            ResourceClass.BILL_SUMMARY,
            ResourceClass.VOTE_DETAIL,
            ResourceClass.VOTE_MEMBERS,
        ):
            assert ttl_for(resource) == 180 * 24 * 60 * 60

    def test_every_resource_class_has_a_ttl(self):
        assert set(TTL_POLICY) == set(ResourceClass)

    def test_ttl_accepts_plain_strings(self):
        assert ttl_for("vote-list") == SIX_HOURS

    def test_cache_key_is_deterministic(self):
        assert cache_key(ResourceClass.VOTE_DETAIL, 119, 2, 42) == "vote-detail:119:2:42"
        assert cache_key(ResourceClass.BILL_TITLE, 119, "HR", "100") == "bill-title:119:hr:100"
