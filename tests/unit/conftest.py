"""Shared fixtures: fake clock, cache store, upstream repository with mocked clients."""

from unittest.mock import AsyncMock

import pytest

from app.repositories import CacheStore, UpstreamRepository
from app.services.voting import VoteAggregator, VoteFeed


class FakeClock:
    """Monotonic clock the tests move by hand."""

    def __init__(self, now: float = 1_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return CacheStore(clock=clock)


@pytest.fixture
def voting_client():
    return AsyncMock()


@pytest.fixture
def bill_client():
    return AsyncMock()


@pytest.fixture
def rep_client():
    return AsyncMock()


@pytest.fixture
def upstream(store, voting_client, bill_client, rep_client):
    return UpstreamRepository(store, voting_client, bill_client, rep_client)


@pytest.fixture
def aggregator(upstream):
    return VoteAggregator(upstream, congress=119, session=2)


@pytest.fixture
def feed(upstream, aggregator):
    return VoteFeed(upstream, aggregator)
