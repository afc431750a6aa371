"""Cache entries and the TTL policy of each resource class."""

from dataclasses import dataclass
from typing import Any

from app.models.common.base import BaseEntity
from congress_client.resources import ResourceClass

SIX_HOURS = 6 * 60 * 60
ONE_DAY = 24 * 60 * 60
SIX_MONTHS = 6 * 30 * ONE_DAY

TTL_POLICY: dict[ResourceClass, int] = {
    ResourceClass.VOTE_LIST: SIX_HOURS,
    ResourceClass.BILL_TITLE: SIX_MONTHS,
    ResourceClass.BILL_SUMMARY: SIX_MONTHS,
    ResourceClass.VOTE_DETAIL: SIX_MONTHS,
    ResourceClass.VOTE_MEMBERS: SIX_MONTHS,
    ResourceClass.REP_LOOKUP: ONE_DAY,
}


def ttl_for(resource: ResourceClass) -> int:
    """TTL in seconds. Depends on the resource class only, never on content."""
    return TTL_POLICY[ResourceClass(resource)]


def cache_key(resource: ResourceClass, *parts: Any) -> str:
    """Compose a deterministic key, e.g. ``vote-detail:119:2:42``."""
    return ":".join([str(resource), *(str(p).lower() for p in parts)])


@dataclass(frozen=True)
class CacheEntry(BaseEntity):
    """Stored payload with its absolute expiry time."""

    key: str
    value: Any
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at
