"""Models package - entities and cache policy for all domains."""

from app.models.common import TTL_POLICY, BaseEntity, CacheEntry, cache_key, ttl_for
from app.models.representatives import Representative, VoteCard
from app.models.voting import (
    AggregatedVoteView,
    Impact,
    MemberVote,
    PartyBreakdown,
    Vote,
)

__all__ = [
    # Common
    "BaseEntity",
    "CacheEntry",
    "TTL_POLICY",
    "cache_key",
    "ttl_for",
    # Voting
    "Vote",
    "MemberVote",
    "Impact",
    "PartyBreakdown",
    "AggregatedVoteView",
    # Representatives
    "Representative",
    "VoteCard",
]
