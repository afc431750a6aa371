"""Voting services - aggregation, feed and formulas."""

from app.services.voting.aggregator import VoteAggregator
from app.services.voting.feed import VoteFeed
from app.services.voting.formulas import classify_impact

__all__ = [
    "VoteAggregator",
    "VoteFeed",
    "classify_impact",
]
