"""Services package - service class exports."""

from app.services.representatives import RepresentativeMatcher
from app.services.voting import VoteAggregator, VoteFeed

__all__ = [
    "RepresentativeMatcher",
    "VoteAggregator",
    "VoteFeed",
]
