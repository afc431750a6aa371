"""Voting domain models - votes, member votes and aggregated views."""

from app.models.voting.entities import AggregatedVoteView, Impact, PartyBreakdown
from app.models.voting.vote import MemberVote, Vote

__all__ = [
    "Vote",
    "MemberVote",
    "Impact",
    "PartyBreakdown",
    "AggregatedVoteView",
]
