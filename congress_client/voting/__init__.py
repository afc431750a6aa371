"""House vote API client."""

from congress_client.voting.client import VotingClient
from congress_client.voting.schemas import (
    HouseVoteDetailSchema,
    HouseVoteSchema,
    MemberVoteSchema,
    PartySchema,
    PartyTotalSchema,
    VoteCast,
)

__all__ = [
    "VotingClient",
    "VoteCast",
    "HouseVoteSchema",
    "HouseVoteDetailSchema",
    "PartySchema",
    "PartyTotalSchema",
    "MemberVoteSchema",
]
