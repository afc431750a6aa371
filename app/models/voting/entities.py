"""Voting domain entities - aggregated views and computed analytics."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from app.models.common import BaseEntity
from app.models.voting.vote import MemberVote, Vote


class Impact(StrEnum):
    """Whether a vote was both high-turnout and close."""

    HIGH = "high"
    LOW = "low"


@dataclass(frozen=True)
class PartyBreakdown(BaseEntity):
    """Party totals of one roll call with the members who voted under that party."""

    party: str
    name: str
    yea: int = 0
    nay: int = 0
    present: int = 0
    not_voting: int = 0
    members: tuple[MemberVote, ...] = ()


@dataclass(frozen=True)
class AggregatedVoteView(BaseEntity):
    """One vote merged with its bill metadata, party totals, member votes and impact."""

    vote: Vote
    title: str
    summary: str
    question: str | None
    impact: Impact
    parties: tuple[PartyBreakdown, ...] = ()
    members: tuple[MemberVote, ...] = ()

    @property
    def roll_call_number(self) -> int:
        return self.vote.roll_call_number

    @property
    def result(self) -> str | None:
        return self.vote.result

    @property
    def start_date(self) -> datetime | None:
        return self.vote.start_date
