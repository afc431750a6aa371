"""Vote feed response schemas."""

from datetime import datetime

from pydantic import BaseModel


class MemberVoteItem(BaseModel):
    """One member's vote."""

    first_name: str | None
    last_name: str | None
    party: str | None
    state: str | None
    vote_cast: str | None


class PartyBreakdownItem(BaseModel):
    """Party totals with the members who voted under the party."""

    party: str
    name: str
    yea: int
    nay: int
    present: int
    not_voting: int
    members: list[MemberVoteItem]


class VoteCardItem(BaseModel):
    """Aggregated roll-call vote."""

    roll_call_number: int
    legislation_type: str | None
    legislation_number: str | None
    title: str
    summary: str
    question: str | None
    result: str | None
    start_date: datetime | None
    impact: str
    parties: list[PartyBreakdownItem]
    members: list[MemberVoteItem]


class VoteFeedResponse(BaseModel):
    """Vote feed response."""

    congress: int
    session: int
    items: list[VoteCardItem]
