"""House vote API schemas.

Upstream payloads are parsed leniently: unknown keys are ignored and every
field the app can live without is optional.
"""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field, field_validator


class VoteCast(StrEnum):
    """Possible member vote values."""

    YEA = "Yea"
    NAY = "Nay"
    PRESENT = "Present"
    NOT_VOTING = "Not Voting"


class HouseVoteSchema(BaseModel):
    """Roll-call vote as listed by /house-vote."""

    congress: int | None = None
    session_number: int | None = Field(alias="sessionNumber", default=None)
    roll_call_number: int = Field(alias="rollCallNumber")
    legislation_type: str | None = Field(alias="legislationType", default=None)
    legislation_number: str | None = Field(alias="legislationNumber", default=None)
    result: str | None = None
    start_date: datetime | None = Field(alias="startDate", default=None)
    vote_question: str | None = Field(alias="voteQuestion", default=None)

    class Config:
        populate_by_name = True

    @field_validator("legislation_type", "legislation_number", mode="before")
    @classmethod
    def _as_text(cls, value):
        if value is None:
            return None
        text = str(value).strip()
        return text or None


class PartySchema(BaseModel):
    """Party reference inside a party total."""

    type: str | None = None
    name: str | None = None


class PartyTotalSchema(BaseModel):
    """Per-party tally of one roll call."""

    party: PartySchema | None = None
    yea_total: int | None = Field(alias="yeaTotal", default=None)
    nay_total: int | None = Field(alias="nayTotal", default=None)
    present_total: int | None = Field(alias="presentTotal", default=None)
    not_voting_total: int | None = Field(alias="notVotingTotal", default=None)

    class Config:
        populate_by_name = True


class HouseVoteDetailSchema(HouseVoteSchema):
    """Roll-call vote with party totals."""

    roll_call_number: int | None = Field(alias="rollCallNumber", default=None)
    vote_party_total: list[PartyTotalSchema] = Field(alias="votePartyTotal", default_factory=list)


class MemberVoteSchema(BaseModel):
    """Individual member vote."""

    bioguide_id: str | None = Field(alias="bioguideID", default=None)
    first_name: str | None = Field(alias="firstName", default=None)
    last_name: str | None = Field(alias="lastName", default=None)
    vote_party: str | None = Field(alias="voteParty", default=None)
    vote_state: str | None = Field(alias="voteState", default=None)
    vote_cast: str | None = Field(alias="voteCast", default=None)

    class Config:
        populate_by_name = True
