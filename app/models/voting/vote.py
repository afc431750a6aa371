"""Roll-call vote and member vote entities."""

from dataclasses import dataclass
from datetime import datetime

from app.models.common import BaseEntity
from congress_client.voting import HouseVoteSchema, MemberVoteSchema


@dataclass(frozen=True)
class Vote(BaseEntity):
    """A roll-call vote as received from the vote list."""

    roll_call_number: int
    legislation_type: str | None = None
    legislation_number: str | None = None
    result: str | None = None
    start_date: datetime | None = None
    congress: int | None = None
    session: int | None = None
    vote_question: str | None = None

    @property
    def is_procedural(self) -> bool:
        """No bill attached (motions, quorum calls, elections of the Speaker)."""
        return not (self.legislation_type and self.legislation_number)

    @classmethod
    def from_schema(
        cls, schema: HouseVoteSchema, congress: int | None = None, session: int | None = None
    ) -> "Vote":
        """Build from the list schema; `congress`/`session` fill in what the item omits."""
        return cls(
            roll_call_number=schema.roll_call_number,
            legislation_type=schema.legislation_type,
            legislation_number=schema.legislation_number,
            result=schema.result,
            start_date=schema.start_date,
            congress=schema.congress or congress,
            session=schema.session_number or session,
            vote_question=schema.vote_question,
        )


@dataclass(frozen=True)
class MemberVote(BaseEntity):
    """How one member voted on one roll call."""

    first_name: str | None
    last_name: str | None
    party: str | None
    vote_cast: str | None
    bioguide_id: str | None = None
    state: str | None = None

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name) if p)

    @classmethod
    def from_schema(cls, schema: MemberVoteSchema) -> "MemberVote":
        return cls(
            first_name=schema.first_name,
            last_name=schema.last_name,
            party=schema.vote_party,
            vote_cast=schema.vote_cast,
            bioguide_id=schema.bioguide_id,
            state=schema.vote_state,
        )
