"""Representative lookup entities and vote card display state."""

from dataclasses import dataclass

from app.models.common import BaseEntity
from app.models.voting import AggregatedVoteView, MemberVote


@dataclass(frozen=True)
class Representative(BaseEntity):
    """House member serving a ZIP code. Only used as a filter key."""

    last_name: str
    first_name: str
    state: str | None = None
    district: str | None = None

    @classmethod
    def from_name(cls, name: str, state: str | None = None, district: str | None = None) -> "Representative":
        """Split a raw name: the last token is the last name, the rest the first name."""
        parts = name.split()
        return cls(
            last_name=parts[-1] if parts else "",
            first_name=" ".join(parts[:-1]),
            state=state,
            district=district,
        )


@dataclass(frozen=True)
class VoteCard(BaseEntity):
    """Display state of one aggregated vote."""

    view: AggregatedVoteView
    visible: bool = True
    filtered: bool = False
    highlighted: tuple[int, ...] = ()

    def is_highlighted(self, member_index: int) -> bool:
        return member_index in self.highlighted

    @property
    def highlighted_members(self) -> frozenset[MemberVote]:
        return frozenset(self.view.members[i] for i in self.highlighted)

    def is_member_highlighted(self, member: MemberVote) -> bool:
        """Whether `member` (e.g. from a party breakdown) is one of the highlighted entries."""
        return member in self.highlighted_members
