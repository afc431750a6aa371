"""Pure vote formulas - no dependencies, easily testable."""

from collections.abc import Iterable

from app.models.voting import Impact, MemberVote
from congress_client.voting import VoteCast

HIGH_IMPACT_MIN_TOTAL = 200
HIGH_IMPACT_MAX_MARGIN = 20


def tally(member_votes: Iterable[MemberVote]) -> tuple[int, int]:
    """(yea, nay) counts. Present and Not Voting are ignored."""
    yea = nay = 0
    for m in member_votes:
        if m.vote_cast == VoteCast.YEA:
            yea += 1
        elif m.vote_cast == VoteCast.NAY:
            nay += 1
    return yea, nay


def classify_impact(member_votes: Iterable[MemberVote]) -> Impact:
    """High impact: more than 200 yea+nay votes decided by fewer than 20."""
    yea, nay = tally(member_votes)
    total = yea + nay
    margin = abs(yea - nay)
    if total > HIGH_IMPACT_MIN_TOTAL and margin < HIGH_IMPACT_MAX_MARGIN:
        return Impact.HIGH
    return Impact.LOW
