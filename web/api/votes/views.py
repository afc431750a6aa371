"""Vote API views - thin layer over the upstream repository and feed service."""

from app.container import container
from app.models.voting import AggregatedVoteView, MemberVote
from settings import DEFAULT_CONGRESS, DEFAULT_LIMIT, DEFAULT_SESSION
from web.api.errors import upstream_errors, validate_positive

from .schemas import MemberVoteItem, PartyBreakdownItem, VoteCardItem, VoteFeedResponse


@upstream_errors("Vote list fetch failed")
async def get_votes(
    congress: int = DEFAULT_CONGRESS,
    session: int = DEFAULT_SESSION,
    limit: int = DEFAULT_LIMIT,
) -> dict:
    """Latest roll-call votes, upstream payload as is (cached 6 hours)."""
    validate_positive("congress", congress)
    validate_positive("session", session)
    validate_positive("limit", limit)
    return await container.upstream.vote_list(congress, session, limit)


@upstream_errors("Detail fetch failed")
async def get_vote_detail(roll: int) -> dict:
    """Roll-call detail with party totals (cached 6 months)."""
    validate_positive("roll", roll)
    return await container.upstream.vote_detail(DEFAULT_CONGRESS, DEFAULT_SESSION, roll)


@upstream_errors("Member fetch failed")
async def get_vote_members(roll: int) -> dict:
    """Individual member votes of a roll call (cached 6 months)."""
    validate_positive("roll", roll)
    return await container.upstream.vote_members(DEFAULT_CONGRESS, DEFAULT_SESSION, roll)


def _member_item(m: MemberVote) -> MemberVoteItem:
    return MemberVoteItem(
        first_name=m.first_name,
        last_name=m.last_name,
        party=m.party,
        state=m.state,
        vote_cast=m.vote_cast,
    )


def to_card_item(view: AggregatedVoteView) -> VoteCardItem:
    return VoteCardItem(
        roll_call_number=view.roll_call_number,
        legislation_type=view.vote.legislation_type,
        legislation_number=view.vote.legislation_number,
        title=view.title,
        summary=view.summary,
        question=view.question,
        result=view.result,
        start_date=view.start_date,
        impact=str(view.impact),
        parties=[
            PartyBreakdownItem(
                party=p.party,
                name=p.name,
                yea=p.yea,
                nay=p.nay,
                present=p.present,
                not_voting=p.not_voting,
                members=[_member_item(m) for m in p.members],
            )
            for p in view.parties
        ],
        members=[_member_item(m) for m in view.members],
    )


@upstream_errors("Vote list fetch failed")
async def get_vote_feed(
    congress: int = DEFAULT_CONGRESS,
    session: int = DEFAULT_SESSION,
    limit: int = DEFAULT_LIMIT,
) -> VoteFeedResponse:
    """Every listed vote aggregated with bill text, party breakdown and impact."""
    validate_positive("congress", congress)
    validate_positive("session", session)
    validate_positive("limit", limit)
    views = await container.feed.build(congress, session, limit)
    return VoteFeedResponse(
        congress=congress,
        session=session,
        items=[to_card_item(v) for v in views],
    )
