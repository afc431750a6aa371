"""Vote aggregation service - merges bill, detail and member payloads per roll call."""

import asyncio
import re
from collections.abc import Sequence

from loguru import logger
from pydantic import BaseModel, ValidationError

from app.models.voting import AggregatedVoteView, MemberVote, PartyBreakdown, Vote
from app.repositories.upstream import UpstreamRepository
from app.services.voting.formulas import classify_impact
from congress_client import FailureCause, ResourceClass, UpstreamError
from congress_client.legislation import SummarySchema, TitleSchema
from congress_client.voting import HouseVoteDetailSchema, MemberVoteSchema, PartyTotalSchema
from settings import DEFAULT_CONGRESS, DEFAULT_SESSION

PROCEDURAL_TITLE = "Procedural Vote"
PROCEDURAL_SUMMARY = "No summary available for procedural votes."
SUMMARY_UNAVAILABLE = "Summary not yet available"
UNKNOWN_PARTY = "unknown"

_TAG_RE = re.compile(r"<[^>]+>")


def strip_tags(text: str) -> str:
    """Remove markup tags (CRS summaries are HTML fragments)."""
    return _TAG_RE.sub("", text)


def _parse_items(payload: dict, key: str, schema: type[BaseModel]) -> list:
    """Validate payload[key] item by item, skipping entries that do not fit."""
    items = payload.get(key)
    if not isinstance(items, list):
        return []

    parsed = []
    for item in items:
        try:
            parsed.append(schema.model_validate(item))
        except ValidationError as e:
            logger.debug("Skipping malformed {} entry: {}", key, e)
    return parsed


def pick_title(titles: Sequence[TitleSchema]) -> str | None:
    """Prefer an official title, else the first titled entry."""
    named = [t for t in titles if t.title]
    for t in named:
        if (t.title_type or "").startswith("Official"):
            return t.title
    return named[0].title if named else None


def pick_summary(summaries: Sequence[SummarySchema]) -> str:
    for s in summaries:
        if s.text:
            text = strip_tags(s.text).strip()
            if text:
                return text
    return SUMMARY_UNAVAILABLE


def party_breakdown(
    totals: Sequence[PartyTotalSchema],
    members: Sequence[MemberVote],
    roll: int,
) -> tuple[PartyBreakdown, ...]:
    """One entry per party total, with the members who voted under that party."""
    result = []
    for entry in totals:
        party_type = (entry.party.type if entry.party else None) or None
        if party_type is None:
            logger.warning("Missing party type for roll call {}: {}", roll, entry.model_dump(by_alias=True))

        name = entry.party.name if entry.party and entry.party.name else (party_type or "Unknown")
        result.append(
            PartyBreakdown(
                party=party_type or UNKNOWN_PARTY,
                name=name,
                yea=entry.yea_total or 0,
                nay=entry.nay_total or 0,
                present=entry.present_total or 0,
                not_voting=entry.not_voting_total or 0,
                members=tuple(m for m in members if m.party == party_type),
            )
        )
    return tuple(result)


def parse_detail(payload: dict) -> HouseVoteDetailSchema:
    body = payload.get("houseRollCallVote")
    if not isinstance(body, dict):
        raise UpstreamError(ResourceClass.VOTE_DETAIL, FailureCause.MALFORMED, detail="missing 'houseRollCallVote'")
    try:
        return HouseVoteDetailSchema.model_validate(body)
    except ValidationError as e:
        raise UpstreamError(ResourceClass.VOTE_DETAIL, FailureCause.MALFORMED, detail=str(e)) from e


def parse_members(payload: dict) -> tuple[MemberVote, ...]:
    body = payload.get("houseRollCallVoteMemberVotes")
    if not isinstance(body, dict):
        raise UpstreamError(
            ResourceClass.VOTE_MEMBERS, FailureCause.MALFORMED, detail="missing 'houseRollCallVoteMemberVotes'"
        )
    return tuple(MemberVote.from_schema(m) for m in _parse_items(body, "results", MemberVoteSchema))


class VoteAggregator:
    """Builds an AggregatedVoteView per roll call.

    Bill titles, bill summaries, vote detail and vote members are fetched
    concurrently and all awaited before merging. Bill metadata failures fall
    back to placeholder text; detail and member failures fail the aggregation.
    """

    def __init__(
        self,
        upstream: UpstreamRepository,
        congress: int = DEFAULT_CONGRESS,
        session: int = DEFAULT_SESSION,
    ):
        self._upstream = upstream
        self._congress = congress
        self._session = session
        logger.debug("VoteAggregator initialized")

    async def aggregate(self, vote: Vote) -> AggregatedVoteView:
        congress = vote.congress or self._congress
        session = vote.session or self._session
        roll = vote.roll_call_number

        outcomes = await asyncio.gather(
            self._bill_text(vote, congress),
            self._upstream.vote_detail(congress, session, roll),
            self._upstream.vote_members(congress, session, roll),
            return_exceptions=True,
        )
        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome
        (title, summary), detail_payload, members_payload = outcomes

        detail = parse_detail(detail_payload)
        members = parse_members(members_payload)
        question = detail.vote_question or vote.vote_question

        if title is None:
            title = question or f"{vote.legislation_type} {vote.legislation_number}"

        view = AggregatedVoteView(
            vote=vote,
            title=title,
            summary=summary,
            question=question,
            impact=classify_impact(members),
            parties=party_breakdown(detail.vote_party_total, members, roll),
            members=members,
        )
        logger.debug("Aggregated roll call {}: impact={}, {} members", roll, view.impact, len(members))
        return view

    async def _bill_text(self, vote: Vote, congress: int) -> tuple[str | None, str]:
        """(title, summary) for the vote's bill. A None title means the bill has none."""
        if vote.is_procedural:
            return PROCEDURAL_TITLE, PROCEDURAL_SUMMARY

        bill_type = vote.legislation_type.lower()
        number = vote.legislation_number
        titles, summaries = await asyncio.gather(
            self._upstream.bill_titles(congress, bill_type, number),
            self._upstream.bill_summaries(congress, bill_type, number),
            return_exceptions=True,
        )

        failures = [o for o in (titles, summaries) if isinstance(o, BaseException)]
        for failure in failures:
            if not isinstance(failure, UpstreamError):
                raise failure
        if failures:
            logger.warning("Bill metadata unavailable for {} {}: {}", bill_type, number, failures[0])
            return f"{vote.legislation_type} {number}", SUMMARY_UNAVAILABLE

        return (
            pick_title(_parse_items(titles, "titles", TitleSchema)),
            pick_summary(_parse_items(summaries, "summaries", SummarySchema)),
        )
