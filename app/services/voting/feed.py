"""Vote feed service - the current vote list, aggregated vote by vote."""

import asyncio

from loguru import logger
from pydantic import ValidationError

from app.models.voting import AggregatedVoteView, Vote
from app.repositories.upstream import UpstreamRepository
from app.services.voting.aggregator import VoteAggregator
from congress_client import UpstreamError
from congress_client.voting import HouseVoteSchema


class VoteFeed:
    """Fans one vote-list fetch out into one aggregation per vote."""

    def __init__(self, upstream: UpstreamRepository, aggregator: VoteAggregator):
        self._upstream = upstream
        self._aggregator = aggregator

    async def votes(self, congress: int, session: int, limit: int) -> list[Vote]:
        """Votes of the (cached) vote list. Entries without a roll number are skipped."""
        payload = await self._upstream.vote_list(congress, session, limit)
        items = payload.get("houseRollCallVotes") or []

        votes = []
        for item in items:
            try:
                schema = HouseVoteSchema.model_validate(item)
            except ValidationError as e:
                logger.warning("Skipping malformed vote list entry: {}", e)
                continue
            votes.append(Vote.from_schema(schema, congress=congress, session=session))
        return votes

    async def build(self, congress: int, session: int, limit: int) -> list[AggregatedVoteView]:
        """Aggregate every listed vote concurrently, in list order.

        A vote whose detail or members cannot be fetched is left out; the rest
        of the feed is still returned. Vote-list failures propagate.
        """
        votes = await self.votes(congress, session, limit)
        outcomes = await asyncio.gather(
            *[self._aggregator.aggregate(v) for v in votes],
            return_exceptions=True,
        )

        views = []
        for vote, outcome in zip(votes, outcomes):
            if isinstance(outcome, UpstreamError):
                logger.warning("Skipping roll call {}: {}", vote.roll_call_number, outcome)
                continue
            if isinstance(outcome, BaseException):
                raise outcome
            views.append(outcome)

        logger.info("Vote feed {}/{}: {}/{} votes aggregated", congress, session, len(views), len(votes))
        return views
