"""House roll-call vote API client."""

from congress_client.base import BaseClient
from congress_client.resources import ResourceClass


class VotingClient(BaseClient):
    """Client for the Congress.gov house-vote endpoints."""

    async def house_votes(self, congress: int, session: int, limit: int) -> dict:
        """GET /house-vote/{congress}/{session} - latest roll calls first."""
        return await self._get(
            f"house-vote/{congress}/{session}",
            ResourceClass.VOTE_LIST,
            params={"limit": limit, "sort": "startedDate desc"},
            required="houseRollCallVotes",
        )

    async def house_vote(self, congress: int, session: int, roll: int) -> dict:
        """GET /house-vote/{congress}/{session}/{roll} - party totals and question."""
        return await self._get(
            f"house-vote/{congress}/{session}/{roll}",
            ResourceClass.VOTE_DETAIL,
            required="houseRollCallVote",
        )

    async def house_vote_members(self, congress: int, session: int, roll: int) -> dict:
        """GET /house-vote/{congress}/{session}/{roll}/members - individual votes."""
        return await self._get(
            f"house-vote/{congress}/{session}/{roll}/members",
            ResourceClass.VOTE_MEMBERS,
            required="houseRollCallVoteMemberVotes",
        )
