"""Vote API."""

from web.api.votes.views import (
    get_vote_detail,
    get_vote_feed,
    get_vote_members,
    get_votes,
)

__all__ = [
    "get_votes",
    "get_vote_detail",
    "get_vote_members",
    "get_vote_feed",
]
