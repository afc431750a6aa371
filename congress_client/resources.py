"""Upstream resource classes."""

from enum import StrEnum


class ResourceClass(StrEnum):
    """Each kind of upstream payload the app fetches and caches."""

    VOTE_LIST = "vote-list"
    BILL_TITLE = "bill-title"
    BILL_SUMMARY = "bill-summary"
    VOTE_DETAIL = "vote-detail"
    VOTE_MEMBERS = "vote-members"
    REP_LOOKUP = "rep-lookup"
