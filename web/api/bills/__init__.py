"""Bill API."""

from web.api.bills.views import get_bill

__all__ = [
    "get_bill",
]
