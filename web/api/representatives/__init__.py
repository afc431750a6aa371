"""Representative API."""

from web.api.representatives.views import get_my_rep

__all__ = [
    "get_my_rep",
]
