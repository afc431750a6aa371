"""Admin API."""

from web.api.admin.views import clear_cache

__all__ = [
    "clear_cache",
]
