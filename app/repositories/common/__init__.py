"""Common repositories - cache storage."""

from app.repositories.common.cache import CacheStore

__all__ = [
    "CacheStore",
]
