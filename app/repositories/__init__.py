"""Repositories package - data access layer for cached upstream data."""

from app.repositories.common import CacheStore
from app.repositories.upstream import UpstreamRepository

__all__ = [
    # Common
    "CacheStore",
    # Upstream
    "UpstreamRepository",
]
