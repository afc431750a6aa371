"""Common models - base entity and cache policy."""

from app.models.common.base import BaseEntity
from app.models.common.cache import TTL_POLICY, CacheEntry, cache_key, ttl_for

__all__ = [
    "BaseEntity",
    "CacheEntry",
    "TTL_POLICY",
    "cache_key",
    "ttl_for",
]
