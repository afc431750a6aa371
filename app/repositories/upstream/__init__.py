"""Upstream repositories - cache-through access to external APIs."""

from app.repositories.upstream.repository import UpstreamRepository

__all__ = [
    "UpstreamRepository",
]
