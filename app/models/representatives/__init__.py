"""Representative models."""

from app.models.representatives.entities import Representative, VoteCard

__all__ = [
    "Representative",
    "VoteCard",
]
