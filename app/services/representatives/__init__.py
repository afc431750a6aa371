"""Representative services."""

from app.services.representatives.matcher import RepresentativeMatcher, filter_cards, is_valid_zip

__all__ = [
    "RepresentativeMatcher",
    "filter_cards",
    "is_valid_zip",
]
