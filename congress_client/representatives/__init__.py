"""Representative lookup client."""

from congress_client.representatives.client import RepresentativeClient
from congress_client.representatives.schemas import RepresentativeSchema

__all__ = [
    "RepresentativeClient",
    "RepresentativeSchema",
]
