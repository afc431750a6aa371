"""Upstream API client package - Congress.gov and representative lookup."""

from congress_client.base import BaseClient, set_api_config
from congress_client.errors import FailureCause, UpstreamError
from congress_client.legislation import BillClient
from congress_client.representatives import RepresentativeClient
from congress_client.resources import ResourceClass
from congress_client.voting import VotingClient

__all__ = [
    # Base
    "BaseClient",
    "set_api_config",
    "FailureCause",
    "UpstreamError",
    "ResourceClass",
    # Clients
    "VotingClient",
    "BillClient",
    "RepresentativeClient",
]
