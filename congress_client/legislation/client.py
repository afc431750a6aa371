"""Bill metadata API client - titles, summaries."""

from congress_client.base import BaseClient
from congress_client.resources import ResourceClass

BILL_ENDPOINTS = {
    "titles": ResourceClass.BILL_TITLE,
    "summaries": ResourceClass.BILL_SUMMARY,
}


class BillClient(BaseClient):
    """Client for the Congress.gov bill sub-resources."""

    async def bill_resource(self, congress: int, bill_type: str, number: str, endpoint: str) -> dict:
        """GET /bill/{congress}/{type}/{number}/{endpoint}."""
        resource = BILL_ENDPOINTS.get(endpoint)
        if resource is None:
            raise ValueError(f"Unsupported bill endpoint: {endpoint!r}")
        return await self._get(
            f"bill/{congress}/{bill_type.lower()}/{number}/{endpoint}",
            resource,
            required=endpoint,
        )

    async def titles(self, congress: int, bill_type: str, number: str) -> dict:
        return await self.bill_resource(congress, bill_type, number, "titles")

    async def summaries(self, congress: int, bill_type: str, number: str) -> dict:
        return await self.bill_resource(congress, bill_type, number, "summaries")
