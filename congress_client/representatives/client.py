"""ZIP to representative lookup client (whoismyrepresentative.com)."""

import settings
from congress_client.base import BaseClient
from congress_client.resources import ResourceClass


class RepresentativeClient(BaseClient):
    """Client for the representative-by-ZIP service.

    The service labels its JSON as text/html, so the body is parsed regardless
    of the content type.
    """

    def __init__(self, *args, lookup_url: str = settings.REP_LOOKUP_URL, **kwargs):
        super().__init__(*args, **kwargs)
        self._lookup_url = lookup_url

    async def members_by_zip(self, zip_code: str) -> dict:
        """GET getall_mems.php?zip={zip}&output=json."""
        return await self._get_url(
            self._lookup_url,
            ResourceClass.REP_LOOKUP,
            params={"zip": zip_code, "output": "json"},
        )
