"""Representative API views."""

from app.container import container
from web.api.errors import upstream_errors, validate_zip


@upstream_errors("Upstream failed")
async def get_my_rep(zip_code: str) -> dict:
    """Members serving a ZIP code, upstream payload as is (cached 1 day)."""
    validate_zip(zip_code)
    return await container.upstream.rep_lookup(zip_code)
