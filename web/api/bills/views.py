"""Bill API views."""

from app.container import container
from settings import DEFAULT_CONGRESS
from web.api.errors import ValidationError, upstream_errors, validate_bill_endpoint


@upstream_errors("Bill fetch failed")
async def get_bill(bill_type: str, number: str, endpoint: str) -> dict:
    """Bill titles or summaries, upstream payload as is (cached 6 months)."""
    if not bill_type or not str(number).strip():
        raise ValidationError("Bill type and number required")
    validate_bill_endpoint(endpoint)
    return await container.upstream.bill(DEFAULT_CONGRESS, bill_type.lower(), str(number).strip(), endpoint)
