"""Bill metadata API client."""

from congress_client.legislation.client import BILL_ENDPOINTS, BillClient
from congress_client.legislation.schemas import SummarySchema, TitleSchema

__all__ = [
    "BILL_ENDPOINTS",
    "BillClient",
    "TitleSchema",
    "SummarySchema",
]
