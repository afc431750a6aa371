"""API errors and validation helpers."""

import functools
from collections.abc import Callable

from loguru import logger
from pydantic import BaseModel

from app.services.representatives import is_valid_zip
from congress_client import UpstreamError
from congress_client.legislation import BILL_ENDPOINTS


class ErrorResponse(BaseModel):
    """Error payload returned to the client."""

    error: str


class ApiError(Exception):
    """Request failed; carries the HTTP status and a fixed client-facing message."""

    status_code = 500

    def __init__(self, message: str = "Internal error", status_code: int | None = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(error=self.message)


class ValidationError(ApiError):
    """Malformed client input. Raised before any upstream call."""

    status_code = 400

    def __init__(self, message: str = "Validation error"):
        super().__init__(message)


def validate_zip(zip_code: str | None) -> str:
    """Return the ZIP if it is exactly five digits."""
    if not is_valid_zip(zip_code):
        raise ValidationError("5-digit ZIP required")
    return zip_code


def validate_positive(name: str, value: int) -> int:
    if not isinstance(value, int) or value < 1:
        raise ValidationError(f"Invalid {name}: {value!r}. Must be a positive integer")
    return value


def validate_bill_endpoint(endpoint: str) -> str:
    if endpoint not in BILL_ENDPOINTS:
        raise ValidationError(f"Invalid endpoint: {endpoint!r}. Must be one of {', '.join(BILL_ENDPOINTS)}")
    return endpoint


def upstream_errors(message: str) -> Callable:
    """Map every failure of the wrapped view to a 500 ApiError with a fixed message.

    ApiErrors raised by the view itself (validation) pass through unchanged.
    """

    def decorator(view: Callable) -> Callable:
        @functools.wraps(view)
        async def wrapper(*args, **kwargs):
            try:
                return await view(*args, **kwargs)
            except ApiError:
                raise
            except UpstreamError as e:
                logger.warning("{}: {}", view.__name__, e)
                raise ApiError(message) from e
            except Exception as e:
                logger.exception("{} failed unexpectedly", view.__name__)
                raise ApiError(message) from e

        return wrapper

    return decorator
