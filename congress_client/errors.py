"""Upstream failure type shared by all clients."""

from enum import StrEnum


class FailureCause(StrEnum):
    """Why an upstream call failed."""

    STATUS = "status"
    MALFORMED = "malformed"
    TIMEOUT = "timeout"
    NETWORK = "network"


class UpstreamError(Exception):
    """An external dependency answered badly or not at all."""

    def __init__(
        self,
        resource: str,
        cause: FailureCause = FailureCause.STATUS,
        status_code: int | None = None,
        detail: str | None = None,
    ):
        self.resource = resource
        self.cause = cause
        self.status_code = status_code
        self.detail = detail
        message = f"{resource} upstream failed ({cause}"
        if status_code is not None:
            message += f", status={status_code}"
        message += ")"
        if detail:
            message += f": {detail}"
        super().__init__(message)
