"""API errors mapped from HTTP status codes."""

import json
from enum import StrEnum
from typing import Any

SUPPORT_CONTACT = "https://discord.gg/ga8EJbv"


class ErrorKind(StrEnum):
    INVALID_REQUEST = "invalid_request"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    INTERNAL_ERROR = "internal_error"
    UNKNOWN = "unknown"


class OpenSeaAPIError(Exception):
    """Raised when the API answers with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        kind: ErrorKind = ErrorKind.UNKNOWN,
        body: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.kind = kind
        self.body = body


def _dump(body: Any) -> str:
    return json.dumps(body, default=str)


def error_from_response(status_code: int, body: Any) -> OpenSeaAPIError:
    """Build the error for a failed response whose body was decoded best-effort."""
    if status_code == 400:
        kind = ErrorKind.INVALID_REQUEST
        errors = body.get("errors") if isinstance(body, dict) else None
        if errors:
            message = ", ".join(str(e) for e in errors)
        else:
            message = f"Invalid request: {_dump(body)}"
    elif status_code in (401, 403):
        kind = ErrorKind.UNAUTHORIZED
        message = f"Unauthorized. Full message was '{_dump(body)}'"
    elif status_code == 404:
        kind = ErrorKind.NOT_FOUND
        message = f"Not found. Full message was '{_dump(body)}'"
    elif status_code == 500:
        kind = ErrorKind.INTERNAL_ERROR
        message = (
            "Internal server error. OpenSea has been alerted, but if the problem "
            f"persists please contact us via Discord: {SUPPORT_CONTACT} - "
            f"full message was {_dump(body)}"
        )
    else:
        kind = ErrorKind.UNKNOWN
        message = f"status code {status_code}. Message: {_dump(body)}"

    return OpenSeaAPIError(
        f"API Error: {message}", status_code=status_code, kind=kind, body=body
    )
