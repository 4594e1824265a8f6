"""Error taxonomy shared by the core and its I/O adapters."""

from __future__ import annotations

from typing import Any

STATUS_MESSAGES: dict[int, str] = {
    400: "Bad request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not found",
    429: "Too many requests",
    500: "Internal server error",
}
FALLBACK_STATUS_MESSAGE = "Something went wrong"


def describe_status(status: int | None) -> str:
    if status is None:
        return FALLBACK_STATUS_MESSAGE
    return STATUS_MESSAGES.get(status, FALLBACK_STATUS_MESSAGE)


class SessionsError(Exception):
    """Base class for failures a run reports instead of producing output."""

    category = "error"


class TransportError(SessionsError):
    """The remote collaborator could not be reached at all."""

    category = "transport"

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class ApiError(SessionsError):
    """The remote collaborator answered with a non-success status."""

    category = "api"

    def __init__(self, status: int, *, url: str | None = None, body: str = "") -> None:
        self.status = status
        self.url = url
        self.body = body
        self.message = describe_status(status)
        super().__init__(f"{self.message} (status={status})")


class DataError(SessionsError):
    """An activity record is malformed or lacks a required field."""

    category = "data"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        index: int | None = None,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.index = index
        self.value = value
