"""Error types and error-message extraction."""

from __future__ import annotations

from collections.abc import Mapping


def extract_additional(payload: object) -> str | None:
    """Return ``info.additional`` from an error body, if it is a string."""

    if not isinstance(payload, Mapping):
        return None
    info = payload.get("info")
    if not isinstance(info, Mapping):
        return None
    additional = info.get("additional")
    if isinstance(additional, str):
        return additional
    return None


def format_status_text(status_code: int | None, reason_phrase: str | None) -> str:
    if status_code is None:
        return reason_phrase or "unknown HTTP status"
    if reason_phrase:
        return f"{status_code} {reason_phrase}"
    return str(status_code)


class EnigmaApiError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.http_status = http_status
        self.cause = cause


class EnigmaTransportError(EnigmaApiError):
    """Network/transport-level failure."""


class EnigmaClientClosedError(EnigmaApiError):
    """Raised when client is used after close."""


class EnigmaValidationError(EnigmaApiError):
    """Invalid input rejected before any request is made."""


class EnigmaServerError(EnigmaApiError):
    """Non-200 response from the API."""


class EnigmaDecodeError(EnigmaApiError):
    """Successful HTTP status but the body does not match the expected shape."""


def classify_error_response(
    payload: object,
    *,
    http_status: int | None,
    reason_phrase: str | None,
) -> EnigmaServerError:
    """Map a non-200 response to a server error.

    The message is taken from ``info.additional`` when the body carries it and
    falls back to the HTTP status text otherwise.
    """

    message = extract_additional(payload)
    if message is None:
        message = format_status_text(http_status, reason_phrase)
    return EnigmaServerError(message, http_status=http_status, cause="server")


__all__ = [
    "EnigmaApiError",
    "EnigmaTransportError",
    "EnigmaClientClosedError",
    "EnigmaValidationError",
    "EnigmaServerError",
    "EnigmaDecodeError",
    "extract_additional",
    "format_status_text",
    "classify_error_response",
]
