"""Response body decoding helpers."""

from __future__ import annotations

from typing import Protocol

from .errors import EnigmaDecodeError


class JsonPayloadResponse(Protocol):
    def json(self) -> object: ...


def parse_json_payload(
    response: JsonPayloadResponse,
    *,
    http_status: int | None,
) -> dict[str, object]:
    """Parse a successful response body into a JSON object."""

    try:
        payload = response.json()
    except Exception as exc:
        raise EnigmaDecodeError(
            "response body is not valid JSON",
            http_status=http_status,
            cause="decode",
        ) from exc

    if not isinstance(payload, dict):
        raise EnigmaDecodeError(
            "response JSON root must be an object",
            http_status=http_status,
            cause="decode",
        )
    return payload


def try_parse_json(response: JsonPayloadResponse) -> object | None:
    """Best-effort decode of an error body; ``None`` when it is not JSON."""

    try:
        return response.json()
    except Exception:
        return None


__all__ = [
    "JsonPayloadResponse",
    "parse_json_payload",
    "try_parse_json",
]
