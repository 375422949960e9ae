"""Single-request execution: build the URI, call, decode."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol, TypeVar

from .errors import EnigmaApiError, EnigmaDecodeError
from .params import QueryParams, build_uri

logger = logging.getLogger("enigma_client")

ResponseT = TypeVar("ResponseT")


class RequestTransport(Protocol):
    def request(self, uri: str) -> dict[str, object]: ...


def execute(
    transport: RequestTransport,
    *,
    endpoint: str,
    base_uri: str,
    resource_path: str,
    params: QueryParams,
    parse: Callable[[dict[str, object]], ResponseT],
) -> ResponseT:
    """Run one request and decode the payload into the caller's response shape.

    Log lines name the endpoint and resource path only; the request URI embeds
    the API key and is never logged.
    """

    uri = build_uri(base_uri, resource_path, params)
    logger.debug("request start endpoint=%s path=%s", endpoint, resource_path)
    try:
        payload = transport.request(uri)
    except EnigmaApiError:
        logger.error("request failed endpoint=%s path=%s", endpoint, resource_path)
        raise

    try:
        response = parse(payload)
    except EnigmaDecodeError:
        logger.error("response decode error endpoint=%s path=%s", endpoint, resource_path)
        raise
    except (KeyError, TypeError, ValueError) as exc:
        logger.error("response decode error endpoint=%s path=%s", endpoint, resource_path)
        raise EnigmaDecodeError(
            f"unexpected {endpoint} response shape",
            http_status=200,
            cause="decode",
        ) from exc

    logger.info("request success endpoint=%s path=%s", endpoint, resource_path)
    return response


__all__ = [
    "RequestTransport",
    "execute",
]
