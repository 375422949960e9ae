"""Sync HTTP transport and status evaluation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

import httpx

from ..config import EnigmaClientConfig
from .errors import EnigmaTransportError, classify_error_response
from .response_parsing import parse_json_payload, try_parse_json

logger = logging.getLogger("enigma_client")


class SyncTransportClient(Protocol):
    def get(self, url: str) -> object: ...
    def close(self) -> None: ...


def build_default_headers(config: EnigmaClientConfig) -> Mapping[str, str]:
    return {
        "Accept": "application/json",
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: EnigmaClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


class SyncTransport:
    """Synchronous transport for the Enigma API.

    One GET per call: no retry and no throttling. The full body is read
    before it is decoded.
    """

    def __init__(
        self,
        config: EnigmaClientConfig,
        *,
        client: SyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.Client(
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "close"):
            self._client.close()

    def request(self, uri: str) -> dict[str, object]:
        if self._closed:
            raise EnigmaTransportError("transport is already closed")

        try:
            response = self._client.get(uri)
        except Exception as exc:
            logger.error(
                "request network error error=%s",
                exc.__class__.__name__,
            )
            raise EnigmaTransportError(
                "network/transport error",
                cause="network",
            ) from exc

        http_status = getattr(response, "status_code", None)
        logger.debug("response received http_status=%s", http_status)

        if http_status != 200:
            error = classify_error_response(
                try_parse_json(response),
                http_status=http_status,
                reason_phrase=getattr(response, "reason_phrase", None),
            )
            logger.error("request failed http_status=%s message=%s", http_status, error.message)
            raise error

        return parse_json_payload(response, http_status=http_status)


__all__ = [
    "SyncTransportClient",
    "SyncTransport",
    "build_default_headers",
    "build_default_timeout",
]
