"""Public client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .client_shared import build_base_uri, validate_api_key, validate_client_config
from .config import EnigmaClientConfig
from .core.errors import EnigmaClientClosedError
from .core.transport import SyncTransport
from .queries.data import DataQuery
from .queries.enums import Endpoint
from .queries.export import ExportQuery
from .queries.metadata import MetadataQuery
from .queries.stats import StatsQuery


class EnigmaClient:
    """Client of the Enigma API.

    The API key is embedded verbatim in every request URI. ``meta`` serves
    metadata lookups for any datapath; ``data``, ``stats`` and ``export``
    return a fresh query builder per request.
    """

    def __init__(
        self,
        api_key: str,
        *,
        config: EnigmaClientConfig | None = None,
        transport: SyncTransport | None = None,
    ) -> None:
        self._api_key = validate_api_key(api_key)
        self._config = config or EnigmaClientConfig()
        validate_client_config(self._config)

        self._transport = transport or SyncTransport(self._config)
        self._closed = False
        self.meta = MetadataQuery(
            self._transport,
            base_uri=build_base_uri(Endpoint.META, self._api_key),
            pagination=self._config.pagination,
        )

    def data(self, datapath: str) -> DataQuery:
        """Query the rows of a table datapath."""
        self._ensure_open()
        return DataQuery(
            self._transport,
            base_uri=build_base_uri(Endpoint.DATA, self._api_key),
            datapath=datapath,
            pagination=self._config.pagination,
        )

    def stats(self, datapath: str, column: str) -> StatsQuery:
        """Query statistics on ``column`` of a table datapath."""
        self._ensure_open()
        return StatsQuery(
            self._transport,
            base_uri=build_base_uri(Endpoint.STATS, self._api_key),
            datapath=datapath,
            column=column,
            pagination=self._config.pagination,
        )

    def export(self, datapath: str) -> ExportQuery:
        """Request a gzip export of a table datapath."""
        self._ensure_open()
        return ExportQuery(
            self._transport,
            base_uri=build_base_uri(Endpoint.EXPORT, self._api_key),
            datapath=datapath,
            pagination=self._config.pagination,
        )

    def _ensure_open(self) -> None:
        if self._closed:
            raise EnigmaClientClosedError("EnigmaClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "EnigmaClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False

    def __repr__(self) -> str:
        return "EnigmaClient(api_key='***')"


__all__ = [
    "EnigmaClient",
]
