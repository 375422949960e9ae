"""Query parameter storage and request URI building."""

from __future__ import annotations

from collections.abc import Iterator
from urllib.parse import urlencode


class QueryParams:
    """Multi-valued query parameters with a canonical encoding.

    Not safe for concurrent mutation; each query builder owns its own instance.
    """

    __slots__ = ("_values",)

    def __init__(self, values: dict[str, list[str]] | None = None) -> None:
        self._values: dict[str, list[str]] = {}
        for key, items in (values or {}).items():
            self._values[key] = list(items)

    def set(self, key: str, value: str) -> None:
        self._values[key] = [value]

    def add(self, key: str, value: str) -> None:
        self._values.setdefault(key, []).append(value)

    def get(self, key: str) -> str | None:
        items = self._values.get(key)
        if not items:
            return None
        return items[0]

    def get_all(self, key: str) -> tuple[str, ...]:
        return tuple(self._values.get(key, ()))

    def items(self) -> Iterator[tuple[str, tuple[str, ...]]]:
        for key in sorted(self._values):
            yield key, tuple(self._values[key])

    def copy(self) -> "QueryParams":
        return QueryParams(self._values)

    def encode(self) -> str:
        pairs = [(key, list(values)) for key, values in self.items()]
        return urlencode(pairs, doseq=True)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryParams):
            return NotImplemented
        return dict(self.items()) == dict(other.items())

    def __repr__(self) -> str:
        return f"QueryParams({dict(self.items())!r})"


def build_uri(base_uri: str, resource_path: str, params: QueryParams) -> str:
    uri = base_uri + "/" + resource_path
    if params:
        uri += "?" + params.encode()
    return uri


__all__ = [
    "QueryParams",
    "build_uri",
]
