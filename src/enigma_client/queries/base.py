"""Shared query builder machinery.

Every builder owns a :class:`QueryParams` and a base URI of the form
``<root>/<version>/<endpoint>/<api key>``. Configuration methods mutate the
parameters in place and return the builder itself so calls can be chained.
The mixins below each add one capability; the concrete builders compose the
subset their endpoint supports.

``search`` and ``where`` accumulate (the API accepts several of each and
``conjunction`` links them). Every other parameter keeps only the value of
the last call.

Builders are not safe for concurrent mutation from several threads.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import ClassVar, Generic, TypeVar

from ..config import PaginationConfig
from ..core.errors import EnigmaValidationError
from ..core.executor import RequestTransport, execute
from ..core.pagination import iterate_pages
from ..core.params import QueryParams, build_uri
from .enums import Conjunction, Endpoint, SortDirection, coerce_enum

QueryT = TypeVar("QueryT", bound="Query")
ResponseT = TypeVar("ResponseT")


def _ensure_int(value: int, *, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise EnigmaValidationError(f"{name} must be int")
    return value


def _ensure_str(value: str, *, name: str) -> str:
    if not isinstance(value, str):
        raise EnigmaValidationError(f"{name} must be str")
    return value


class Query:
    """Base for all builders: transport, base URI and owned parameters."""

    endpoint: ClassVar[Endpoint]

    def __init__(
        self,
        transport: RequestTransport,
        *,
        base_uri: str,
        pagination: PaginationConfig | None = None,
    ) -> None:
        self._transport = transport
        self._base_uri = base_uri
        self._pagination = pagination or PaginationConfig()
        self._params = QueryParams()

    @property
    def base_uri(self) -> str:
        return self._base_uri

    @property
    def params(self) -> QueryParams:
        return self._params

    def _execute(
        self,
        datapath: str,
        parse: Callable[[dict[str, object]], ResponseT],
        *,
        params: QueryParams | None = None,
    ) -> ResponseT:
        return execute(
            self._transport,
            endpoint=self.endpoint.value,
            base_uri=self._base_uri,
            resource_path=datapath,
            params=self._params if params is None else params,
            parse=parse,
        )


class BoundQuery(Query):
    """Builder whose datapath is fixed at construction."""

    def __init__(
        self,
        transport: RequestTransport,
        *,
        base_uri: str,
        datapath: str,
        pagination: PaginationConfig | None = None,
    ) -> None:
        super().__init__(transport, base_uri=base_uri, pagination=pagination)
        self._datapath = datapath

    @property
    def datapath(self) -> str:
        return self._datapath

    def uri(self) -> str:
        return build_uri(self._base_uri, self._datapath, self._params)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(datapath={self._datapath!r}, params={self._params!r})"


class SelectMixin(Query):
    def select(self: QueryT, *columns: str) -> QueryT:
        """Columns to return with each row. Default is all columns."""
        if not columns:
            raise EnigmaValidationError("select requires at least one column")
        for column in columns:
            _ensure_str(column, name="select column")
        self._params.set("select", ",".join(columns))
        return self


class FilterMixin(Query):
    def search(self: QueryT, query: str) -> QueryT:
        """Only return rows matching ``query``.

        Searches the whole table by default. ``"@field text"`` restricts the
        search to one field and ``"text1|text2"`` matches either query.
        """
        self._params.add("search", _ensure_str(query, name="search"))
        return self

    def where(self: QueryT, clause: str) -> QueryT:
        """SQL-style filter on numerical and date columns.

        Accepted forms are ``<column><op><value>`` with op one of
        ``>=, >, =, !=, <, <=``, ``<column> [not] in (<v>,<v>,...)`` and
        ``<column> [not] between <v> and <v>``. Clauses are sent verbatim.
        """
        self._params.add("where", _ensure_str(clause, name="where"))
        return self

    def conjunction(self: QueryT, conjunction: Conjunction | str) -> QueryT:
        """Link between several search/where parameters. Server default is "and"."""
        value = coerce_enum(Conjunction, conjunction, name="conjunction")
        self._params.set("conjunction", value.value)
        return self


class ColumnSortMixin(Query):
    def sort(self: QueryT, column: str, direction: SortDirection | str) -> QueryT:
        """Sort rows by ``column``; ``+`` ascending, ``-`` descending."""
        resolved = coerce_enum(SortDirection, direction, name="sort direction")
        self._params.set("sort", _ensure_str(column, name="sort column") + resolved.value)
        return self


class LimitMixin(Query):
    def limit(self: QueryT, limit: int) -> QueryT:
        # the service caps this at 500 and reports larger values as an error
        self._params.set("limit", str(_ensure_int(limit, name="limit")))
        return self


class PageMixin(Query):
    def page(self: QueryT, number: int) -> QueryT:
        """Return the nth page of results, sized by the current limit."""
        self._params.set("page", str(_ensure_int(number, name="page")))
        return self


class PagedResultsMixin(BoundQuery, Generic[ResponseT]):
    """``results()`` and ``iter_pages()`` for paginated endpoints."""

    def _parse(self, payload: dict[str, object]) -> ResponseT:
        raise NotImplementedError

    def results(self) -> ResponseT:
        """Results returned by the server for the current parameters."""
        return self._execute(self._datapath, self._parse)

    def iter_pages(self) -> Iterator[ResponseT]:
        """Yield every page from the current ``page`` (default 1) to the last.

        The builder's own parameters are left untouched.
        """
        start_page = int(self._params.get("page") or 1)

        def fetch_page(number: int) -> ResponseT:
            params = self._params.copy()
            params.set("page", str(number))
            return self._execute(self._datapath, self._parse, params=params)

        return iterate_pages(
            fetch_page,
            lambda response: (response.info.current_page, response.info.total_pages),
            start_page=start_page,
            max_pages=self._pagination.max_pages,
        )


__all__ = [
    "Query",
    "BoundQuery",
    "SelectMixin",
    "FilterMixin",
    "ColumnSortMixin",
    "LimitMixin",
    "PageMixin",
    "PagedResultsMixin",
]
