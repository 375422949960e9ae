"""Stats queries computing server-side statistics over one column."""

from __future__ import annotations

from ..config import PaginationConfig
from ..core.errors import EnigmaValidationError
from ..core.executor import RequestTransport
from .base import FilterMixin, LimitMixin, PagedResultsMixin, PageMixin, SelectMixin
from .enums import COMPOUND_OPERATIONS, Endpoint, Operation, SortDirection, coerce_enum
from .models import StatsResponse
from .parser import parse_stats_response


class StatsQuery(
    SelectMixin,
    FilterMixin,
    LimitMixin,
    PageMixin,
    PagedResultsMixin[StatsResponse],
):
    """Statistics on the data of one column.

    The column is mandatory and is selected as part of construction. Results
    may be filtered, sorted and paginated like data queries.
    """

    endpoint = Endpoint.STATS

    def __init__(
        self,
        transport: RequestTransport,
        *,
        base_uri: str,
        datapath: str,
        column: str,
        pagination: PaginationConfig | None = None,
    ) -> None:
        super().__init__(transport, base_uri=base_uri, datapath=datapath, pagination=pagination)
        self.select(column)

    def operation(self, operation: Operation | str) -> "StatsQuery":
        """Operation to run on the column.

        Numerical columns accept every operation, date columns max, min and
        frequency, all other columns frequency only. Defaults to everything
        the column type allows.
        """
        value = coerce_enum(Operation, operation, name="operation")
        self._params.set("operation", value.value)
        return self

    def by(self, operation: Operation | str) -> "StatsQuery":
        """Compound operation (sum or avg) against the column given to ``of``."""
        value = coerce_enum(Operation, operation, name="by")
        if value not in COMPOUND_OPERATIONS:
            raise EnigmaValidationError("by must be one of 'sum', 'avg'")
        self._params.set("by", value.value)
        return self

    def of(self, column: str) -> "StatsQuery":
        """Numerical column to compare against; required with ``by``."""
        if not isinstance(column, str):
            raise EnigmaValidationError("of must be str")
        self._params.set("of", column)
        return self

    def sort(self, direction: SortDirection | str) -> "StatsQuery":
        """Sort by the computed statistic."""
        value = coerce_enum(SortDirection, direction, name="sort direction")
        self._params.set("sort", value.value)
        return self

    def _parse(self, payload: dict[str, object]) -> StatsResponse:
        return parse_stats_response(payload)


__all__ = [
    "StatsQuery",
]
