"""Data queries over table datapaths."""

from __future__ import annotations

from .base import (
    ColumnSortMixin,
    FilterMixin,
    LimitMixin,
    PagedResultsMixin,
    PageMixin,
    SelectMixin,
)
from .enums import Endpoint
from .models import DataResponse
from .parser import parse_data_response


class DataQuery(
    SelectMixin,
    FilterMixin,
    ColumnSortMixin,
    LimitMixin,
    PageMixin,
    PagedResultsMixin[DataResponse],
):
    """Rows of a table, filtered, sorted and paginated by the chained parameters.

    Large tables respond slowly; ``select`` and ``limit`` keep responses small.
    """

    endpoint = Endpoint.DATA

    def _parse(self, payload: dict[str, object]) -> DataResponse:
        return parse_data_response(payload)


__all__ = [
    "DataQuery",
]
