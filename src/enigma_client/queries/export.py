"""Export queries producing a downloadable gzip file."""

from __future__ import annotations

from .base import BoundQuery, ColumnSortMixin, FilterMixin, PageMixin, SelectMixin
from .enums import Endpoint
from .models import ExportResponse
from .parser import parse_export_response


class ExportQuery(SelectMixin, FilterMixin, ColumnSortMixin, PageMixin, BoundQuery):
    endpoint = Endpoint.EXPORT

    def results(self) -> ExportResponse:
        return self._execute(self._datapath, parse_export_response)

    def file_url(self) -> str:
        """URL of the gzip file holding the exported table."""
        return self.results().export_url or ""


__all__ = [
    "ExportQuery",
]
