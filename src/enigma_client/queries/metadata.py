"""Metadata queries, usable on any datapath."""

from __future__ import annotations

from ..core.params import build_uri
from .base import PageMixin
from .enums import Endpoint
from .models import ParentMetadataResponse, TableMetadataResponse
from .parser import parse_parent_metadata_response, parse_table_metadata_response


class MetadataQuery(PageMixin):
    """Metadata for parent nodes and tables of the catalog.

    The datapath is passed to each call rather than bound at construction, so
    one instance serves every metadata lookup of a client.
    """

    endpoint = Endpoint.META

    def uri(self, datapath: str) -> str:
        return build_uri(self._base_uri, datapath, self._params)

    def parent(self, datapath: str) -> ParentMetadataResponse:
        """Metadata of a parent node: its path, child nodes and child tables."""
        return self._execute(datapath, parse_parent_metadata_response)

    def table(self, datapath: str) -> TableMetadataResponse:
        """Metadata of a table: its columns, boundary and documents."""
        return self._execute(datapath, parse_table_metadata_response)


__all__ = [
    "MetadataQuery",
]
