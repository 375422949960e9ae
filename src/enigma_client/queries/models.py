"""Response models for the meta, data, stats and export endpoints."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class PathEntry:
    level: str | None
    label: str | None
    description: str | None


@dataclass(slots=True, frozen=True)
class NodeEntry:
    datapath: str | None
    label: str | None
    description: str | None


@dataclass(slots=True, frozen=True)
class ChildTable:
    datapath: str | None
    label: str | None
    description: str | None
    db_boundary_label: str | None
    db_boundary_tables: str | None


@dataclass(slots=True, frozen=True)
class ParentMetadataInfo:
    result_type: str | None
    children_tables_limit: int | None
    children_tables_total: int | None
    current_page: int | None
    total_pages: int | None


@dataclass(slots=True, frozen=True)
class ParentMetadataResponse:
    datapath: str | None
    path: tuple[PathEntry, ...]
    immediate_nodes: tuple[NodeEntry, ...]
    children_tables: tuple[ChildTable, ...]
    info: ParentMetadataInfo


@dataclass(slots=True, frozen=True)
class ColumnInfo:
    id: str | None
    label: str | None
    description: str | None
    type: str | None
    index: int | None


@dataclass(slots=True, frozen=True)
class BoundaryTable:
    datapath: str | None
    label: str | None


@dataclass(slots=True, frozen=True)
class DocumentLink:
    url: str | None
    title: str | None
    type: str | None


@dataclass(slots=True, frozen=True)
class MetadataItem:
    label: str | None
    value: str | None


@dataclass(slots=True, frozen=True)
class TableMetadataInfo:
    result_type: str | None


@dataclass(slots=True, frozen=True)
class TableMetadataResponse:
    datapath: str | None
    path: tuple[PathEntry, ...]
    columns: tuple[ColumnInfo, ...]
    db_boundary_datapath: str | None
    db_boundary_label: str | None
    db_boundary_tables: tuple[BoundaryTable, ...]
    ancestor_datapaths: tuple[str, ...]
    documents: tuple[DocumentLink, ...]
    metadata: tuple[MetadataItem, ...]
    info: TableMetadataInfo


@dataclass(slots=True, frozen=True)
class PaginationInfo:
    rows_limit: int | None
    current_page: int | None
    total_pages: int | None
    total_results: int | None


@dataclass(slots=True, frozen=True)
class DataResponse:
    """Rows of a table; ``result`` is the decoded JSON exactly as served."""

    datapath: str | None
    result: object
    info: PaginationInfo


@dataclass(slots=True, frozen=True)
class StatsInfo:
    column: object
    operations: tuple[str, ...]
    rows_limit: int | None
    current_page: int | None
    total_pages: int | None
    total_results: int | None


@dataclass(slots=True, frozen=True)
class StatsResponse:
    datapath: str | None
    result: object
    info: StatsInfo


@dataclass(slots=True, frozen=True)
class ExportResponse:
    datapath: str | None
    export_url: str | None
    head_url: str | None


__all__ = [
    "PathEntry",
    "NodeEntry",
    "ChildTable",
    "ParentMetadataInfo",
    "ParentMetadataResponse",
    "ColumnInfo",
    "BoundaryTable",
    "DocumentLink",
    "MetadataItem",
    "TableMetadataInfo",
    "TableMetadataResponse",
    "PaginationInfo",
    "DataResponse",
    "StatsInfo",
    "StatsResponse",
    "ExportResponse",
]
