"""Query builders and response models."""

from .data import DataQuery
from .enums import Conjunction, Operation, SortDirection
from .export import ExportQuery
from .metadata import MetadataQuery
from .models import (
    DataResponse,
    ExportResponse,
    PaginationInfo,
    ParentMetadataResponse,
    StatsInfo,
    StatsResponse,
    TableMetadataResponse,
)
from .stats import StatsQuery

__all__ = [
    "MetadataQuery",
    "DataQuery",
    "StatsQuery",
    "ExportQuery",
    "Conjunction",
    "Operation",
    "SortDirection",
    "ParentMetadataResponse",
    "TableMetadataResponse",
    "DataResponse",
    "StatsResponse",
    "StatsInfo",
    "ExportResponse",
    "PaginationInfo",
]
