"""Parsers from Enigma JSON payloads into typed response objects."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from ..core.errors import EnigmaDecodeError
from .models import (
    BoundaryTable,
    ChildTable,
    ColumnInfo,
    DataResponse,
    DocumentLink,
    ExportResponse,
    MetadataItem,
    NodeEntry,
    PaginationInfo,
    ParentMetadataInfo,
    ParentMetadataResponse,
    PathEntry,
    StatsInfo,
    StatsResponse,
    TableMetadataInfo,
    TableMetadataResponse,
)

JsonObject = dict[str, object]
ItemT = TypeVar("ItemT")


def _decode_error(message: str) -> EnigmaDecodeError:
    return EnigmaDecodeError(message, http_status=200, cause="decode")


def _str(obj: JsonObject, key: str) -> str | None:
    value = obj.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise _decode_error(f"{key} must be a string")


def _int(obj: JsonObject, key: str) -> int | None:
    value = obj.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        raise _decode_error(f"{key} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise _decode_error(f"{key} must be an integer")


def _object(obj: JsonObject, key: str) -> JsonObject:
    value = obj.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise _decode_error(f"{key} must be an object")
    return value


def _list_of(
    obj: JsonObject,
    key: str,
    build: Callable[[JsonObject], ItemT],
) -> tuple[ItemT, ...]:
    raw = obj.get(key)
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise _decode_error(f"{key} must be a list")
    items: list[ItemT] = []
    for item in raw:
        if not isinstance(item, dict):
            raise _decode_error(f"{key} element must be an object")
        items.append(build(item))
    return tuple(items)


def _str_list(obj: JsonObject, key: str) -> tuple[str, ...]:
    raw = obj.get(key)
    if raw is None:
        return ()
    if not isinstance(raw, list) or any(not isinstance(item, str) for item in raw):
        raise _decode_error(f"{key} must be a list of strings")
    return tuple(raw)


def _datapath(payload: JsonObject) -> str | None:
    # parent and stats/data envelopes use data_path, table envelopes use datapath
    if payload.get("data_path") is not None:
        return _str(payload, "data_path")
    return _str(payload, "datapath")


def _path_entry(item: JsonObject) -> PathEntry:
    return PathEntry(
        level=_str(item, "level"),
        label=_str(item, "label"),
        description=_str(item, "description"),
    )


def _node_entry(item: JsonObject) -> NodeEntry:
    return NodeEntry(
        datapath=_str(item, "datapath"),
        label=_str(item, "label"),
        description=_str(item, "description"),
    )


def _child_table(item: JsonObject) -> ChildTable:
    return ChildTable(
        datapath=_str(item, "datapath"),
        label=_str(item, "label"),
        description=_str(item, "description"),
        db_boundary_label=_str(item, "db_boundary_label"),
        db_boundary_tables=_str(item, "db_boundary_tables"),
    )


def _column_info(item: JsonObject) -> ColumnInfo:
    return ColumnInfo(
        id=_str(item, "id"),
        label=_str(item, "label"),
        description=_str(item, "description"),
        type=_str(item, "type"),
        index=_int(item, "index"),
    )


def _boundary_table(item: JsonObject) -> BoundaryTable:
    return BoundaryTable(datapath=_str(item, "datapath"), label=_str(item, "label"))


def _document_link(item: JsonObject) -> DocumentLink:
    return DocumentLink(url=_str(item, "url"), title=_str(item, "title"), type=_str(item, "type"))


def _metadata_item(item: JsonObject) -> MetadataItem:
    return MetadataItem(label=_str(item, "label"), value=_str(item, "value"))


def _pagination_info(info: JsonObject) -> PaginationInfo:
    return PaginationInfo(
        rows_limit=_int(info, "rows_limit"),
        current_page=_int(info, "current_page"),
        total_pages=_int(info, "total_pages"),
        total_results=_int(info, "total_results"),
    )


def parse_parent_metadata_response(payload: JsonObject) -> ParentMetadataResponse:
    result = _object(payload, "result")
    info = _object(payload, "info")
    return ParentMetadataResponse(
        datapath=_datapath(payload),
        path=_list_of(result, "path", _path_entry),
        immediate_nodes=_list_of(result, "immediate_nodes", _node_entry),
        children_tables=_list_of(result, "children_tables", _child_table),
        info=ParentMetadataInfo(
            result_type=_str(info, "result_type"),
            children_tables_limit=_int(info, "children_tables_limit"),
            children_tables_total=_int(info, "children_tables_total"),
            current_page=_int(info, "current_page"),
            total_pages=_int(info, "total_pages"),
        ),
    )


def parse_table_metadata_response(payload: JsonObject) -> TableMetadataResponse:
    result = _object(payload, "result")
    info = _object(payload, "info")
    return TableMetadataResponse(
        datapath=_datapath(payload),
        path=_list_of(result, "path", _path_entry),
        columns=_list_of(result, "columns", _column_info),
        db_boundary_datapath=_str(result, "db_boundary_datapath"),
        db_boundary_label=_str(result, "db_boundary_label"),
        db_boundary_tables=_list_of(result, "db_boundary_tables", _boundary_table),
        ancestor_datapaths=_str_list(result, "ancestor_datapaths"),
        documents=_list_of(result, "documents", _document_link),
        metadata=_list_of(result, "metadata", _metadata_item),
        info=TableMetadataInfo(result_type=_str(info, "result_type")),
    )


def parse_data_response(payload: JsonObject) -> DataResponse:
    return DataResponse(
        datapath=_datapath(payload),
        result=payload.get("result"),
        info=_pagination_info(_object(payload, "info")),
    )


def parse_stats_response(payload: JsonObject) -> StatsResponse:
    info = _object(payload, "info")
    return StatsResponse(
        datapath=_datapath(payload),
        result=payload.get("result"),
        info=StatsInfo(
            column=info.get("column"),
            operations=_str_list(info, "operations"),
            rows_limit=_int(info, "rows_limit"),
            current_page=_int(info, "current_page"),
            total_pages=_int(info, "total_pages"),
            total_results=_int(info, "total_results"),
        ),
    )


def parse_export_response(payload: JsonObject) -> ExportResponse:
    return ExportResponse(
        datapath=_datapath(payload),
        export_url=_str(payload, "export_url"),
        head_url=_str(payload, "head_url"),
    )


__all__ = [
    "parse_parent_metadata_response",
    "parse_table_metadata_response",
    "parse_data_response",
    "parse_stats_response",
    "parse_export_response",
]
