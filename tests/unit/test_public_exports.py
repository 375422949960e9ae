from __future__ import annotations

import enigma_client
import enigma_client.queries as queries


def test_package_exports_client_config_and_errors():
    expected = {
        "EnigmaClient",
        "EnigmaClientConfig",
        "EnigmaApiError",
        "EnigmaServerError",
        "EnigmaTransportError",
        "EnigmaDecodeError",
        "Conjunction",
        "Operation",
        "SortDirection",
    }
    assert expected.issubset(set(enigma_client.__all__))


def test_queries_package_exports_builders_and_models_only():
    expected = {
        "MetadataQuery",
        "DataQuery",
        "StatsQuery",
        "ExportQuery",
        "DataResponse",
        "StatsResponse",
        "ExportResponse",
        "ParentMetadataResponse",
        "TableMetadataResponse",
    }
    assert expected.issubset(set(queries.__all__))
    assert "BoundQuery" not in queries.__all__
    assert "parse_data_response" not in queries.__all__
