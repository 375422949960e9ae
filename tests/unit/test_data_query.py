from __future__ import annotations

import pytest

from enigma_client.core.errors import EnigmaValidationError
from enigma_client.queries.enums import Conjunction, SortDirection
from tests.shared.payloads import API_KEY, DATAPATH, make_data_payload


def test_data_builder_starts_with_empty_params(client):
    query = client.data(DATAPATH)
    assert len(query.params) == 0
    assert query.datapath == DATAPATH
    assert query.base_uri == f"https://api.enigma.io/v2/data/{API_KEY}"


def test_configuration_methods_return_same_builder(client):
    query = client.data(DATAPATH)
    assert query.select("a") is query
    assert query.search("x") is query
    assert query.where("a>1") is query
    assert query.conjunction(Conjunction.OR) is query
    assert query.sort("a", SortDirection.ASC) is query
    assert query.limit(10) is query
    assert query.page(2) is query


@pytest.mark.parametrize(
    ("configure", "key", "expected"),
    [
        (lambda q: q.conjunction(Conjunction.OR), "conjunction", "or"),
        (lambda q: q.conjunction("and"), "conjunction", "and"),
        (lambda q: q.limit(100), "limit", "100"),
        (lambda q: q.page(2), "page", "2"),
        (lambda q: q.search("hello"), "search", "hello"),
        (lambda q: q.select("column"), "select", "column"),
        (lambda q: q.select("column1", "column2", "column3"), "select", "column1,column2,column3"),
        (lambda q: q.sort("column", SortDirection.ASC), "sort", "column+"),
        (lambda q: q.sort("column", "-"), "sort", "column-"),
        (lambda q: q.where("is charlie?"), "where", "is charlie?"),
    ],
    ids=[
        "conjunction-enum",
        "conjunction-str",
        "limit",
        "page",
        "search",
        "select-single",
        "select-multiple",
        "sort-asc",
        "sort-desc-str",
        "where",
    ],
)
def test_data_query_parameters(client, configure, key, expected):
    query = configure(client.data(DATAPATH))
    assert query.params.get(key) == expected


def test_search_and_where_accumulate(client):
    query = (
        client.data(DATAPATH)
        .search("@namelast smith")
        .search("@namefirst john")
        .where("total_people>10")
        .where("total_people<100")
        .conjunction(Conjunction.OR)
    )
    assert query.params.get_all("search") == ("@namelast smith", "@namefirst john")
    assert query.params.get_all("where") == ("total_people>10", "total_people<100")


def test_single_valued_parameters_keep_last_write(client):
    query = client.data(DATAPATH).limit(10).limit(20).select("a").select("b", "c").sort("a", "+").sort("b", "-")
    assert query.params.get_all("limit") == ("20",)
    assert query.params.get_all("select") == ("b,c",)
    assert query.params.get_all("sort") == ("b-",)


def test_limit_above_server_maximum_is_not_rejected(client):
    query = client.data(DATAPATH).limit(1000)
    assert query.params.get("limit") == "1000"


@pytest.mark.parametrize(
    "configure",
    [
        lambda q: q.select(),
        lambda q: q.limit("10"),
        lambda q: q.limit(True),
        lambda q: q.page(1.5),
        lambda q: q.conjunction("xor"),
        lambda q: q.sort("a", "asc"),
        lambda q: q.search(5),
    ],
    ids=["empty-select", "str-limit", "bool-limit", "float-page", "bad-conjunction", "bad-sort", "non-str-search"],
)
def test_invalid_arguments_raise_validation_error(client, configure):
    with pytest.raises(EnigmaValidationError):
        configure(client.data(DATAPATH))


def test_results_decodes_data_response(client, transport):
    transport.payloads.append(make_data_payload(rows=[{"namefull": "A"}, {"namefull": "B"}]))
    response = client.data(DATAPATH).select("namefull").results()
    assert response.datapath == DATAPATH
    assert response.result == [{"namefull": "A"}, {"namefull": "B"}]
    assert response.info.rows_limit == 500
    assert response.info.total_results == 2
    assert transport.uris == [f"https://api.enigma.io/v2/data/{API_KEY}/{DATAPATH}?select=namefull"]


def test_builder_can_be_executed_more_than_once(client, transport):
    transport.payloads.extend([make_data_payload(), make_data_payload()])
    query = client.data(DATAPATH).limit(5)
    query.results()
    query.results()
    assert len(transport.uris) == 2
    assert transport.uris[0] == transport.uris[1]


def test_iter_pages_walks_until_total_pages(client, transport):
    transport.payloads.extend(
        [
            make_data_payload(current_page=2, total_pages=3),
            make_data_payload(current_page=3, total_pages=3),
        ]
    )
    query = client.data(DATAPATH).limit(1).page(2)
    pages = list(query.iter_pages())
    assert [page.info.current_page for page in pages] == [2, 3]
    assert transport.uris[0].endswith("?limit=1&page=2")
    assert transport.uris[1].endswith("?limit=1&page=3")
    assert query.params.get("page") == "2"


def test_separate_builders_do_not_share_params(client):
    first = client.data(DATAPATH).select("a")
    second = client.data(DATAPATH)
    assert "select" in first.params
    assert "select" not in second.params
