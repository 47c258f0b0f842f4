# tests/test_pagination.py
import pytest

from conftest import HEADERS
from productapi.core import parse_int


@pytest.mark.parametrize("raw,expected", [
    ("2", 2), ("  7", 7), ("-3", -3), ("+4", 4), ("12abc", 12), ("1.9", 1),
    ("0x10", 16), ("010", 10), ("", None), ("abc", None), ("0x", None), ("-", None),
])
def test_parse_int_follows_parseint(raw, expected):
    assert parse_int(raw) == expected


@pytest.fixture
def three(create):
    return [create(name=n) for n in ("one", "two", "three")]


def _list(client, **params):
    r = client.get("/api/products", params=params, headers=HEADERS)
    assert r.status_code == 200
    return r.json()


def test_total_ignores_pagination(client, three):
    body = _list(client, page=5, limit=1)
    assert body["total"] == 3
    assert body["data"] == []


def test_limit_caps_page_size(client, three):
    assert _list(client, limit=2)["data"] == three[:2]
    assert _list(client, page=2, limit=2)["data"] == three[2:]


def test_non_numeric_page_or_limit_gives_empty_page(client, three):
    body = _list(client, page="abc")
    assert body["page"] is None
    assert body["limit"] == 10
    assert body["data"] == []

    body = _list(client, limit="many")
    assert body["page"] == 1
    assert body["limit"] is None
    assert body["data"] == []


def test_empty_page_param_is_not_the_default(client, three):
    assert _list(client, page="")["page"] is None


def test_zero_and_negative_values_pass_through(client, three):
    assert _list(client, page=0)["data"] == []
    assert _list(client, limit=0)["data"] == []
    # start and end count back from the end of the list
    body = _list(client, page=-1, limit=1)
    assert body["page"] == -1
    assert body["data"] == [three[1]]


def test_trailing_garbage_is_ignored(client, three):
    body = _list(client, page="2nd", limit="1 item")
    assert body["page"] == 2
    assert body["limit"] == 1
    assert body["data"] == [three[1]]
