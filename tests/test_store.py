# tests/test_store.py
from fastapi.testclient import TestClient

from conftest import HEADERS, product_body
from productapi.database import ProductStore
from productapi.main import create_app


def test_store_keeps_insertion_order_and_replaces_in_place():
    s = ProductStore()
    for pid in ("a", "b", "c"):
        s.append({"id": pid, "name": pid})

    assert s.replace("b", {"id": "b", "name": "B"}) == {"id": "b", "name": "B"}
    assert [p["name"] for p in s] == ["a", "B", "c"]
    assert s.replace("zzz", {"id": "zzz"}) is None


def test_store_lookup_is_exact_match():
    s = ProductStore()
    s.append({"id": 5, "name": "numeric id"})
    assert s.find("5") is None
    assert s.index_of(5) == 0


def test_store_remove_and_clear():
    s = ProductStore()
    s.append({"id": "a"})
    s.append({"id": "b"})
    assert s.remove("a") is True
    assert s.remove("a") is False
    assert [p["id"] for p in s.all()] == ["b"]
    s.clear()
    assert len(s) == 0


def test_all_returns_a_snapshot():
    s = ProductStore()
    s.append({"id": "a"})
    snapshot = s.all()
    snapshot.clear()
    assert len(s) == 1


def test_apps_do_not_share_state():
    first, second = TestClient(create_app()), TestClient(create_app())
    first.post("/api/products", json=product_body(), headers=HEADERS)
    assert first.get("/api/products", headers=HEADERS).json()["total"] == 1
    assert second.get("/api/products", headers=HEADERS).json()["total"] == 0
