# tests/test_sdk.py
import asyncio

import httpx
import pytest

from sdk.pyproducts import ProductClient


@pytest.fixture
def sdk(client):
    return ProductClient(base_url="http://testserver", session=client)


def test_create_list_get_roundtrip(sdk):
    shirt = sdk.create_product("Blue Shirt", "Cotton", 20, "Clothing", True, color="blue")
    sdk.create_product("Mug", "Ceramic", 8.5, "Kitchen", False)

    assert sdk.get_product(shirt["id"]) == shirt
    assert shirt["color"] == "blue"

    listing = sdk.list_products(category="clothing")
    assert listing["total"] == 1
    assert listing["data"] == [shirt]
    assert sdk.list_products(page=2, limit=1)["data"][0]["name"] == "Mug"


def test_search_stats_replace_delete(sdk):
    shirt = sdk.create_product("Blue Shirt", "Cotton", 20, "Clothing")
    assert sdk.search_products("SHIRT")["count"] == 1
    assert sdk.search_products("") == {"error": "Missing search query (?q=)"}
    assert sdk.stats() == {"countByCategory": {"Clothing": 1}}

    replaced = sdk.replace_product(shirt["id"], "Red Shirt", "Linen", 0, "Clothing", False)
    assert replaced["id"] == shirt["id"]
    assert replaced["inStock"] is False

    assert sdk.delete_product(shirt["id"]) is True
    assert sdk.list_products()["total"] == 0


def test_errors_raise(sdk):
    with pytest.raises(httpx.HTTPStatusError):
        sdk.get_product("missing")


def test_wrong_key_is_rejected(client):
    bad = ProductClient(base_url="http://testserver", api_key="000000", session=client)
    with pytest.raises(httpx.HTTPStatusError) as exc:
        bad.stats()
    assert exc.value.response.status_code == 401


def test_create_product_async(app, store):
    sdk = ProductClient(base_url="http://test", session=httpx.Client(),
                        async_transport=httpx.ASGITransport(app=app))
    product = asyncio.run(sdk.create_product_async("Lamp", "LED", 30.0, "Home", transport="truck"))
    assert product["name"] == "Lamp"
    # extra keyword arguments are body fields, whatever their name
    assert product["transport"] == "truck"
    assert store.find(product["id"]) == product
