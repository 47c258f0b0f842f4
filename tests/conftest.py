# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from productapi.database import ProductStore
from productapi.main import create_app

HEADERS = {"x-api-key": "123456"}


def product_body(**overrides):
    body = {
        "name": "Blue Shirt",
        "description": "Cotton, long sleeves",
        "price": 24.99,
        "category": "Clothing",
        "inStock": True,
    }
    body.update(overrides)
    return body


@pytest.fixture
def store():
    return ProductStore()


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def create(client):
    def _create(**overrides):
        r = client.post("/api/products", json=product_body(**overrides), headers=HEADERS)
        assert r.status_code == 201, r.text
        return r.json()
    return _create
