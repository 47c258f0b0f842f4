# tests/test_concurrency.py
import asyncio

import httpx

from conftest import HEADERS, product_body


async def _create(ac, n):
    r = await ac.post("/api/products", json=product_body(name=f"item {n}", category="bulk"), headers=HEADERS)
    return r


async def _create_and_delete(app, count):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        created = await asyncio.gather(*(_create(ac, n) for n in range(count)))
        ids = [r.json()["id"] for r in created]
        deleted = await asyncio.gather(*(ac.delete(f"/api/products/{pid}", headers=HEADERS) for pid in ids[::2]))
        return created, deleted


def test_concurrent_creates_get_distinct_ids(app, store):
    created, deleted = asyncio.run(_create_and_delete(app, 25))

    assert all(r.status_code == 201 for r in created)
    ids = [r.json()["id"] for r in created]
    assert len(set(ids)) == 25
    assert all(r.status_code == 204 for r in deleted)

    remaining = [p["id"] for p in store.all()]
    assert len(remaining) == 12
    assert set(remaining) == set(ids[1::2])
