import asyncio

import httpx

from sdk.pyproducts import ProductClient


async def create_one(client, n):
    try:
        product = await client.create_product_async(
            f"Widget {n}", f"Batch widget #{n}", n * 1.5, "widgets", n % 2 == 0
        )
        print(f"✅ created {product['name']} -> {product['id']}")
        return product
    except httpx.HTTPStatusError as e:
        print(f"❌ Widget {n} rejected with {e.response.status_code}: {e.response.text}")
    except httpx.HTTPError as e:
        print(f"❌ Widget {n} failed: {e}")
    return None


async def main(count: int = 20):
    c = ProductClient(base_url="http://127.0.0.1:3000")
    before = c.list_products(category="widgets")["total"]

    print(f"\n⚡ Creating {count} products concurrently...")
    created = await asyncio.gather(*(create_one(c, n) for n in range(count)))
    created = [p for p in created if p is not None]

    ids = [p["id"] for p in created]
    print(f"\n🆔 {len(ids)} created, {len(set(ids))} distinct ids")

    after = c.list_products(category="widgets")["total"]
    print(f"📦 widgets in store: {before} -> {after}")
    print("📊 Stats:", c.stats())

    if len(set(ids)) != len(ids) or after - before != len(ids):
        raise SystemExit("store lost or duplicated a product")


if __name__ == "__main__":
    asyncio.run(main())
