import asyncio
import requests
from app.config import PRODUCT_API_URL
from sdk.pyproducts import ProductClient

async def create_and_read(client, n):
    try:
        created = await asyncio.to_thread(
            client.create_product, f"Gadget {n}", f"Gadget number {n}", 10 * n, "gadgets", n % 2 == 0
        )
        fetched = await asyncio.to_thread(client.get_product, created["id"])
        print(f"✅ created {fetched['name']} ({fetched['id']})")
        return created["id"]
    except requests.exceptions.HTTPError as e:
        print(f"❌ gadget {n} failed with error: {e}")
        return None

async def main():
    c = ProductClient(base_url=PRODUCT_API_URL)

    print("\n⚡ Creating products concurrently...")
    ids = await asyncio.gather(*(create_and_read(c, n) for n in range(1, 6)))
    created = [pid for pid in ids if pid]
    print(f"\n🆔 {len(set(created))} distinct ids for {len(created)} products")

    # concurrent reads through the async client
    pages = await asyncio.gather(
        c.list_products_async(category="gadgets", page=1, limit=3),
        c.list_products_async(category="gadgets", page=2, limit=3),
    )
    for listing in pages:
        print(f"📦 page {listing['page']}: {[p['name'] for p in listing['products']]} (total {listing['total']})")

    print("\n📊 Stats:", c.product_stats())

    for pid in created:
        c.delete_product(pid)
    print("🧹 Cleaned up", len(created), "products")

if __name__ == "__main__":
    asyncio.run(main())
