import asyncio
from rich import print

from app.settings import CATALOG_BASE_URL
from sdk.pystore import CatalogClient

PRODUCT_ID = 2


async def submit(client, n):
    r = await client.update_product_details_async(
        PRODUCT_ID, f"Mouse v{n}", 20.0 + n, n, description=f"revision {n}", category=f"batch-{n}"
    )
    print(f"update {n} -> HTTP {r.status_code}")
    return n


async def main():
    c = CatalogClient(base_url=CATALOG_BASE_URL)
    print("Before:", c.get_product(PRODUCT_ID))

    print("\n⚡ Sending concurrent replacements...")
    await asyncio.gather(*(submit(c, n) for n in range(1, 11)))

    final = c.get_product(PRODUCT_ID)
    print("\n📦 Final product state:", final)
    # every field must come from the same revision
    n = final["stock"]
    consistent = (
        final["name"] == f"Mouse v{n}"
        and final["description"] == f"revision {n}"
        and final["category"] == f"batch-{n}"
    )
    print("Consistent record:", consistent)


if __name__ == "__main__":
    asyncio.run(main())
