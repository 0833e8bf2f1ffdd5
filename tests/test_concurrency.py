# tests/test_concurrency.py
import asyncio
import httpx

from app.main import create_app


async def _replace_task(ac, n):
    body = {"name": f"p{n}", "description": f"d{n}", "price": n, "stock": n, "category": f"c{n}"}
    return await ac.post("/products/1/details", json=body)


async def _run_concurrent_replaces(app, count):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        results = await asyncio.gather(*(_replace_task(ac, n) for n in range(1, count + 1)))
        final = await ac.get("/products/1")
    return results, final


def test_concurrent_replaces_leave_one_whole_record():
    app = create_app()
    results, final = asyncio.run(_run_concurrent_replaces(app, 20))

    assert [r.status_code for r in results] == [204] * 20
    body = final.json()
    n = body["stock"]
    assert 1 <= n <= 20
    assert body == {"id": 1, "name": f"p{n}", "description": f"d{n}", "price": float(n), "stock": n, "category": f"c{n}"}


async def _mixed_reads_and_writes(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        reads = [ac.get("/products/2") for _ in range(10)]
        writes = [ac.post("/products/2/details", json={"name": "New", "price": 1, "stock": 1})]
        return await asyncio.gather(*reads, *writes)


def test_reads_see_old_or_new_record():
    app = create_app()
    results = asyncio.run(_mixed_reads_and_writes(app))
    for r in results[:-1]:
        assert r.status_code == 200
        assert r.json()["name"] in ("Mouse", "New")
    assert results[-1].status_code == 204
