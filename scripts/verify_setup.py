"""Check that Neo4j is reachable and that a running server answers every route.

Usage: python scripts/verify_setup.py [--api-url http://localhost:8080]
"""

from __future__ import annotations

import argparse
import asyncio
import sys

import httpx

from moviegraph.config import get_settings
from moviegraph.graph_db.connection import Neo4jConnection


async def check_neo4j() -> bool:
    settings = get_settings()
    conn = Neo4jConnection(settings)
    try:
        await conn.connect()
        assert await conn.health_check()
        print(f"[OK] Neo4j connection successful ({settings.NEO4J_URI})")
        return True
    except Exception as exc:
        print(f"[FAIL] Neo4j: {exc}")
        return False
    finally:
        await conn.close()


async def check_api(base_url: str) -> bool:
    checks = [
        ("/health", lambda body: body["status"] == "healthy"),
        ("/search?q=matrix", lambda body: isinstance(body, list)),
        ("/movie/The%20Matrix", lambda body: "title" in body),
        ("/graph?limit=5", lambda body: "nodes" in body and "links" in body),
    ]
    ok = True
    async with httpx.AsyncClient(base_url=base_url, timeout=15) as client:
        for path, predicate in checks:
            try:
                resp = await client.get(path)
                resp.raise_for_status()
                assert predicate(resp.json())
                print(f"[OK] GET {path}")
            except Exception as exc:
                print(f"[FAIL] GET {path}: {exc}")
                ok = False
    return ok


async def main(api_url: str | None) -> int:
    results = [await check_neo4j()]
    if api_url:
        results.append(await check_api(api_url.rstrip("/")))
    return 0 if all(results) else 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--api-url", default=None)
    args = parser.parse_args()
    sys.exit(asyncio.run(main(args.api_url)))
