"""Delete all nodes and relationships in Neo4j."""

from __future__ import annotations

import asyncio

from moviegraph.config import get_settings
from moviegraph.graph_db.connection import Neo4jConnection
from moviegraph.graph_db.queries import DELETE_ALL
from moviegraph.utils.logging import setup_logging


async def main() -> None:
    setup_logging(log_level="INFO", log_format="console")

    settings = get_settings()
    conn = Neo4jConnection(settings)
    await conn.connect()

    try:
        summary = await conn.execute_write(DELETE_ALL)
        counters = summary.counters
        print(
            f"Deleted {counters.nodes_deleted} nodes and "
            f"{counters.relationships_deleted} relationships from Neo4j."
        )
    finally:
        await conn.close()


if __name__ == "__main__":
    asyncio.run(main())
