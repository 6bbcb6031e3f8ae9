"""Export the actor/movie graph projection to a JSON file."""

from __future__ import annotations

import argparse
import asyncio
import json

from moviegraph.config import get_settings
from moviegraph.graph_db.connection import Neo4jConnection
from moviegraph.services.movie_service import DEFAULT_GRAPH_LIMIT, MovieService
from moviegraph.utils.logging import setup_logging


async def main(limit: int, filename: str) -> None:
    setup_logging(log_level="INFO", log_format="console")
    settings = get_settings()

    conn = Neo4jConnection(settings)
    await conn.connect()

    try:
        graph = await MovieService(conn).get_graph(limit)
        with open(filename, "w") as f:
            json.dump(graph.model_dump(), f, indent=2)
        print(f"Graph exported to {filename}")
        print(f"  Nodes: {len(graph.nodes)}")
        print(f"  Links: {len(graph.links)}")
    finally:
        await conn.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--limit", type=int, default=DEFAULT_GRAPH_LIMIT)
    parser.add_argument("--output", default="graph_export.json")
    args = parser.parse_args()
    asyncio.run(main(args.limit, args.output))
