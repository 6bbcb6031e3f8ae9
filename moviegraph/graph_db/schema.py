"""Neo4j constraints and indexes used by the movie queries."""

from __future__ import annotations

from moviegraph.graph_db.connection import Neo4jConnection
from moviegraph.utils.logging import get_logger

logger = get_logger(__name__)

CONSTRAINTS = [
    "CREATE CONSTRAINT movie_title IF NOT EXISTS FOR (m:Movie) REQUIRE m.title IS UNIQUE",
    "CREATE CONSTRAINT person_name IF NOT EXISTS FOR (p:Person) REQUIRE p.name IS UNIQUE",
]

INDEXES = [
    "CREATE INDEX movie_released IF NOT EXISTS FOR (m:Movie) ON (m.released)",
]


async def init_schema(conn: Neo4jConnection) -> None:
    """Create all constraints and indexes on the Neo4j database."""
    for kind, statements in (("constraint", CONSTRAINTS), ("index", INDEXES)):
        for stmt in statements:
            try:
                await conn.execute_write(stmt)
            except Exception as exc:
                logger.warning("schema_statement_skipped", kind=kind, statement=stmt, error=str(exc))

    logger.info("neo4j_schema_initialized")
