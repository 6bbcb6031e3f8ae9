"""Async Neo4j driver management: pooling, routing, and health checks."""

from __future__ import annotations

from neo4j import READ_ACCESS, WRITE_ACCESS, AsyncDriver, AsyncGraphDatabase, ResultSummary

from moviegraph.config import Settings
from moviegraph.utils.logging import get_logger

logger = get_logger(__name__)


class Neo4jConnection:
    """Manages the async Neo4j driver lifecycle.

    Reads are routed to readers and writes to the leader of a cluster; every
    session targets the configured database (or the server default when the
    server predates multi-database support).
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._database = settings.neo4j_database
        self._driver: AsyncDriver | None = None

    async def connect(self) -> None:
        self._driver = AsyncGraphDatabase.driver(
            self._settings.NEO4J_URI,
            auth=(self._settings.NEO4J_USER, self._settings.NEO4J_PASSWORD),
            max_connection_pool_size=self._settings.NEO4J_MAX_POOL_SIZE,
        )
        await self._driver.verify_connectivity()
        logger.info("neo4j_connected", uri=self._settings.NEO4J_URI, database=self._database)

    async def close(self) -> None:
        if self._driver:
            await self._driver.close()
            self._driver = None
            logger.info("neo4j_disconnected")

    async def health_check(self) -> bool:
        records = await self.execute_read("RETURN 1 AS ok")
        return bool(records) and records[0].get("ok") == 1

    @property
    def driver(self) -> AsyncDriver:
        if self._driver is None:
            raise RuntimeError("Neo4j driver not initialized, call connect() first")
        return self._driver

    async def execute_read(self, query: str, **params: object) -> list[dict]:
        """Run a read query and return every row as a plain dict, in order."""
        async with self.driver.session(
            database=self._database, default_access_mode=READ_ACCESS
        ) as session:
            result = await session.run(query, params)
            return [dict(record) async for record in result]

    async def execute_write(self, query: str, **params: object) -> ResultSummary:
        """Run a write query and return its summary (counters, timings)."""
        async with self.driver.session(
            database=self._database, default_access_mode=WRITE_ACCESS
        ) as session:
            result = await session.run(query, params)
            return await result.consume()
