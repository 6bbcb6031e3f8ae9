"""Movie catalog queries: search, detail, voting and the actor graph."""

from __future__ import annotations

from neo4j.exceptions import DriverError, Neo4jError

from moviegraph.graph_db.connection import Neo4jConnection
from moviegraph.graph_db.queries import (
    MOVIE_DETAIL,
    MOVIE_GRAPH,
    SEARCH_MOVIES,
    VOTE_FOR_MOVIE,
)
from moviegraph.models.schemas import GraphResponse, MovieDetail, MovieResult, VoteResult
from moviegraph.services.projections import (
    project_graph,
    project_movie,
    project_search,
    project_vote,
)
from moviegraph.utils.exceptions import GraphQueryError
from moviegraph.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_GRAPH_LIMIT = 50

_QUERY_ERRORS = (Neo4jError, DriverError)


class MovieService:
    """Runs the catalog queries and shapes their rows into response models."""

    def __init__(self, neo4j_conn: Neo4jConnection) -> None:
        self._conn = neo4j_conn

    async def search(self, query: str) -> list[MovieResult]:
        try:
            rows = await self._conn.execute_read(SEARCH_MOVIES, title=query)
        except _QUERY_ERRORS as exc:
            logger.error("search_query_failed", query=query, error=str(exc))
            raise GraphQueryError("search", exc) from exc
        return project_search(rows)

    async def get_movie(self, title: str) -> MovieDetail:
        try:
            rows = await self._conn.execute_read(MOVIE_DETAIL, title=title)
        except _QUERY_ERRORS as exc:
            logger.error("movie_query_failed", title=title, error=str(exc))
            raise GraphQueryError("movie", exc) from exc
        return project_movie(rows)

    async def vote(self, title: str) -> VoteResult:
        try:
            summary = await self._conn.execute_write(VOTE_FOR_MOVIE, title=title)
        except _QUERY_ERRORS as exc:
            logger.error("vote_query_failed", title=title, error=str(exc))
            raise GraphQueryError("vote", exc) from exc

        result = project_vote(summary.counters.properties_set)
        if result.updates == 0:
            logger.info("vote_no_match", title=title)
        return result

    async def get_graph(self, limit: int = DEFAULT_GRAPH_LIMIT) -> GraphResponse:
        try:
            rows = await self._conn.execute_read(MOVIE_GRAPH, limit=limit)
        except _QUERY_ERRORS as exc:
            logger.error("graph_query_failed", limit=limit, error=str(exc))
            raise GraphQueryError("graph", exc) from exc
        return project_graph(rows)
