"""Shared FastAPI dependency injection."""

from __future__ import annotations

from moviegraph.graph_db.connection import Neo4jConnection
from moviegraph.services.movie_service import MovieService

_neo4j_conn: Neo4jConnection | None = None


def set_neo4j_conn(conn: Neo4jConnection | None) -> None:
    global _neo4j_conn
    _neo4j_conn = conn


def get_neo4j() -> Neo4jConnection:
    if _neo4j_conn is None:
        raise RuntimeError("Neo4j not initialized")
    return _neo4j_conn


def get_movie_service() -> MovieService:
    return MovieService(get_neo4j())
