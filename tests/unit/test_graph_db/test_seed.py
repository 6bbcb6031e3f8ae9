"""Unit tests for schema setup and sample data loading."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from moviegraph.graph_db.queries import MERGE_ACTED_IN, MERGE_MOVIE
from moviegraph.graph_db.schema import CONSTRAINTS, INDEXES, init_schema
from moviegraph.graph_db.seed import (
    SAMPLE_DIRECTORS,
    SAMPLE_MOVIES,
    SAMPLE_PEOPLE,
    SAMPLE_ROLES,
    load_sample_graph,
)


@pytest.mark.asyncio
async def test_init_schema_runs_every_statement(mock_neo4j):
    await init_schema(mock_neo4j)
    statements = [call.args[0] for call in mock_neo4j.execute_write.await_args_list]
    assert statements == CONSTRAINTS + INDEXES


@pytest.mark.asyncio
async def test_init_schema_skips_failed_statements(mock_neo4j):
    mock_neo4j.execute_write = AsyncMock(side_effect=RuntimeError("read-only user"))
    await init_schema(mock_neo4j)
    assert mock_neo4j.execute_write.await_count == len(CONSTRAINTS) + len(INDEXES)


@pytest.mark.asyncio
async def test_load_sample_graph(mock_neo4j):
    await load_sample_graph(mock_neo4j)

    calls = mock_neo4j.execute_write.await_args_list
    assert len(calls) == (
        len(SAMPLE_MOVIES) + len(SAMPLE_PEOPLE) + len(SAMPLE_ROLES) + len(SAMPLE_DIRECTORS)
    )
    assert calls[0].args[0] == MERGE_MOVIE
    acted = [c for c in calls if c.args[0] == MERGE_ACTED_IN]
    assert acted[0].kwargs == {"name": "Keanu Reeves", "title": "The Matrix", "roles": ["Neo"]}


def test_sample_relationships_reference_known_nodes():
    titles = {m["title"] for m in SAMPLE_MOVIES}
    names = {p["name"] for p in SAMPLE_PEOPLE}
    for name, title, *_ in SAMPLE_ROLES + SAMPLE_DIRECTORS:
        assert name in names
        assert title in titles
