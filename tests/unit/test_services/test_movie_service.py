"""Unit tests for the movie service."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from neo4j.exceptions import ServiceUnavailable

from moviegraph.graph_db.queries import MOVIE_DETAIL, MOVIE_GRAPH, SEARCH_MOVIES, VOTE_FOR_MOVIE
from moviegraph.services.movie_service import DEFAULT_GRAPH_LIMIT, MovieService
from moviegraph.utils.exceptions import GraphQueryError


@pytest.mark.asyncio
async def test_search_passes_query_as_title(mock_neo4j, search_rows):
    mock_neo4j.execute_read = AsyncMock(return_value=search_rows)
    service = MovieService(mock_neo4j)

    result = await service.search("matrix")

    mock_neo4j.execute_read.assert_awaited_once_with(SEARCH_MOVIES, title="matrix")
    assert [r.movie.title for r in result] == ["The Matrix", "The Matrix Reloaded"]


@pytest.mark.asyncio
async def test_get_movie(mock_neo4j, detail_rows):
    mock_neo4j.execute_read = AsyncMock(return_value=detail_rows)
    service = MovieService(mock_neo4j)

    detail = await service.get_movie("The Matrix")

    mock_neo4j.execute_read.assert_awaited_once_with(MOVIE_DETAIL, title="The Matrix")
    assert detail.title == "The Matrix"
    assert len(detail.cast) == 3


@pytest.mark.asyncio
async def test_vote_reports_properties_set(mock_neo4j):
    mock_neo4j.execute_write.return_value.counters.properties_set = 1
    service = MovieService(mock_neo4j)

    result = await service.vote("The Matrix")

    mock_neo4j.execute_write.assert_awaited_once_with(VOTE_FOR_MOVIE, title="The Matrix")
    assert result.updates == 1


@pytest.mark.asyncio
async def test_vote_unknown_title_is_zero(mock_neo4j):
    service = MovieService(mock_neo4j)
    result = await service.vote("No Such Movie")
    assert result.model_dump() == {"updates": 0}


@pytest.mark.asyncio
async def test_get_graph_default_limit(mock_neo4j, graph_rows):
    mock_neo4j.execute_read = AsyncMock(return_value=graph_rows)
    service = MovieService(mock_neo4j)

    graph = await service.get_graph()

    mock_neo4j.execute_read.assert_awaited_once_with(MOVIE_GRAPH, limit=DEFAULT_GRAPH_LIMIT)
    assert len(graph.nodes) == 3 + 4


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("method", "args"),
    [("search", ("x",)), ("get_movie", ("x",)), ("get_graph", (10,))],
)
async def test_read_failures_raise_graph_query_error(mock_neo4j, method, args):
    mock_neo4j.execute_read = AsyncMock(side_effect=ServiceUnavailable("down"))
    service = MovieService(mock_neo4j)

    with pytest.raises(GraphQueryError) as exc_info:
        await getattr(service, method)(*args)

    assert isinstance(exc_info.value.cause, ServiceUnavailable)


@pytest.mark.asyncio
async def test_vote_failure_raises_graph_query_error(mock_neo4j):
    mock_neo4j.execute_write = AsyncMock(side_effect=ServiceUnavailable("down"))
    service = MovieService(mock_neo4j)

    with pytest.raises(GraphQueryError) as exc_info:
        await service.vote("The Matrix")

    assert exc_info.value.operation == "vote"
