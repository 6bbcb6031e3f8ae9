"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture(autouse=True)
def _env_setup(monkeypatch):
    """Point settings at a local database for tests."""
    monkeypatch.setenv("NEO4J_URI", "bolt://localhost:7687")
    monkeypatch.setenv("NEO4J_USER", "neo4j")
    monkeypatch.setenv("NEO4J_PASSWORD", "test")
    monkeypatch.setenv("NEO4J_DATABASE", "movies")
    monkeypatch.setenv("NEO4J_VERSION", "5")
    monkeypatch.setenv("LOG_FORMAT", "console")


@pytest.fixture
def settings():
    from moviegraph.config import Settings

    return Settings(NEO4J_URI="bolt://localhost:7687", NEO4J_VERSION="4")


def make_summary(properties_set: int) -> MagicMock:
    summary = MagicMock()
    summary.counters.properties_set = properties_set
    return summary


@pytest.fixture
def mock_neo4j():
    conn = AsyncMock()
    conn.execute_read = AsyncMock(return_value=[])
    conn.execute_write = AsyncMock(return_value=make_summary(0))
    conn.health_check = AsyncMock(return_value=True)
    return conn


@pytest.fixture
def search_rows() -> list[dict]:
    return [
        {"title": "The Matrix", "tagline": "Welcome to the Real World", "votes": 5, "released": 1999},
        {"title": "The Matrix Reloaded", "tagline": "Free your mind", "votes": None, "released": 2003},
    ]


@pytest.fixture
def detail_rows() -> list[dict]:
    return [
        {"title": "The Matrix", "name": "Keanu Reeves", "job": "acted", "role": ["Neo"]},
        {"title": "The Matrix", "name": "Lana Wachowski", "job": "directed", "role": None},
        {"title": "The Matrix", "name": "Hugo Weaving", "job": "acted", "role": ["Agent Smith", "Narrator"]},
    ]


@pytest.fixture
def graph_rows() -> list[dict]:
    return [
        {"movie": "Top Gun", "cast": ["Tom Cruise", "Kelly McGillis"]},
        {"movie": "Days of Thunder", "cast": ["Tom Cruise", "Nicole Kidman"]},
        {"movie": "A Few Good Men", "cast": ["Tom Cruise", "Jack Nicholson", "Kelly McGillis"]},
    ]
