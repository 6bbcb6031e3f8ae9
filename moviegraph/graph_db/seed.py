"""Schema initialization and a small sample movie graph for local development."""

from __future__ import annotations

import asyncio

from moviegraph.config import get_settings
from moviegraph.graph_db.connection import Neo4jConnection
from moviegraph.graph_db.queries import (
    MERGE_ACTED_IN,
    MERGE_DIRECTED,
    MERGE_MOVIE,
    MERGE_PERSON,
)
from moviegraph.graph_db.schema import init_schema
from moviegraph.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

SAMPLE_MOVIES = [
    {"title": "The Matrix", "released": 1999, "tagline": "Welcome to the Real World"},
    {"title": "The Matrix Reloaded", "released": 2003, "tagline": "Free your mind"},
    {"title": "Top Gun", "released": 1986, "tagline": "I feel the need, the need for speed."},
    {"title": "Days of Thunder", "released": 1990, "tagline": "His heart is burning... With the need for speed."},
    {"title": "A Few Good Men", "released": 1992, "tagline": "In the heart of the nation's capital..."},
]

SAMPLE_PEOPLE = [
    {"name": "Keanu Reeves", "born": 1964},
    {"name": "Carrie-Anne Moss", "born": 1967},
    {"name": "Laurence Fishburne", "born": 1961},
    {"name": "Lana Wachowski", "born": 1965},
    {"name": "Tom Cruise", "born": 1962},
    {"name": "Kelly McGillis", "born": 1957},
    {"name": "Nicole Kidman", "born": 1967},
    {"name": "Tony Scott", "born": 1944},
    {"name": "Jack Nicholson", "born": 1937},
    {"name": "Rob Reiner", "born": 1947},
]

# (person, movie, roles)
SAMPLE_ROLES = [
    ("Keanu Reeves", "The Matrix", ["Neo"]),
    ("Carrie-Anne Moss", "The Matrix", ["Trinity"]),
    ("Laurence Fishburne", "The Matrix", ["Morpheus"]),
    ("Keanu Reeves", "The Matrix Reloaded", ["Neo"]),
    ("Carrie-Anne Moss", "The Matrix Reloaded", ["Trinity"]),
    ("Tom Cruise", "Top Gun", ["Maverick"]),
    ("Kelly McGillis", "Top Gun", ["Charlie"]),
    ("Tom Cruise", "Days of Thunder", ["Cole Trickle"]),
    ("Nicole Kidman", "Days of Thunder", ["Dr. Claire Lewicki"]),
    ("Tom Cruise", "A Few Good Men", ["Lt. Daniel Kaffee"]),
    ("Jack Nicholson", "A Few Good Men", ["Col. Nathan R. Jessup"]),
]

SAMPLE_DIRECTORS = [
    ("Lana Wachowski", "The Matrix"),
    ("Lana Wachowski", "The Matrix Reloaded"),
    ("Tony Scott", "Top Gun"),
    ("Tony Scott", "Days of Thunder"),
    ("Rob Reiner", "A Few Good Men"),
]


async def load_sample_graph(conn: Neo4jConnection) -> None:
    for movie in SAMPLE_MOVIES:
        await conn.execute_write(MERGE_MOVIE, **movie)
    for person in SAMPLE_PEOPLE:
        await conn.execute_write(MERGE_PERSON, **person)
    for name, title, roles in SAMPLE_ROLES:
        await conn.execute_write(MERGE_ACTED_IN, name=name, title=title, roles=roles)
    for name, title in SAMPLE_DIRECTORS:
        await conn.execute_write(MERGE_DIRECTED, name=name, title=title)

    logger.info(
        "sample_graph_loaded",
        movies=len(SAMPLE_MOVIES),
        people=len(SAMPLE_PEOPLE),
        relationships=len(SAMPLE_ROLES) + len(SAMPLE_DIRECTORS),
    )


async def seed(with_sample_data: bool = True) -> None:
    settings = get_settings()
    conn = Neo4jConnection(settings)
    await conn.connect()

    try:
        await init_schema(conn)
        if with_sample_data:
            await load_sample_graph(conn)
        logger.info("seed_complete")
    finally:
        await conn.close()


if __name__ == "__main__":
    setup_logging(log_level="INFO", log_format="console")
    asyncio.run(seed())
