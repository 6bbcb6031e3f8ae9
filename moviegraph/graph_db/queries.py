"""Parameterized Cypher query templates for the movie graph."""

SEARCH_MOVIES = """
MATCH (movie:Movie)
WHERE toLower(movie.title) CONTAINS toLower($title)
RETURN movie.title AS title, movie.tagline AS tagline, movie.votes AS votes, movie.released AS released
"""

# OPTIONAL MATCH + UNWIND yields one row with null person fields for a movie without cast
MOVIE_DETAIL = """
MATCH (movie:Movie {title: $title})
OPTIONAL MATCH (movie)<-[r]-(person:Person)
WITH movie.title AS title,
     collect({
        name: person.name,
        job: head(split(toLower(type(r)), '_')),
        role: r.roles
     }) AS cast
LIMIT 1
UNWIND cast AS c
RETURN title, c.name AS name, c.job AS job, c.role AS role
"""

VOTE_FOR_MOVIE = """
MATCH (m:Movie {title: $title})
SET m.votes = coalesce(m.votes, 0) + 1
"""

MOVIE_GRAPH = """
MATCH (m:Movie)<-[:ACTED_IN]-(a:Person)
RETURN m.title AS movie, collect(a.name) AS cast
LIMIT $limit
"""

# ── Seeding ──────────────────────────────────────────────────────────

MERGE_MOVIE = """
MERGE (m:Movie {title: $title})
SET m.released = $released, m.tagline = $tagline
RETURN m
"""

MERGE_PERSON = """
MERGE (p:Person {name: $name})
SET p.born = $born
RETURN p
"""

MERGE_ACTED_IN = """
MATCH (p:Person {name: $name}), (m:Movie {title: $title})
MERGE (p)-[r:ACTED_IN]->(m)
SET r.roles = $roles
RETURN r
"""

MERGE_DIRECTED = """
MATCH (p:Person {name: $name}), (m:Movie {title: $title})
MERGE (p)-[r:DIRECTED]->(m)
RETURN r
"""

DELETE_ALL = """
MATCH (n)
DETACH DELETE n
"""
