"""Turn Cypher result rows into API response models.

Every function here is pure: it takes the full row sequence of one query and
returns a freshly built response, so concurrent requests never share state.
"""

from __future__ import annotations

from typing import Iterable

from moviegraph.graph_db.records import (
    Row,
    get_int,
    get_optional_int,
    get_optional_str,
    get_str,
    get_str_list,
)
from moviegraph.models.schemas import (
    GraphLink,
    GraphNode,
    GraphResponse,
    MovieDetail,
    MovieResult,
    MovieSummary,
    Person,
    VoteResult,
)


def project_search(rows: Iterable[Row]) -> list[MovieResult]:
    """One result per row, in the order the database returned them."""
    return [
        MovieResult(
            movie=MovieSummary(
                title=get_str(row, "title"),
                tagline=get_optional_str(row, "tagline"),
                votes=get_optional_int(row, "votes"),
                released=get_int(row, "released"),
            )
        )
        for row in rows
    ]


def project_movie(rows: Iterable[Row]) -> MovieDetail:
    """Fold title/person rows for a single movie into one detail object.

    Every row becomes a cast entry, including the sentinel row with null
    person fields that the detail query emits for a movie without cast.
    """
    title = ""
    cast: list[Person] = []
    for row in rows:
        title = get_str(row, "title")
        cast.append(
            Person(
                name=get_str(row, "name"),
                job=get_str(row, "job"),
                role=get_str_list(row, "role"),
            )
        )
    # every row appends, so an empty cast means the query matched nothing
    return MovieDetail(title=title, cast=cast or None)


def project_vote(properties_set: int) -> VoteResult:
    return VoteResult(updates=properties_set)


class GraphAccumulator:
    """Builds the node/link lists for the force-directed graph.

    Movie nodes are appended once per row and never deduplicated. Actor nodes
    are deduplicated by name through ``_actor_index``; a movie that shares its
    title with an actor stays a separate node.
    """

    def __init__(self) -> None:
        self.nodes: list[GraphNode] = []
        self.links: list[GraphLink] = []
        self._actor_index: dict[str, int] = {}

    def add_movie(self, title: str, actors: Iterable[str]) -> int:
        self.nodes.append(GraphNode(title=title, label="movie"))
        movie_idx = len(self.nodes) - 1
        for actor in actors:
            self.links.append(GraphLink(source=self._actor(actor), target=movie_idx))
        return movie_idx

    def _actor(self, name: str) -> int:
        idx = self._actor_index.get(name)
        if idx is None:
            self.nodes.append(GraphNode(title=name, label="actor"))
            idx = len(self.nodes) - 1
            self._actor_index[name] = idx
        return idx

    def build(self) -> GraphResponse:
        return GraphResponse(nodes=list(self.nodes), links=list(self.links))


def project_graph(rows: Iterable[Row]) -> GraphResponse:
    acc = GraphAccumulator()
    for row in rows:
        acc.add_movie(get_str(row, "movie"), get_str_list(row, "cast"))
    return acc.build()
