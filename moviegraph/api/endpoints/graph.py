"""Graph endpoints: the actor/movie graph for D3 and its file export."""

from __future__ import annotations

import json
import re
from typing import Literal
from xml.sax.saxutils import escape

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from moviegraph.api.dependencies import get_movie_service
from moviegraph.models.schemas import GraphResponse
from moviegraph.services.movie_service import DEFAULT_GRAPH_LIMIT, MovieService

router = APIRouter(prefix="/graph", tags=["graph"])

_LIMIT_RE = re.compile(r"[+-]?[0-9]+")
_MAX_LIMIT = 2**63 - 1


def parse_limit(raw: str | None, default: int = DEFAULT_GRAPH_LIMIT) -> int:
    """Parse the ``limit`` query parameter, falling back to the default on garbage.

    Only plain ASCII integers within the Bolt 64-bit range are accepted.
    """
    if raw is None or not _LIMIT_RE.fullmatch(raw):
        return default
    limit = int(raw)
    return limit if 0 <= limit <= _MAX_LIMIT else default


@router.get("", response_model=GraphResponse)
async def get_graph(
    limit: str | None = Query(None, description="Maximum number of movies"),
    service: MovieService = Depends(get_movie_service),
) -> GraphResponse:
    """Movies and their actors as D3 nodes and index-based links."""
    return await service.get_graph(parse_limit(limit))


@router.get("/export")
async def export_graph(
    limit: str | None = Query(None),
    format: Literal["json", "graphml"] = "json",
    service: MovieService = Depends(get_movie_service),
) -> Response:
    """Download the graph as JSON or GraphML."""
    graph = await service.get_graph(parse_limit(limit))

    if format == "json":
        return Response(
            content=json.dumps(graph.model_dump(), indent=2),
            media_type="application/json",
            headers={"Content-Disposition": "attachment; filename=movie_graph.json"},
        )

    return Response(
        content=to_graphml(graph),
        media_type="application/xml",
        headers={"Content-Disposition": "attachment; filename=movie_graph.graphml"},
    )


def to_graphml(graph: GraphResponse) -> str:
    """Render the graph as GraphML; node ids are the node list indices."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<graphml xmlns="http://graphml.graphdrawing.org/xmlns">',
        '  <key id="title" for="node" attr.name="title" attr.type="string"/>',
        '  <key id="label" for="node" attr.name="label" attr.type="string"/>',
        '  <graph id="movies" edgedefault="directed">',
    ]

    for idx, node in enumerate(graph.nodes):
        lines.append(f'    <node id="n{idx}">')
        lines.append(f'      <data key="title">{escape(node.title)}</data>')
        lines.append(f'      <data key="label">{node.label}</data>')
        lines.append("    </node>")

    for idx, link in enumerate(graph.links):
        lines.append(f'    <edge id="e{idx}" source="n{link.source}" target="n{link.target}"/>')

    lines.append("  </graph>")
    lines.append("</graphml>")
    return "\n".join(lines)
