"""Top-level router aggregating all endpoint modules.

Paths are unversioned: the bundled index.html calls them directly.
"""

from __future__ import annotations

from fastapi import APIRouter

from moviegraph.api.endpoints.graph import router as graph_router
from moviegraph.api.endpoints.health import router as health_router
from moviegraph.api.endpoints.movies import router as movies_router
from moviegraph.api.endpoints.pages import router as pages_router

api_router = APIRouter()
api_router.include_router(pages_router)
api_router.include_router(health_router)
api_router.include_router(movies_router)
api_router.include_router(graph_router)
