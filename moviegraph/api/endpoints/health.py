"""Health and readiness probe endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from moviegraph.api.dependencies import get_neo4j
from moviegraph.graph_db.connection import Neo4jConnection
from moviegraph.utils.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    return {"status": "healthy"}


@router.get("/ready")
async def ready(neo4j: Neo4jConnection = Depends(get_neo4j)) -> dict:
    try:
        ok = await neo4j.health_check()
    except Exception as exc:
        logger.warning("readiness_check_failed", error=str(exc))
        return {"status": "not_ready", "neo4j": False, "error": str(exc)}
    return {"status": "ready" if ok else "degraded", "neo4j": ok}
