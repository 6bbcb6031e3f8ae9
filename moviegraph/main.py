"""FastAPI application factory with lifespan events."""

from __future__ import annotations

import uuid
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from moviegraph.api.dependencies import set_neo4j_conn
from moviegraph.api.router import api_router
from moviegraph.config import get_settings
from moviegraph.graph_db.connection import Neo4jConnection
from moviegraph.utils.exceptions import GraphQueryError
from moviegraph.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the Neo4j driver for the lifetime of the app.

    A failed connection propagates and aborts startup.
    """
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    neo4j_conn = Neo4jConnection(settings)
    await neo4j_conn.connect()
    set_neo4j_conn(neo4j_conn)

    logger.info("app_started", port=settings.PORT, neo4j_uri=settings.NEO4J_URI)
    yield

    set_neo4j_conn(None)
    await neo4j_conn.close()
    logger.info("app_stopped")


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    application = FastAPI(
        title="moviegraph",
        description="Neo4j movie catalog: search, cast details, votes and an actor graph",
        version="0.1.0",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    application.include_router(api_router)

    @application.middleware("http")
    async def request_id_middleware(request: Request, call_next) -> Response:
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    @application.exception_handler(GraphQueryError)
    async def graph_query_exception_handler(request: Request, exc: GraphQueryError) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content={"detail": f"{exc.operation} query failed", "type": type(exc).__name__},
        )

    @application.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("unhandled_exception", error=str(exc), path=request.url.path)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error", "type": type(exc).__name__},
        )

    return application


app = create_app()


def run() -> None:
    """Console entry point: serve the app on $PORT."""
    settings = get_settings()
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
