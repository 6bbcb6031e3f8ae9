"""Static front page with the search box and the D3 graph."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

router = APIRouter(tags=["pages"])

INDEX_PAGE = Path(__file__).resolve().parents[2] / "public" / "index.html"


@router.get("/", include_in_schema=False)
async def index() -> FileResponse:
    return FileResponse(INDEX_PAGE, media_type="text/html; charset=utf-8")
