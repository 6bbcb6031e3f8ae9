"""Movie endpoints: search, detail with cast, and voting.

Query failures raise GraphQueryError, which the app-level handler in
moviegraph.main turns into a 500 JSON body.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from moviegraph.api.dependencies import get_movie_service
from moviegraph.models.schemas import MovieDetail, MovieResult, VoteResult
from moviegraph.services.movie_service import MovieService

router = APIRouter(tags=["movies"])


@router.get(
    "/search",
    response_model=list[MovieResult],
    response_model_exclude_none=True,
)
async def search_movies(
    q: str = Query(..., description="Case-insensitive title substring"),
    service: MovieService = Depends(get_movie_service),
) -> list[MovieResult]:
    return await service.search(q)


# Registered before /movie/{title} so "vote/..." is never read as a title
@router.get("/movie/vote/{title:path}", response_model=VoteResult)
async def vote_for_movie(
    title: str,
    service: MovieService = Depends(get_movie_service),
) -> VoteResult:
    """Increment the movie's vote counter; unknown titles report zero updates."""
    return await service.vote(title)


@router.get(
    "/movie/{title:path}",
    response_model=MovieDetail,
    response_model_exclude_none=True,
)
async def get_movie(
    title: str,
    service: MovieService = Depends(get_movie_service),
) -> MovieDetail:
    return await service.get_movie(title)
