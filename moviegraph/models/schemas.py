"""Response models for the movie API.

All of these are built fresh per request from query rows and serialized
straight away; nothing here is persisted.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


# ── Search ───────────────────────────────────────────────────────────


class MovieSummary(BaseModel):
    title: str
    tagline: str | None = None
    votes: int | None = None
    released: int = 0


class MovieResult(BaseModel):
    movie: MovieSummary


# ── Detail ───────────────────────────────────────────────────────────


class Person(BaseModel):
    name: str = ""
    job: str = Field(default="", description="Relationship tag, e.g. 'acted' or 'directed'")
    role: list[str] = Field(default_factory=list)


class MovieDetail(BaseModel):
    title: str = ""
    # None (omitted on the wire) means no rows came back at all
    cast: list[Person] | None = None


# ── Vote ─────────────────────────────────────────────────────────────


class VoteResult(BaseModel):
    updates: int = Field(default=0, ge=0, description="Properties mutated, not the vote tally")


# ── Graph ────────────────────────────────────────────────────────────


class GraphNode(BaseModel):
    title: str
    label: Literal["movie", "actor"]


class GraphLink(BaseModel):
    source: int
    target: int


class GraphResponse(BaseModel):
    nodes: list[GraphNode] = Field(default_factory=list)
    links: list[GraphLink] = Field(default_factory=list)
