"""Value models for stored documents and search criteria"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class Author(BaseModel):
    """Identity and display name embedded in a Document."""
    id: str | None = None
    name: str | None = None


class Document(BaseModel):
    """A stored record. id is assigned by the store when missing; created is never touched by it."""
    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created: datetime | None = None


class SearchRequest(BaseModel):
    """Optional match criteria, combined with logical AND. None or [] means no constraint."""
    title_prefixes: list[str] | None = None
    contains_contents: list[str] | None = None
    author_ids: list[str] | None = None
    created_from: datetime | None = None    # inclusive
    created_to: datetime | None = None      # inclusive
