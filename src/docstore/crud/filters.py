"""Search predicates: each takes (doc, request) and returns True when the doc passes"""

from datetime import datetime, timezone
from typing import Callable, Sequence

from docstore.models import Document, SearchRequest


Predicate = Callable[[Document, SearchRequest], bool]


def _utc(value: datetime) -> datetime:
    """Naive datetimes are read as UTC so they compare with aware ones."""
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def title_prefix(doc: Document, request: SearchRequest) -> bool:
    """Title starts with any of the requested prefixes (case-sensitive)."""
    if not request.title_prefixes:
        return True
    return doc.title is not None and any(doc.title.startswith(p) for p in request.title_prefixes)


def contains_content(doc: Document, request: SearchRequest) -> bool:
    """Content contains any of the requested substrings (case-sensitive)."""
    if not request.contains_contents:
        return True
    return doc.content is not None and any(s in doc.content for s in request.contains_contents)


def author_id(doc: Document, request: SearchRequest) -> bool:
    """Author id is one of the requested ids. Docs without an author id never pass a non-empty filter."""
    if not request.author_ids:
        return True
    if doc.author is None or not doc.author.id:
        return False
    return doc.author.id in request.author_ids


def created_from(doc: Document, request: SearchRequest) -> bool:
    if request.created_from is None:
        return True
    return doc.created is not None and _utc(doc.created) >= _utc(request.created_from)


def created_to(doc: Document, request: SearchRequest) -> bool:
    if request.created_to is None:
        return True
    return doc.created is not None and _utc(doc.created) <= _utc(request.created_to)


PREDICATES: tuple[Predicate, ...] = (title_prefix, contains_content, author_id, created_from, created_to)


def matches(doc: Document, request: SearchRequest, predicates: Sequence[Predicate] = PREDICATES) -> bool:
    """Return True when doc passes every predicate."""
    return all(p(doc, request) for p in predicates)
