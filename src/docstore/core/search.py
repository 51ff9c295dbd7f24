"""Search predicates: one match function per SearchRequest criterion"""

from docstore.core.utils.timestamps import ensure_utc
from docstore.crud.models import Document, SearchRequest


def matches_title(doc: Document, prefixes: list[str] | None) -> bool:
    """True if no prefixes are given or the title starts with any of them (case-sensitive)."""
    if not prefixes:
        return True
    return doc.title.startswith(tuple(prefixes))


def matches_content(doc: Document, fragments: list[str] | None) -> bool:
    """True if no fragments are given or the content contains any of them (case-sensitive)."""
    if not fragments:
        return True
    return any(f in doc.content for f in fragments)


def matches_author(doc: Document, author_ids: list[str] | None) -> bool:
    if not author_ids:
        return True
    return doc.author.id in set(author_ids)


def matches_created(doc: Document, created_from=None, created_to=None) -> bool:
    """Both bounds are inclusive; a missing bound is open. Naive bounds are read as UTC."""
    created_from, created_to = ensure_utc(created_from), ensure_utc(created_to)
    if created_from is not None and doc.created < created_from:
        return False
    if created_to is not None and doc.created > created_to:
        return False
    return True


def active_criteria(request: SearchRequest) -> int:
    """Count criteria that actually filter (non-empty lists, non-None bounds)."""
    return sum(1 for v in request.model_dump().values() if v)


def matches(doc: Document, request: SearchRequest) -> bool:
    """AND-combine every criterion present on the request."""
    return (
        matches_title(doc, request.title_prefixes)
        and matches_content(doc, request.contains_contents)
        and matches_author(doc, request.author_ids)
        and matches_created(doc, request.created_from, request.created_to)
    )
