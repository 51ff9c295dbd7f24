"""Shared fixtures for crud unit tests"""

from datetime import datetime
from uuid import uuid4

import pytest

from docstore.crud.memory_repo import DocumentManager
from docstore.crud.models import Author, Document


@pytest.fixture(name="store")
def store_fixture():
    """Fresh, empty in-memory store per test."""
    return DocumentManager()


@pytest.fixture(name="author")
def author_fixture():
    return Author(id=str(uuid4()), name="Author")


@pytest.fixture(name="make_doc")
def make_doc_fixture(author):
    """Factory for Documents with sensible defaults; pass keyword overrides."""
    def _make(**kwargs) -> Document:
        fields = {
            "id": str(uuid4()),
            "title": "Test Document",
            "content": "Content",
            "author": author,
            "created": datetime.now(),
        }
        fields.update(kwargs)
        return Document(**fields)
    return _make
