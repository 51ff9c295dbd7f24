"""Unit tests for core/search.py"""

from datetime import datetime, timedelta, timezone

import pytest

from docstore.core.search import (
    active_criteria, matches, matches_author, matches_content, matches_created, matches_title,
)
from docstore.crud.models import Author, Document, SearchRequest


NOON = datetime(2024, 1, 1, 12, 0, 0)


@pytest.fixture(name="doc")
def doc_fixture():
    return Document(id="d1", title="Quarterly Report", content="Revenue grew",
                    author=Author(id="alice", name="Alice"), created=NOON)


@pytest.mark.parametrize("prefixes,expected", [
    (None, True),
    ([], True),
    (["Quarterly"], True),
    (["Annual", "Quart"], True),
    (["quarterly"], False),
    (["Report"], False),
    ([""], True),
])
def test_matches_title(doc, prefixes, expected):
    assert matches_title(doc, prefixes) is expected


@pytest.mark.parametrize("fragments,expected", [
    (None, True),
    (["grew"], True),
    (["shrank", "Revenue"], True),
    (["revenue"], False),
])
def test_matches_content(doc, fragments, expected):
    assert matches_content(doc, fragments) is expected


def test_matches_author(doc):
    assert matches_author(doc, None)
    assert matches_author(doc, ["bob", "alice"])
    assert not matches_author(doc, ["bob"])
    assert not matches_author(doc, ["Alice"])


@pytest.mark.parametrize("lo,hi,expected", [
    (None, None, True),
    (NOON, None, True),
    (None, NOON, True),
    (NOON, NOON, True),
    (datetime(2024, 1, 1, 12, 0, 1), None, False),
    (None, datetime(2024, 1, 1, 11, 59, 59), False),
])
def test_matches_created_inclusive(doc, lo, hi, expected):
    assert matches_created(doc, lo, hi) is expected


def test_matches_requires_all_criteria(doc):
    assert matches(doc, SearchRequest(title_prefixes=["Quarterly"], author_ids=["alice"]))
    assert not matches(doc, SearchRequest(title_prefixes=["Quarterly"], author_ids=["bob"]))


def test_active_criteria_ignores_empty_values():
    assert active_criteria(SearchRequest()) == 0
    assert active_criteria(SearchRequest(title_prefixes=[], author_ids=["a"], created_to=NOON)) == 2


# --- timezone handling ---

UTC_NOON = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
PLUS_TWO = timezone(timedelta(hours=2))


def test_document_created_is_stored_aware(doc):
    assert doc.created == UTC_NOON


@pytest.mark.parametrize("lo,hi,expected", [
    (UTC_NOON, UTC_NOON, True),
    (datetime(2024, 1, 1, 14, 0, 0, tzinfo=PLUS_TWO), None, True),       # same instant
    (None, datetime(2024, 1, 1, 13, 59, 0, tzinfo=PLUS_TWO), False),     # 11:59 UTC
    (datetime(2024, 1, 1, 11, 0, 0), datetime(2024, 1, 1, 15, 0, 0, tzinfo=PLUS_TWO), True),
])
def test_matches_created_mixed_awareness(doc, lo, hi, expected):
    """Naive and aware bounds compare against aware creation times without error."""
    assert matches_created(doc, lo, hi) is expected


def test_matches_aware_and_naive_documents_against_one_request():
    """10:00+02:00 is 08:00 UTC; a naive 09:00 is 09:00 UTC."""
    author = Author(id="a", name="A")
    aware = Document(title="A", author=author, created=datetime(2024, 1, 1, 10, tzinfo=PLUS_TWO))
    naive = Document(title="N", author=author, created=datetime(2024, 1, 1, 9))
    request = SearchRequest(created_from=datetime(2024, 1, 1, 8, 30), created_to=datetime(2024, 1, 1, 9))
    assert not matches(aware, request)
    assert matches(naive, request)
