"""Value objects for stored documents, their authors, and search criteria"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from docstore.core.utils.timestamps import ensure_utc, utc_now


class Author(BaseModel):
    """A document's creator. Shared by reference between documents."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class Document(BaseModel):
    """A stored record; `id` is assigned by the store when left empty.

    `created` is always stored as an aware UTC datetime; naive input is read as UTC.
    """
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    title: str
    content: str = ""
    author: Author
    created: datetime = Field(default_factory=utc_now)

    @field_validator("created")
    @classmethod
    def _created_utc(cls, v: datetime) -> datetime:
        return ensure_utc(v)


class SearchRequest(BaseModel):
    """Optional filter criteria, combined with AND. Empty or missing criteria don't filter."""
    model_config = ConfigDict(frozen=True)

    title_prefixes:    Optional[list[str]] = None
    contains_contents: Optional[list[str]] = None
    author_ids:        Optional[list[str]] = None
    created_from:      Optional[datetime] = Field(default=None, description="Inclusive lower bound")
    created_to:        Optional[datetime] = Field(default=None, description="Inclusive upper bound")

    @field_validator("created_from", "created_to")
    @classmethod
    def _bounds_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(v)
