"""Identifier generation for stored documents"""

from uuid import uuid4


def new_id() -> str:
    """Return a random 128-bit identifier rendered as a canonical UUID string."""
    return str(uuid4())
