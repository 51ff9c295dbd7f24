"""Seed-file loading: YAML or JSON document lists into Document models"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable

import yaml
from pydantic import ValidationError

from docstore.crud.models import Document
from docstore.crud.repo import DocumentRepo


logger = logging.getLogger(__name__)

SEED_SUFFIXES = {".yaml", ".yml", ".json"}


def _read(path: Path) -> Any:
    """Parse the file by suffix; JSON is also valid YAML but is read with json for clearer errors."""
    text = path.read_text(encoding="utf-8")
    if path.suffix == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


def load_documents(path: str | Path) -> list[Document]:
    """Read a list of document mappings (bare or under a `documents:` key) from a seed file.

    Raises ValueError naming the file when it is missing, has an unsupported suffix,
    cannot be parsed, or holds entries that don't validate as Documents.
    """
    path = Path(path)
    if path.suffix not in SEED_SUFFIXES:
        raise ValueError(f"Unsupported seed file type: {path.name}")
    if not path.is_file():
        raise ValueError(f"Seed file not found: {path}")

    try:
        data = _read(path)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e

    if data is None:
        data = []
    if isinstance(data, dict):
        if "documents" not in data:
            raise ValueError(f"Invalid {path.name}: expected a list of documents")
        data = data["documents"] or []
    if not isinstance(data, list):
        raise ValueError(f"Invalid {path.name}: expected a list of documents")

    try:
        docs = [Document.model_validate(item) for item in data]
    except ValidationError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    logger.info("Loaded %d document(s) from %s", len(docs), path)
    return docs


def seed_store(store: DocumentRepo, docs: Iterable[Document]) -> list[Document]:
    """Save each document into `store`; return the stored copies with ids set."""
    return [store.save(d) for d in docs]
