"""CLI command implementations"""

import json
import logging
from datetime import datetime
from typing import Annotated, Optional

import typer

from docstore.config import Settings, load_config
from docstore.core.loader import load_documents, seed_store
from docstore.crud.memory_repo import DocumentManager
from docstore.crud.models import Document, SearchRequest


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None, config_file: Optional[str] = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging from it."""
    try:
        settings = load_config(overrides=overrides, config_file=config_file)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _store(seed: Optional[str]) -> DocumentManager:
    """Build a fresh store from the seed file (argument or configured default)."""
    if not seed:
        _fail("No seed file given and no seed_file configured.")
    store = DocumentManager()
    try:
        seed_store(store, load_documents(seed))
    except ValueError as e:
        _fail(str(e))
    return store


def _dump(docs: list[Document], indent: int) -> str:
    return json.dumps([d.model_dump(mode="json") for d in docs], indent=indent or None)


def search_cmd(
    seed: Annotated[Optional[str], typer.Argument(help="YAML/JSON seed file of documents")] = None,
    title_prefixes: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Match titles starting with this prefix (repeatable)")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Match content containing this text (repeatable)")] = None,
    author_ids: Annotated[Optional[list[str]], typer.Option("--author-id", help="Match documents by this author id (repeatable)")] = None,
    created_from: Annotated[Optional[datetime], typer.Option("--from", help="Inclusive lower bound on creation time")] = None,
    created_to: Annotated[Optional[datetime], typer.Option("--to", help="Inclusive upper bound on creation time")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")] = None,
    config: Annotated[Optional[str], typer.Option("--config", help="Config file (default: DOCSTORE_CONFIG or ./config.yaml)")] = None,
    ):
    """Load a seed file and print documents matching all given criteria as JSON.

    Times without an offset (as --from/--to always are) are read as UTC.
    """
    settings = _settings(overrides={"seed_file": seed, "log_level": log_level}, config_file=config)
    store = _store(settings.seed_file)
    request = SearchRequest(
        title_prefixes=title_prefixes or None,
        contains_contents=contains or None,
        author_ids=author_ids or None,
        created_from=created_from,
        created_to=created_to,
    )
    typer.echo(_dump(store.search(request), settings.json_indent))


def show_cmd(
    seed: Annotated[str, typer.Argument(help="YAML/JSON seed file of documents")],
    doc_id: Annotated[str, typer.Argument(help="Document id to look up")],
    ):
    """Load a seed file and print one document by id as JSON."""
    settings = _settings(overrides={"seed_file": seed})
    store = _store(settings.seed_file)
    doc = store.find_by_id(doc_id)
    if doc is None:
        typer.echo(f"No document with id '{doc_id}'.", err=True)
        raise typer.Exit(1)
    typer.echo(doc.model_dump_json(indent=settings.json_indent or None))
