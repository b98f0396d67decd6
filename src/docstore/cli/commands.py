"""CLI command implementations"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Annotated, Optional

import typer

from docstore.config import Settings, load_config
from docstore.crud.loader import load_documents, read_documents
from docstore.crud.memory_repo import MemoryRepo
from docstore.models import SearchRequest


DataFileOption = Annotated[Optional[str], typer.Option("--data-file", help="YAML file of documents")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _open_store(settings: Settings) -> tuple[MemoryRepo, dict[str, int]]:
    """Build a fresh store seeded from the configured data file."""
    store = MemoryRepo()
    try:
        docs = read_documents(Path(settings.data_file))
    except (FileNotFoundError, ValueError) as e:
        _fail("Could not load documents", e)
    return store, load_documents(store, docs)


def load_cmd(data_file: DataFileOption = None):
    """Load the data file and report how many documents were created or replaced."""
    settings = _settings(overrides={"data_file": data_file})
    store, counts = _open_store(settings)
    typer.echo(
        f"Loaded {len(store)} document(s) - "
        f"{counts['created']} created, "
        f"{counts['updated']} updated"
    )


def search_cmd(
    data_file: DataFileOption = None,
    title_prefixes: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title starts with (repeatable)")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Content contains (repeatable)")] = None,
    author_ids: Annotated[Optional[list[str]], typer.Option("--author-id", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[datetime], typer.Option("--created-from", help="Created at or after")] = None,
    created_to: Annotated[Optional[datetime], typer.Option("--created-to", help="Created at or before")] = None,
    ):
    """Search documents; all given criteria must match."""
    settings = _settings(overrides={"data_file": data_file})
    store, _ = _open_store(settings)
    request = SearchRequest(
        title_prefixes=title_prefixes,
        contains_contents=contains,
        author_ids=author_ids,
        created_from=created_from,
        created_to=created_to,
    )
    found = store.search(request)
    for doc in found:
        typer.echo(f"{doc.id}  {doc.title or ''}")
    typer.echo(f"{len(found)} match(es)")


def get_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    data_file: DataFileOption = None,
    ):
    """Print a single document as JSON."""
    settings = _settings(overrides={"data_file": data_file})
    store, _ = _open_store(settings)
    doc = store.find_by_id(doc_id)
    if doc is None:
        typer.echo(f"No document with id: {doc_id}", err=True)
        raise typer.Exit(1)
    typer.echo(doc.model_dump_json(indent=2))
