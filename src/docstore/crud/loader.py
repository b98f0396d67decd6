"""Seed a document store from a YAML file"""

import logging
from pathlib import Path

from pydantic import ValidationError

from docstore.crud.repo import DocumentRepo
from docstore.models import Document
from docstore.util.files import read_yaml


logger = logging.getLogger(__name__)


def read_documents(path: Path) -> list[Document]:
    """Parse a YAML list of documents, or a mapping with a 'documents' list.

    Raises FileNotFoundError if path is missing and ValueError for unreadable files,
    invalid YAML, or entries that do not validate as a Document.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")
    data = read_yaml(path)

    if data is None:
        return []
    if isinstance(data, dict):
        if "documents" not in data:
            raise ValueError(f"Invalid {path}: expected a list of documents")
        data = data["documents"] or []
    if not isinstance(data, list):
        raise ValueError(f"Invalid {path}: expected a list of documents")

    docs = []
    for i, entry in enumerate(data):
        try:
            docs.append(Document.model_validate(entry))
        except ValidationError as e:
            raise ValueError(f"Invalid document at index {i} in {path}: {e}") from e
    logger.info("Read %d document(s) from %s", len(docs), path)
    return docs


def load_documents(store: DocumentRepo, docs: list[Document]) -> dict[str, int]:
    """Save docs into store. Returns counts of 'created' and 'updated' documents."""
    counts = {"created": 0, "updated": 0}
    for doc in docs:
        status = "updated" if store.find_by_id(doc.id) is not None else "created"
        store.save(doc)
        counts[status] += 1
    return counts
