import logging
from dataclasses import dataclass, field
from uuid import uuid4

from docstore.crud.filters import matches
from docstore.crud.repo import DocumentRepo
from docstore.models import Document, SearchRequest


logger = logging.getLogger(__name__)


@dataclass
class MemoryRepo(DocumentRepo):
    """In-memory document store. Not thread-safe.

    Documents are kept in a dict keyed by id; insertion order is preserved and
    re-assigning an existing key keeps its original position.
    """
    _docs: dict[str, Document] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        return bool(doc_id) and doc_id in self._docs

    def save(self, document: Document) -> Document:
        if not document.id:
            document.id = str(uuid4())
            logger.debug("Generated id %s", document.id)
        elif document.id in self._docs:
            logger.debug("Replacing document %s", document.id)
        else:
            logger.debug("Adding document %s", document.id)
        self._docs[document.id] = document
        return document

    def search(self, request: SearchRequest | None) -> list[Document]:
        if request is None or not self._docs:
            return []
        found = [doc for doc in self._docs.values() if matches(doc, request)]
        logger.debug("Search matched %d of %d document(s)", len(found), len(self._docs))
        return found

    def find_by_id(self, id: str | None) -> Document | None:
        if not id:
            return None
        return self._docs.get(id)

    def all(self) -> list[Document]:
        """Return every stored document in insertion order."""
        return list(self._docs.values())
