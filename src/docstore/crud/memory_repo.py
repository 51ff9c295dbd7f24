"""In-memory document store keyed by document id"""

import logging
from dataclasses import dataclass, field

from docstore.core.search import active_criteria, matches
from docstore.core.utils.ids import new_id
from docstore.crud.models import Document, SearchRequest
from docstore.crud.repo import DocumentRepo


logger = logging.getLogger(__name__)


@dataclass
class DocumentManager(DocumentRepo):
    """Plain dict-backed store. Iteration order is the order ids were first saved."""
    _docs: dict[str, Document] = field(default_factory=dict)

    def save(self, document: Document) -> Document:
        """Upsert `document`; a missing id is generated and set on the returned copy."""
        if not document.id:
            document = document.model_copy(update={"id": new_id()})
            logger.debug("Generated id %s for '%s'", document.id, document.title)
        action = "Replaced" if document.id in self._docs else "Inserted"
        self._docs[document.id] = document
        logger.debug("%s document %s", action, document.id)
        return document

    def find_by_id(self, doc_id: str) -> Document | None:
        return self._docs.get(doc_id)

    def search(self, request: SearchRequest) -> list[Document]:
        """Return every stored document matching all criteria set on `request`."""
        if request is None:
            raise ValueError("search request is required")
        result = [d for d in self._docs.values() if matches(d, request)]
        logger.debug("Search with %d criteria matched %d of %d documents",
                     active_criteria(request), len(result), len(self._docs))
        return result

    def delete(self, doc_id: str) -> bool:
        """Remove the document with `doc_id`; return False if there was none."""
        removed = self._docs.pop(doc_id, None) is not None
        if removed:
            logger.debug("Deleted document %s", doc_id)
        return removed

    def all(self) -> list[Document]:
        return list(self._docs.values())

    def __len__(self) -> int:
        return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._docs
