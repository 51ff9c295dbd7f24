from __future__ import annotations
from abc import ABC, abstractmethod
from docstore.crud.models import Document, SearchRequest

class DocumentRepo(ABC):
    @abstractmethod
    def save(self, document: Document) -> Document:
        """Insert or fully replace by id; assign an id when missing. Return the stored doc."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, doc_id: str) -> Document | None:
        raise NotImplementedError

    @abstractmethod
    def search(self, request: SearchRequest) -> list[Document]:
        raise NotImplementedError
