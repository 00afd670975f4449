"""Authoritative in-memory document store."""
from __future__ import annotations

import logging
from typing import Dict, List, Optional

from docvault.models import Document

from .ids import IdFactory, uuid_id_factory

logger = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    """Raised when a required argument is missing."""


class InMemoryDocumentStore:
    """Keeps documents keyed by identifier for the lifetime of the process."""

    def __init__(self, id_factory: Optional[IdFactory] = None) -> None:
        self._id_factory = id_factory or uuid_id_factory
        self._documents: Dict[str, Document] = {}

    def upsert(self, document: Optional[Document]) -> Document:
        if document is None:
            raise InvalidArgumentError("Received document is None")
        if not document.id:
            document.id = self._id_factory()
            logger.debug("Assigned identifier %s", document.id)
        existing = self._documents.get(document.id)
        if existing is not None and "created" not in document.model_fields_set:
            # An update that omits created keeps the stored creation time.
            document.created = existing.created
        self._documents[document.id] = document
        return document

    def get(self, document_id: str) -> Optional[Document]:
        return self._documents.get(document_id)

    def all(self) -> List[Document]:
        return list(self._documents.values())

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents
