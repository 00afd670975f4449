"""Document manager coordinating the store and the LRU cache."""
from __future__ import annotations

import logging
import threading
from typing import List, Optional

from docvault.cache.lru import CACHE_SIZE, LRUCache
from docvault.config import Settings
from docvault.models import CacheStats, Document, SearchRequest
from docvault.search import filter_documents
from docvault.storage import (
    IdFactory,
    InMemoryDocumentStore,
    InvalidArgumentError,
    SequentialIdFactory,
    uuid_id_factory,
)

logger = logging.getLogger(__name__)


class DocumentManager:
    """Upserts, looks up and searches documents through a read-through LRU cache.

    Every write and every read hit populates the cache; point reads consult the
    cache before the store; searches scan the store and cache their results.
    """

    def __init__(
        self,
        store: Optional[InMemoryDocumentStore] = None,
        cache: Optional[LRUCache[str, Document]] = None,
        *,
        cache_size: int = CACHE_SIZE,
        id_factory: Optional[IdFactory] = None,
    ) -> None:
        if store is None:
            store = InMemoryDocumentStore(id_factory=id_factory)
        if cache is None:
            cache = LRUCache(capacity=cache_size)
        self._store = store
        self._cache: LRUCache[str, Document] = cache
        self._lock = threading.RLock()
        logger.info("Document manager ready with cache capacity %d", self._cache.capacity)

    @classmethod
    def from_settings(cls, settings: Settings) -> "DocumentManager":
        if settings.id_strategy == "sequential":
            id_factory: IdFactory = SequentialIdFactory(prefix=settings.id_prefix)
        else:
            id_factory = uuid_id_factory
        return cls(cache_size=settings.cache_size, id_factory=id_factory)

    @property
    def store(self) -> InMemoryDocumentStore:
        return self._store

    @property
    def cache(self) -> LRUCache[str, Document]:
        return self._cache

    def save(self, document: Optional[Document]) -> Document:
        """Upsert ``document``, generating an id when unset; ``created`` is left as is."""
        if document is None:
            raise InvalidArgumentError("Received document is None")
        with self._lock:
            saved = self._store.upsert(document)
            self._cache.put(saved.id, saved)
        return saved

    def find_by_id(self, document_id: str) -> Optional[Document]:
        with self._lock:
            cached = self._cache.get(document_id)
            if cached is not None:
                logger.debug("Cache hit for %s", document_id)
                return cached
            stored = self._store.get(document_id)
            if stored is None:
                return None
            logger.debug("Cache miss for %s, populated from store", document_id)
            self._cache.put(document_id, stored)
            return stored

    def search(self, request: Optional[SearchRequest] = None) -> List[Document]:
        """Return stored documents matching every set filter in ``request``.

        A ``None`` request returns all documents without touching the cache.
        """
        with self._lock:
            if request is None:
                return self._store.all()
            matched = filter_documents(self._store.all(), request)
            for document in matched:
                self._cache.put(document.id, document)
        logger.debug("Search matched %d documents", len(matched))
        return matched

    def cache_stats(self) -> CacheStats:
        with self._lock:
            return self._cache.stats()
