"""Fixed-capacity least-recently-used cache."""
from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Generic, Hashable, List, Optional, TypeVar

from docvault.models import CacheStats

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

CACHE_SIZE = 100


class LRUCache(Generic[K, V]):
    """Bounded map ordered by recency of access.

    Both ``get`` hits and ``put`` count as an access. The ordered dict keeps the
    least recently used entry first, so eviction pops from the front.
    """

    def __init__(self, capacity: int = CACHE_SIZE) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._entries: "OrderedDict[K, V]" = OrderedDict()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: K) -> Optional[V]:
        if key not in self._entries:
            self._misses += 1
            return None
        self._hits += 1
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: K, value: V) -> None:
        self._entries[key] = value
        self._entries.move_to_end(key)
        if len(self._entries) > self._capacity:
            evicted, _ = self._entries.popitem(last=False)
            self._evictions += 1
            logger.debug("Evicted %s from cache", evicted)

    def keys(self) -> List[K]:
        """Keys ordered from least to most recently used."""
        return list(self._entries.keys())

    def stats(self) -> CacheStats:
        return CacheStats(
            hits=self._hits,
            misses=self._misses,
            evictions=self._evictions,
            size=len(self._entries),
            capacity=self._capacity,
        )

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
