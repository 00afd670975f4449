"""Storage package exports."""
from .ids import IdFactory, SequentialIdFactory, uuid_id_factory
from .memory_store import InMemoryDocumentStore, InvalidArgumentError

__all__ = [
    "IdFactory",
    "InMemoryDocumentStore",
    "InvalidArgumentError",
    "SequentialIdFactory",
    "uuid_id_factory",
]
