"""Identifier factories used by the document store."""
from __future__ import annotations

import itertools
import uuid
from typing import Callable

IdFactory = Callable[[], str]


def uuid_id_factory() -> str:
    return str(uuid.uuid4())


class SequentialIdFactory:
    """Deterministic ``prefix + counter`` identifiers, handy for tests and fixtures."""

    def __init__(self, prefix: str = "doc-", start: int = 1) -> None:
        self._prefix = prefix
        self._counter = itertools.count(start)

    def __call__(self) -> str:
        return f"{self._prefix}{next(self._counter)}"
