"""Predicate evaluation for document search requests."""
from __future__ import annotations

from typing import Callable, Iterable, List, Optional

from docvault.models import Document, SearchRequest

Predicate = Callable[[Document], bool]


def _any_of(values: Optional[List[str]], test: Callable[[str], bool]) -> bool:
    # Unset category is vacuously true; an explicit empty list matches nothing.
    if values is None:
        return True
    return any(test(value) for value in values)


def build_predicates(request: SearchRequest) -> List[Predicate]:
    """Turn each category of ``request`` into a predicate; categories are ANDed."""
    predicates: List[Predicate] = [
        lambda doc: _any_of(request.title_prefixes, doc.title.startswith),
        lambda doc: _any_of(request.contains_contents, lambda value: value in doc.content),
        lambda doc: _any_of(request.author_ids, lambda value: doc.author.id == value),
    ]
    if request.created_from is not None:
        lower = request.created_from
        predicates.append(lambda doc: doc.created > lower)
    if request.created_to is not None:
        upper = request.created_to
        predicates.append(lambda doc: doc.created < upper)
    return predicates


def filter_documents(
    documents: Iterable[Document], request: Optional[SearchRequest]
) -> List[Document]:
    if request is None:
        return list(documents)
    predicates = build_predicates(request)
    return [doc for doc in documents if all(predicate(doc) for predicate in predicates)]
