"""FastAPI surface for the document repository."""
from __future__ import annotations

from typing import List, Optional

from fastapi import Body, Depends, FastAPI, HTTPException
from pydantic import BaseModel

from docvault.config import load_settings
from docvault.logging_config import configure_logging
from docvault.manager import DocumentManager
from docvault.models import CacheStats, Document, SearchRequest
from docvault.storage import InvalidArgumentError

app = FastAPI()


class SearchResponse(BaseModel):
    documents: List[Document]


def get_document_manager() -> DocumentManager:
    manager = getattr(app.state, "document_manager", None)
    if manager is None:
        settings = load_settings()
        configure_logging(settings.log_level)
        manager = DocumentManager.from_settings(settings)
        app.state.document_manager = manager
    return manager


@app.post("/documents", response_model=Document)
def save_document(
    document: Document,
    manager: DocumentManager = Depends(get_document_manager),
) -> Document:
    try:
        return manager.save(document)
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.get("/documents/{document_id}", response_model=Document)
def get_document(
    document_id: str,
    manager: DocumentManager = Depends(get_document_manager),
) -> Document:
    document = manager.find_by_id(document_id)
    if document is None:
        raise HTTPException(status_code=404, detail="Document not found")
    return document


@app.post("/documents/search", response_model=SearchResponse)
def search_documents(
    request: Optional[SearchRequest] = Body(None),
    manager: DocumentManager = Depends(get_document_manager),
) -> SearchResponse:
    return SearchResponse(documents=manager.search(request))


@app.get("/cache/stats", response_model=CacheStats)
def cache_stats(manager: DocumentManager = Depends(get_document_manager)) -> CacheStats:
    return manager.cache_stats()
