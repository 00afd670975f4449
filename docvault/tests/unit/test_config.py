import pytest
from pydantic import ValidationError

from docvault.cache.lru import CACHE_SIZE, LRUCache
from docvault.config import Settings, load_settings
from docvault.manager import DocumentManager
from docvault.models import Author, Document


def test_defaults(monkeypatch):
    monkeypatch.delenv("DOCVAULT_CACHE_SIZE", raising=False)

    settings = Settings()

    assert settings.cache_size == CACHE_SIZE
    assert LRUCache().capacity == CACHE_SIZE
    assert settings.id_strategy == "uuid"


def test_cache_size_from_environment(monkeypatch):
    monkeypatch.setenv("DOCVAULT_CACHE_SIZE", "5")

    assert load_settings().cache_size == 5


def test_cache_size_option_alias():
    assert load_settings(cacheSize=3).cache_size == 3


def test_rejects_non_positive_cache_size():
    with pytest.raises(ValidationError):
        Settings(cache_size=0)


def test_manager_from_settings_uses_sequential_ids():
    settings = Settings(cache_size=2, id_strategy="sequential", id_prefix="n-")
    manager = DocumentManager.from_settings(settings)

    saved = manager.save(Document(title="t", content="c", author=Author(id="a", name="A")))

    assert saved.id == "n-1"
    assert manager.cache.capacity == 2
