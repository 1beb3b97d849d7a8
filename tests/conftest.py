# ABOUTME: Pytest fixtures and configuration for Guitars API tests
# ABOUTME: Provides stores, a loaded service and a TestClient bound to a fresh app

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from guitars_api.app.core.config import Settings
from guitars_api.app.main import create_app
from guitars_api.app.services.guitar_service import GuitarService
from guitars_api.app.store import MemoryStore, TextFileStore


@pytest.fixture
def memory_store() -> MemoryStore:
    """Create an empty in-memory store."""
    return MemoryStore()


@pytest.fixture
def seeded_store() -> MemoryStore:
    """Create a store holding two guitars."""
    return MemoryStore(["Les Paul", "SG"])


@pytest.fixture
def text_store(tmp_path: Path) -> TextFileStore:
    """Create a text file store inside the test's temporary directory."""
    return TextFileStore(tmp_path / "guitars.txt")


@pytest.fixture
def service(memory_store: MemoryStore) -> GuitarService:
    """Create a service over an empty store (call ``load`` before use)."""
    return GuitarService(memory_store)


@pytest.fixture
def app_settings(tmp_path: Path) -> Settings:
    """Create settings that keep every file inside ``tmp_path``."""
    return Settings(
        storage_backend="memory",
        store_path=str(tmp_path / "guitars.txt"),
        database_url=str(tmp_path / "guitars.db"),
        api_prefix="",
    )


@pytest.fixture
def client(app_settings: Settings, memory_store: MemoryStore) -> Iterator[TestClient]:
    """Create a TestClient for an app over an empty store."""
    app = create_app(settings=app_settings, store=memory_store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(app_settings: Settings, seeded_store: MemoryStore) -> Iterator[TestClient]:
    """Create a TestClient for an app whose store holds Les Paul and SG."""
    app = create_app(settings=app_settings, store=seeded_store)
    with TestClient(app) as test_client:
        yield test_client
