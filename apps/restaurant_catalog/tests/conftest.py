from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from catalog.db import make_engine
from catalog.main import app, get_catalog
from catalog.repositories import open_catalog
from catalog.storage import FileSlotStore, Persistence, SqlSlotStore


class RecordingPersistence(Persistence):
    """Persistence that remembers which slots were saved, in order."""

    def __init__(self, store):
        super().__init__(store)
        self.saves: list[str] = []

    def save(self, value, slot, type_):
        self.saves.append(slot)
        super().save(value, slot, type_)


class BrokenStore:
    def read(self, name):
        raise OSError("disk unavailable")

    def write(self, name, content):
        raise OSError("disk full")

    def exists(self, name):
        return False


@pytest.fixture
def engine(tmp_path):
    return make_engine(f"sqlite:///{tmp_path / 'catalog.sqlite3'}")


@pytest.fixture
def store(engine):
    return SqlSlotStore(engine)


@pytest.fixture
def file_store(tmp_path):
    return FileSlotStore(tmp_path / "slots")


@pytest.fixture
def persistence(store):
    return RecordingPersistence(store)


@pytest.fixture
def catalog(persistence):
    return open_catalog(persistence)


@pytest.fixture
def client(catalog):
    app.dependency_overrides[get_catalog] = lambda: catalog
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
