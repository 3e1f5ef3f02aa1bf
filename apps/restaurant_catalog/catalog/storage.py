"""Named-slot persistence for catalog collections.

A slot is a named blob of JSON text. ``Persistence`` encodes and decodes
typed values through pydantic and never raises on the expected failure
paths: a failed save is logged and dropped, a failed load comes back as
``Absent`` so the caller can fall back to its defaults.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from functools import lru_cache
from pathlib import Path
from typing import Any, Generic, Optional, Protocol, TypeVar, Union

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from . import config
from .db import init_db, make_engine
from .models import Slot

log = logging.getLogger(__name__)

T = TypeVar("T")


class SlotStore(Protocol):
    def read(self, name: str) -> Optional[str]: ...

    def write(self, name: str, content: str) -> None: ...

    def exists(self, name: str) -> bool: ...


class SqlSlotStore:
    """Slots as rows of the ``slot`` table."""

    def __init__(self, engine: Engine):
        self.engine = engine
        init_db(engine)

    def read(self, name: str) -> Optional[str]:
        with Session(self.engine) as session:
            row = session.get(Slot, name)
            return None if row is None else row.content

    def write(self, name: str, content: str) -> None:
        with Session(self.engine) as session:
            row = session.get(Slot, name)
            if row is None:
                row = Slot(name=name, content=content)
            else:
                row.content = content
                row.updated_at = datetime.now(timezone.utc)
            session.add(row)
            session.commit()

    def exists(self, name: str) -> bool:
        with Session(self.engine) as session:
            return session.get(Slot, name) is not None

    def __repr__(self) -> str:
        return f"SqlSlotStore({self.engine.url.render_as_string(hide_password=True)})"


class FileSlotStore:
    """Slots as files named after the slot inside one directory."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def _path(self, name: str) -> Path:
        return self.directory / name

    def read(self, name: str) -> Optional[str]:
        path = self._path(name)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, name: str, content: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        self._path(name).write_text(content, encoding="utf-8")

    def exists(self, name: str) -> bool:
        return self._path(name).is_file()

    def __repr__(self) -> str:
        return f"FileSlotStore({self.directory})"


def make_store(backend: str = config.STORE_BACKEND) -> SlotStore:
    if backend == "sqlite":
        return SqlSlotStore(make_engine(config.DATABASE_URL))
    if backend == "files":
        return FileSlotStore(config.DATA_DIR)
    raise ValueError(f"Unknown CATALOG_STORE backend: {backend!r}")


@dataclass(frozen=True)
class Present(Generic[T]):
    value: T


@dataclass(frozen=True)
class Absent:
    slot: str
    reason: str


LoadResult = Union[Present[T], Absent]


@lru_cache(maxsize=None)
def _adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


class Persistence:
    def __init__(self, store: SlotStore):
        self.store = store

    def save(self, value: Any, slot: str, type_: Any) -> None:
        """Encode ``value`` as ``type_`` and replace the content of ``slot``.

        Failures are logged, never raised: the in-memory state the caller
        holds stays authoritative until the next successful save.
        """
        try:
            content = _adapter(type_).dump_json(value, indent=2, exclude_none=True).decode("utf-8")
            self.store.write(slot, content)
        except (OSError, SQLAlchemyError, PydanticSerializationError, ValueError):
            log.exception("Could not save slot %s", slot)
            return
        log.debug("Saved slot %s (%d bytes)", slot, len(content))

    def load(self, type_: Any, slot: str) -> LoadResult:
        try:
            content = self.store.read(slot)
        except (OSError, SQLAlchemyError, UnicodeDecodeError) as exc:
            log.warning("Could not read slot %s: %s", slot, exc)
            return Absent(slot, f"unreadable: {exc}")

        if content is None:
            log.info("Slot %s has no saved state", slot)
            return Absent(slot, "missing")

        try:
            value = _adapter(type_).validate_json(content)
        except ValidationError as exc:
            log.warning("Slot %s does not decode: %d error(s)", slot, exc.error_count())
            return Absent(slot, f"undecodable: {exc.error_count()} error(s)")
        return Present(value)

    def exists(self, slot: str) -> bool:
        return self.store.exists(slot)
