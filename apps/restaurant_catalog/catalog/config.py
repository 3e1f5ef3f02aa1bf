"""Runtime configuration, read from the environment (and an optional .env)."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DATA_DIR = Path(
    os.getenv("CATALOG_DATA_DIR", Path(__file__).resolve().parent.parent / "data")
)

# "sqlite" keeps every slot in one database file, "files" writes one JSON file per slot.
STORE_BACKEND = os.getenv("CATALOG_STORE", "sqlite").strip().lower()

DATABASE_URL = os.getenv("CATALOG_DATABASE_URL", f"sqlite:///{DATA_DIR / 'catalog.sqlite3'}")

SEED_DEFAULTS = os.getenv("CATALOG_SEED_DEFAULTS", "1").strip().lower() not in {"0", "false", "no", "off"}

LOG_LEVEL = os.getenv("CATALOG_LOG_LEVEL", "INFO").upper()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
