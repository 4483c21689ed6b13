# ABOUTME: SQLite connection management for the Lendery catalog store.
# ABOUTME: Creates fresh store files for writing and opens existing ones read-only.

import sqlite3
from pathlib import Path

from lendery.db.schema import SCHEMA_V1

DEFAULT_DB_PATH = Path.home() / ".lendery" / "library.db"


def create_store(path: Path) -> sqlite3.Connection:
    """Create a brand-new store file at path and apply the schema.

    Any existing file at path is removed first, so the caller always writes
    into an empty database. Parent directories are created as needed.

    Args:
        path: Location of the store file.

    Returns:
        A configured sqlite3.Connection with an empty books table.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.unlink(missing_ok=True)

    conn = sqlite3.connect(str(path))
    conn.row_factory = sqlite3.Row
    conn.executescript(SCHEMA_V1)
    return conn


def open_store_readonly(path: Path) -> sqlite3.Connection:
    """Open an existing store file without creating or modifying it."""
    uri = f"{path.resolve().as_uri()}?mode=ro"
    conn = sqlite3.connect(uri, uri=True)
    conn.row_factory = sqlite3.Row
    return conn
