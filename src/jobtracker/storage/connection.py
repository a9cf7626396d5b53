"""SQLite connection management."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from typing import Generator

from jobtracker.errors import StorageUnavailable


@contextmanager
def get_connection(database_path: str) -> Generator[sqlite3.Connection, None, None]:
    """Open a SQLite connection with WAL mode enabled.

    Raises StorageUnavailable if the file cannot be opened or is not a
    database. Commits on clean exit, rolls back on exception, and always
    closes.
    """
    try:
        conn = sqlite3.connect(database_path)
    except sqlite3.Error as exc:
        raise StorageUnavailable(f"Cannot open database at {database_path}: {exc}") from exc
    try:
        conn.execute("PRAGMA journal_mode=WAL")
    except sqlite3.Error as exc:
        conn.close()
        raise StorageUnavailable(f"Cannot open database at {database_path}: {exc}") from exc
    conn.row_factory = sqlite3.Row
    try:
        yield conn
        try:
            conn.commit()
        except sqlite3.Error as exc:
            raise StorageUnavailable(f"Cannot commit to {database_path}: {exc}") from exc
    except BaseException:
        conn.rollback()
        raise
    finally:
        conn.close()
