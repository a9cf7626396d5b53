"""Storage layer — SQLite database access and schema management."""

from jobtracker.storage.connection import get_connection
from jobtracker.storage.schema import DEFAULT_DATABASE_PATH, ensure_store, init_db

__all__ = ["DEFAULT_DATABASE_PATH", "ensure_store", "get_connection", "init_db"]
