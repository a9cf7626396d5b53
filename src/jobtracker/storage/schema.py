"""Database schema definition and initialization."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from typing import Generator

from jobtracker.errors import StorageUnavailable
from jobtracker.storage.connection import get_connection

logger = logging.getLogger(__name__)

# Relative to the working directory; not configurable.
DEFAULT_DATABASE_PATH = "data/jobs.db"

JOB_COLUMNS = (
    "id",
    "date_applied",
    "job_title",
    "company_name",
    "url",
    "status",
    "resume_name",
    "has_cover_letter",
    "cover_letter_name",
    "cover_letter_content",
    "job_type",
)

_SCHEMA_SQL = """\
-- One row per job application
CREATE TABLE IF NOT EXISTS jobs (
    id                      TEXT PRIMARY KEY NOT NULL,
    date_applied            TEXT NOT NULL,
    job_title               TEXT NOT NULL,
    company_name            TEXT NOT NULL,
    url                     TEXT,
    status                  TEXT NOT NULL,
    resume_name             TEXT,
    has_cover_letter        INTEGER NOT NULL,   -- 0/1
    cover_letter_name       TEXT,
    cover_letter_content    TEXT,               -- full text, not a file path
    job_type                TEXT
);
"""


def _check_jobs_columns(conn: sqlite3.Connection) -> None:
    """Raise StorageUnavailable if an existing jobs table lacks expected columns."""
    rows = conn.execute("PRAGMA table_info(jobs)").fetchall()
    present = {row["name"] for row in rows}
    missing = [col for col in JOB_COLUMNS if col not in present]
    if missing:
        raise StorageUnavailable(
            f"Incompatible jobs table: missing columns {', '.join(missing)}"
        )


@contextmanager
def ensure_store(
    database_path: str = DEFAULT_DATABASE_PATH,
) -> Generator[sqlite3.Connection, None, None]:
    """Open the store, make sure the jobs table exists, and yield the connection.

    Safe to call before every operation. The connection is committed and
    closed on clean exit, rolled back and closed otherwise.
    """
    with get_connection(database_path) as conn:
        try:
            conn.executescript(_SCHEMA_SQL)
        except sqlite3.Error as exc:
            raise StorageUnavailable(f"Cannot ensure schema at {database_path}: {exc}") from exc
        _check_jobs_columns(conn)
        yield conn


def init_db(database_path: str = DEFAULT_DATABASE_PATH) -> None:
    """Create the jobs table if it does not already exist."""
    with ensure_store(database_path):
        pass
    logger.info("Database initialized at %s", database_path)
