"""Entry points called in-process by the application shell.

Each call is a self-contained unit of work. Storage failures never
escape: they are logged and returned as a plain message string.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from jobtracker.errors import StorageError
from jobtracker.models import JobApplication
from jobtracker.repository import JobRepository
from jobtracker.storage.schema import DEFAULT_DATABASE_PATH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a shell command: a value on success, a message on failure."""

    ok: bool
    value: Any = None
    error: str | None = None


def add_job(job: JobApplication, database_path: str = DEFAULT_DATABASE_PATH) -> CommandResult:
    """Store a new job application and echo back its id."""
    try:
        job_id = JobRepository(database_path).create(job)
    except StorageError as exc:
        logger.warning("add_job failed: %s", exc)
        return CommandResult(ok=False, error=str(exc))
    return CommandResult(ok=True, value=job_id)


def get_jobs(database_path: str = DEFAULT_DATABASE_PATH) -> CommandResult:
    """Return every stored job application."""
    try:
        jobs = JobRepository(database_path).list()
    except StorageError as exc:
        logger.warning("get_jobs failed: %s", exc)
        return CommandResult(ok=False, error=str(exc))
    return CommandResult(ok=True, value=jobs)
