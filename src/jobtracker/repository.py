"""Create and list job applications in the jobs table."""

from __future__ import annotations

import logging
import sqlite3

from jobtracker.errors import ConstraintViolation, DecodeError, StorageUnavailable
from jobtracker.models import JobApplication
from jobtracker.storage.schema import DEFAULT_DATABASE_PATH, JOB_COLUMNS, ensure_store

logger = logging.getLogger(__name__)

_REQUIRED_TEXT = ("id", "date_applied", "job_title", "company_name", "status")
_OPTIONAL_TEXT = ("url", "resume_name", "cover_letter_name", "cover_letter_content", "job_type")

_INSERT_SQL = (
    f"INSERT INTO jobs ({', '.join(JOB_COLUMNS)}) "
    f"VALUES ({', '.join('?' for _ in JOB_COLUMNS)})"
)
_SELECT_SQL = f"SELECT {', '.join(JOB_COLUMNS)} FROM jobs"


def _check_insertable(job: JobApplication) -> None:
    """Reject values the jobs table would store silently but wrongly.

    A TEXT PRIMARY KEY column accepts NULL in SQLite, and a truthy
    non-bool flag would be stored as 1.
    """
    if job.id is None:
        raise ConstraintViolation("Cannot store job None: id is required")
    flag = job.has_cover_letter
    if flag is not None and not isinstance(flag, bool):
        raise ConstraintViolation(
            f"Cannot store job {job.id!r}: has_cover_letter must be a bool, got {flag!r}"
        )


def _job_to_params(job: JobApplication) -> tuple:
    """Map a JobApplication onto the column order of JOB_COLUMNS."""
    flag = job.has_cover_letter
    return (
        job.id,
        job.date_applied,
        job.job_title,
        job.company_name,
        job.url,
        job.status,
        job.resume_name,
        None if flag is None else int(flag),
        job.cover_letter_name,
        job.cover_letter_content,
        job.job_type,
    )


def _row_to_job(row: sqlite3.Row) -> JobApplication:
    """Rebuild a JobApplication from a jobs row. Raises DecodeError on a bad row."""
    for col in _REQUIRED_TEXT:
        if not isinstance(row[col], str):
            raise DecodeError(
                f"Cannot decode job {row['id']!r}: {col} is {row[col]!r}, expected text"
            )
    for col in _OPTIONAL_TEXT:
        if row[col] is not None and not isinstance(row[col], str):
            raise DecodeError(
                f"Cannot decode job {row['id']!r}: {col} is {row[col]!r}, expected text or NULL"
            )
    flag = row["has_cover_letter"]
    if not isinstance(flag, int):
        raise DecodeError(
            f"Cannot decode job {row['id']!r}: has_cover_letter is {flag!r}, expected integer"
        )

    return JobApplication(
        id=row["id"],
        date_applied=row["date_applied"],
        job_title=row["job_title"],
        company_name=row["company_name"],
        url=row["url"],
        status=row["status"],
        resume_name=row["resume_name"],
        has_cover_letter=flag != 0,
        cover_letter_name=row["cover_letter_name"],
        cover_letter_content=row["cover_letter_content"],
        job_type=row["job_type"],
    )


class JobRepository:
    """Create and list job applications.

    Every call opens its own connection through ensure_store, so the
    schema check runs before each operation and nothing is shared
    between calls.
    """

    def __init__(self, database_path: str = DEFAULT_DATABASE_PATH):
        self.database_path = database_path

    def create(self, job: JobApplication) -> str:
        """Insert one job and return its id.

        Raises ConstraintViolation on a duplicate id or a missing mandatory
        field, StorageUnavailable if the store cannot be opened or written.
        """
        _check_insertable(job)
        with ensure_store(self.database_path) as conn:
            try:
                conn.execute(_INSERT_SQL, _job_to_params(job))
            except (sqlite3.IntegrityError, sqlite3.InterfaceError, sqlite3.ProgrammingError) as exc:
                raise ConstraintViolation(f"Cannot store job {job.id!r}: {exc}") from exc
            except sqlite3.Error as exc:
                raise StorageUnavailable(f"Cannot store job {job.id!r}: {exc}") from exc
        logger.debug("Created job %s (%s at %s)", job.id, job.job_title, job.company_name)
        return job.id

    def list(self) -> list[JobApplication]:
        """Return every stored job, in whatever order SQLite yields them.

        Raises DecodeError on the first row that cannot be rebuilt;
        no partial list is returned.
        """
        with ensure_store(self.database_path) as conn:
            try:
                rows = conn.execute(_SELECT_SQL).fetchall()
            except sqlite3.Error as exc:
                raise StorageUnavailable(f"Cannot read jobs: {exc}") from exc

        jobs = [_row_to_job(row) for row in rows]
        logger.debug("Listed %d jobs", len(jobs))
        return jobs
