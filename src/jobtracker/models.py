"""Job application record and the labels the front-end knows about."""

from __future__ import annotations

import uuid
from dataclasses import dataclass


class JobStatus:
    """Status labels offered by the front-end. The store accepts any string."""

    APPLIED = "Applied"
    REJECTED = "Rejected"
    WATCHLIST = "Watchlist"
    INTERVIEW = "Interview scheduled"
    SUCCESS = "Success"

    ALL = (APPLIED, REJECTED, WATCHLIST, INTERVIEW, SUCCESS)


class JobType:
    """Job type labels offered by the front-end. The store accepts any string."""

    WERKSTUDENT = "Werkstudent"
    PART_TIME = "Part-time"
    FULL_TIME = "Full-time"
    INTERNSHIP = "Uni-internship"

    ALL = (WERKSTUDENT, PART_TIME, FULL_TIME, INTERNSHIP)


@dataclass(frozen=True)
class JobApplication:
    """One job application, exactly as stored in the jobs table."""

    id: str
    date_applied: str
    job_title: str
    company_name: str
    status: str
    has_cover_letter: bool
    url: str | None = None
    resume_name: str | None = None
    cover_letter_name: str | None = None  # only meaningful with has_cover_letter
    cover_letter_content: str | None = None
    job_type: str | None = None


def new_job_id() -> str:
    """Return a fresh unique id for a record about to be created."""
    return str(uuid.uuid4())
