"""Dashboard statistics derived from the stored job applications."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from jobtracker.models import JobApplication, JobStatus


@dataclass(frozen=True)
class AppStats:
    total: int
    applied: int
    rejected: int
    interviewing: int
    success: int


def compute_stats(jobs: list[JobApplication]) -> AppStats:
    """Count jobs overall and per headline status."""

    def count(status: str) -> int:
        return sum(1 for job in jobs if job.status == status)

    return AppStats(
        total=len(jobs),
        applied=count(JobStatus.APPLIED),
        rejected=count(JobStatus.REJECTED),
        interviewing=count(JobStatus.INTERVIEW),
        success=count(JobStatus.SUCCESS),
    )


def status_breakdown(jobs: list[JobApplication]) -> dict[str, int]:
    """Count jobs per known status, in JobStatus order, dropping empty ones.

    Jobs carrying a status outside JobStatus.ALL are not counted here.
    """
    breakdown = {}
    for status in JobStatus.ALL:
        n = sum(1 for job in jobs if job.status == status)
        if n > 0:
            breakdown[status] = n
    return breakdown


def daily_activity(
    jobs: list[JobApplication], days: int = 7, today: date | None = None
) -> list[tuple[str, int]]:
    """Return (ISO date, count) for the last `days` days, oldest first.

    A job counts towards a day when its date_applied equals that ISO date
    exactly; other date formats never match.
    """
    if days < 1:
        raise ValueError(f"days must be at least 1, got {days}")
    today = today or date.today()

    counts: dict[str, int] = {}
    for job in jobs:
        counts[job.date_applied] = counts.get(job.date_applied, 0) + 1

    result = []
    for offset in range(days - 1, -1, -1):
        day = (today - timedelta(days=offset)).isoformat()
        result.append((day, counts.get(day, 0)))
    return result
