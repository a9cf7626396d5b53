"""Tests for jobtracker.stats."""

from __future__ import annotations

from datetime import date

import pytest

from jobtracker.models import JobApplication, JobStatus
from jobtracker.stats import AppStats, compute_stats, daily_activity, status_breakdown


def _job(job_id: str, status: str = JobStatus.APPLIED, date_applied: str = "2024-01-05") -> JobApplication:
    return JobApplication(
        id=job_id,
        date_applied=date_applied,
        job_title="Engineer",
        company_name="Acme",
        status=status,
        has_cover_letter=False,
    )


class TestComputeStats:
    def test_empty(self):
        assert compute_stats([]) == AppStats(total=0, applied=0, rejected=0, interviewing=0, success=0)

    def test_counts_headline_statuses(self):
        jobs = [
            _job("1", JobStatus.APPLIED),
            _job("2", JobStatus.APPLIED),
            _job("3", JobStatus.REJECTED),
            _job("4", JobStatus.INTERVIEW),
            _job("5", JobStatus.SUCCESS),
            _job("6", JobStatus.WATCHLIST),
            _job("7", "something else"),
        ]
        assert compute_stats(jobs) == AppStats(total=7, applied=2, rejected=1, interviewing=1, success=1)


class TestStatusBreakdown:
    def test_known_order_and_zero_dropped(self):
        jobs = [
            _job("1", JobStatus.SUCCESS),
            _job("2", JobStatus.APPLIED),
            _job("3", JobStatus.APPLIED),
            _job("4", "custom"),
        ]
        breakdown = status_breakdown(jobs)
        assert breakdown == {JobStatus.APPLIED: 2, JobStatus.SUCCESS: 1}
        assert list(breakdown) == [JobStatus.APPLIED, JobStatus.SUCCESS]

    def test_empty(self):
        assert status_breakdown([]) == {}


class TestDailyActivity:
    def test_window_oldest_first(self):
        today = date(2024, 3, 2)
        jobs = [
            _job("1", date_applied="2024-03-02"),
            _job("2", date_applied="2024-03-02"),
            _job("3", date_applied="2024-02-29"),
            _job("4", date_applied="2024-01-01"),
        ]
        assert daily_activity(jobs, days=4, today=today) == [
            ("2024-02-28", 0),
            ("2024-02-29", 1),
            ("2024-03-01", 0),
            ("2024-03-02", 2),
        ]

    def test_default_is_seven_days_ending_today(self):
        activity = daily_activity([])
        assert len(activity) == 7
        assert activity[-1][0] == date.today().isoformat()

    def test_non_iso_dates_never_match(self):
        today = date(2024, 1, 5)
        activity = daily_activity([_job("1", date_applied="05/01/2024")], days=1, today=today)
        assert activity == [("2024-01-05", 0)]

    def test_rejects_non_positive_days(self):
        with pytest.raises(ValueError, match="days must be at least 1"):
            daily_activity([], days=0)
