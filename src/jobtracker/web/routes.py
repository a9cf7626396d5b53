"""API route handlers for the Jobtracker web API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from jobtracker.errors import ConstraintViolation, DecodeError, StorageError, StorageUnavailable
from jobtracker.repository import JobRepository
from jobtracker.stats import compute_stats, daily_activity, status_breakdown
from jobtracker.storage.schema import ensure_store
from jobtracker.web.models import (
    ActivityDay,
    JobApplicationModel,
    JobCreatedResponse,
    JobListResponse,
    StatsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()
health_router = APIRouter()

_ERROR_STATUS = {
    ConstraintViolation: 409,
    StorageUnavailable: 503,
    DecodeError: 500,
}


def _http_error(exc: StorageError) -> HTTPException:
    logger.warning("Request failed: %s", exc)
    return HTTPException(status_code=_ERROR_STATUS.get(type(exc), 500), detail=str(exc))


@health_router.get("/health")
def health(request: Request) -> JSONResponse:
    """Check that the store opens and its schema is in place."""
    database_path = request.app.state.database_path
    try:
        with ensure_store(database_path) as conn:
            conn.execute("SELECT 1")
        return JSONResponse({"status": "healthy", "database": "ok"})
    except StorageError as exc:
        logger.warning("Health check failed: %s", exc)
        return JSONResponse(
            {"status": "unhealthy", "database": "error", "detail": str(exc)},
            status_code=503,
        )


@router.post("/jobs", response_model=JobCreatedResponse, status_code=201)
def create_job(request: Request, body: JobApplicationModel) -> JobCreatedResponse:
    repo = JobRepository(request.app.state.database_path)
    try:
        job_id = repo.create(body.to_record())
    except StorageError as exc:
        raise _http_error(exc) from exc
    return JobCreatedResponse(id=job_id)


@router.get("/jobs", response_model=JobListResponse)
def list_jobs(request: Request) -> JobListResponse:
    repo = JobRepository(request.app.state.database_path)
    try:
        jobs = repo.list()
    except StorageError as exc:
        raise _http_error(exc) from exc
    return JobListResponse(
        jobs=[JobApplicationModel.from_record(job) for job in jobs],
        total=len(jobs),
    )


@router.get("/stats", response_model=StatsResponse)
def stats(request: Request, days: int = Query(7, ge=1, le=365)) -> StatsResponse:
    repo = JobRepository(request.app.state.database_path)
    try:
        jobs = repo.list()
    except StorageError as exc:
        raise _http_error(exc) from exc
    summary = compute_stats(jobs)
    return StatsResponse(
        total=summary.total,
        applied=summary.applied,
        rejected=summary.rejected,
        interviewing=summary.interviewing,
        success=summary.success,
        status_breakdown=status_breakdown(jobs),
        activity=[ActivityDay(date=day, count=n) for day, n in daily_activity(jobs, days=days)],
    )
