"""Pydantic v2 request/response models for the Jobtracker web API."""

from __future__ import annotations

from dataclasses import asdict

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from jobtracker.models import JobApplication


# ---------------------------------------------------------------------------
# Jobs
# ---------------------------------------------------------------------------
class JobApplicationModel(BaseModel):
    """Wire shape of a job application, keyed like the front-end's JobApplication.

    Keys are camelCase except job_type, which travels as "type". Snake_case
    field names are accepted on input too.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    date_applied: str
    job_title: str
    company_name: str
    url: str | None = None
    status: str
    resume_name: str | None = None
    has_cover_letter: bool
    cover_letter_name: str | None = None
    cover_letter_content: str | None = None
    job_type: str | None = Field(default=None, alias="type")

    def to_record(self) -> JobApplication:
        return JobApplication(**self.model_dump())

    @classmethod
    def from_record(cls, job: JobApplication) -> JobApplicationModel:
        return cls(**asdict(job))


class JobCreatedResponse(BaseModel):
    id: str


class JobListResponse(BaseModel):
    jobs: list[JobApplicationModel]
    total: int


# ---------------------------------------------------------------------------
# Stats
# ---------------------------------------------------------------------------
class ActivityDay(BaseModel):
    date: str
    count: int


class StatsResponse(BaseModel):
    total: int
    applied: int
    rejected: int
    interviewing: int
    success: int
    status_breakdown: dict[str, int]
    activity: list[ActivityDay]
