"""Job search and application tracking."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from backend.db.repositories import JobApplicationRepository, JobRepository, ResumeRepository
from backend.db.tables import Job, JobApplication, User, utcnow
from backend.errors import BadRequest, NotFound
from backend.services.base import require_owned
from backend.tools import google_jobs

logger = logging.getLogger(__name__)

APPLICATION_STATUSES = {"saved", "applied", "interviewing", "offered", "rejected"}


class JobService:
    def __init__(self, db: Session):
        self.db = db
        self.jobs = JobRepository(db)
        self.applications = JobApplicationRepository(db)
        self.resumes = ResumeRepository(db)

    def search_jobs(
        self,
        query: str,
        location: str,
        radius: int = 25,
        filters: dict[str, Any] | None = None,
        page_token: str | None = None,
    ) -> dict[str, Any]:
        """Search the listings provider and store each posting once."""
        found = google_jobs.search_jobs(query, location, radius, filters, page_token)
        jobs = [self.jobs.get_or_create(posting) for posting in found["jobs"]]
        self.db.commit()

        logger.info("Job search '%s' in %s: %d results", query, location, len(jobs))
        return {
            "jobs": jobs,
            "total_count": found["total_count"],
            "next_page_token": found["next_page_token"],
        }

    def get_job(self, job_id: str) -> Job:
        job = self.jobs.get(job_id)
        if job is None:
            raise NotFound("Job not found")
        return job

    def apply_to_job(
        self,
        user: User,
        job_id: str,
        resume_id: str | None = None,
        status: str = "applied",
    ) -> JobApplication:
        job = self.get_job(job_id)
        if resume_id:
            require_owned(self.resumes.get(resume_id), user, "Resume")
        _check_status(status)

        if self.applications.find(user.id, job.id):
            raise BadRequest("You have already applied to this job")

        application = self.applications.create(user.id, job.id, resume_id, status)
        self.db.commit()
        return application

    def list_applications(self, user: User, status: str | None = None) -> list[JobApplication]:
        return self.applications.list_for_user(user.id, status=status)

    def update_application(
        self,
        user: User,
        application_id: str,
        status: str | None = None,
        notes: str | None = None,
    ) -> JobApplication:
        application = require_owned(self.applications.get(application_id), user, "Job application")
        if status is not None:
            _check_status(status)
            application.status = status
        if notes is not None:
            application.notes = notes
        application.updated_at = utcnow()
        self.db.commit()
        return application

    def delete_application(self, user: User, application_id: str) -> None:
        application = require_owned(self.applications.get(application_id), user, "Job application")
        self.applications.delete(application)
        self.db.commit()


def _check_status(status: str) -> None:
    if status not in APPLICATION_STATUSES:
        raise BadRequest(f"Invalid status: {status}")
