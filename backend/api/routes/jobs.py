"""Job search endpoints."""

from fastapi import APIRouter, Depends, Request

from backend.api.deps import get_current_user, get_job_service
from backend.api.limiter import limiter
from backend.api.schemas import JobResponse, JobSearchRequest, JobSearchResponse
from backend.db import User
from backend.services import JobService

router = APIRouter()


@router.post("/search", response_model=JobSearchResponse)
@limiter.limit("30/minute")
def search_jobs(
    request: Request,
    data: JobSearchRequest,
    user: User = Depends(get_current_user),
    service: JobService = Depends(get_job_service),
):
    """Search job listings. Results are stored so they can be applied to."""
    found = service.search_jobs(
        data.query,
        data.location,
        radius=data.radius,
        filters=data.filters.model_dump(exclude_none=True),
        page_token=data.page_token,
    )
    return JobSearchResponse(
        jobs=[JobResponse.model_validate(j) for j in found["jobs"]],
        total_count=found["total_count"],
        next_page_token=found["next_page_token"],
    )


@router.get("/{job_id}", response_model=JobResponse)
def get_job(
    job_id: str,
    user: User = Depends(get_current_user),
    service: JobService = Depends(get_job_service),
):
    return JobResponse.model_validate(service.get_job(job_id))
