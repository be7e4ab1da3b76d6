"""Job application tracking endpoints."""

from fastapi import APIRouter, Depends

from backend.api.deps import get_current_user, get_job_service
from backend.api.schemas import (
    ApplicationCreate,
    ApplicationListResponse,
    ApplicationResponse,
    ApplicationUpdate,
)
from backend.db import User
from backend.services import JobService

router = APIRouter()


@router.post("", response_model=ApplicationResponse)
def apply_to_job(
    data: ApplicationCreate,
    user: User = Depends(get_current_user),
    service: JobService = Depends(get_job_service),
):
    application = service.apply_to_job(user, data.job_id, resume_id=data.resume_id, status=data.status)
    return ApplicationResponse.model_validate(application)


@router.get("", response_model=ApplicationListResponse)
def list_applications(
    status: str | None = None,
    user: User = Depends(get_current_user),
    service: JobService = Depends(get_job_service),
):
    applications = service.list_applications(user, status=status)
    return ApplicationListResponse(applications=[ApplicationResponse.model_validate(a) for a in applications])


@router.patch("/{application_id}", response_model=ApplicationResponse)
def update_application(
    application_id: str,
    data: ApplicationUpdate,
    user: User = Depends(get_current_user),
    service: JobService = Depends(get_job_service),
):
    application = service.update_application(user, application_id, status=data.status, notes=data.notes)
    return ApplicationResponse.model_validate(application)


@router.delete("/{application_id}")
def delete_application(
    application_id: str,
    user: User = Depends(get_current_user),
    service: JobService = Depends(get_job_service),
):
    service.delete_application(user, application_id)
    return {"message": "Application deleted"}
