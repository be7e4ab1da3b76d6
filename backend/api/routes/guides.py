"""Interview preparation guide endpoints."""

from fastapi import APIRouter, Depends, Request

from backend.ai import GenerationInvoker
from backend.api.deps import get_current_user, get_guide_service, get_invoker
from backend.api.limiter import generation_limit
from backend.api.schemas import InterviewGuideCreate, InterviewGuideListResponse, InterviewGuideResponse
from backend.db import User
from backend.services import InterviewGuideService

router = APIRouter()


@router.post("", response_model=InterviewGuideResponse)
@generation_limit
def create_guide(
    request: Request,
    data: InterviewGuideCreate,
    user: User = Depends(get_current_user),
    service: InterviewGuideService = Depends(get_guide_service),
    invoker: GenerationInvoker = Depends(get_invoker),
):
    """Generate a preparation guide for a stored job or an inline job description."""
    guide = service.generate_guide(
        user,
        invoker,
        job_id=data.job_id,
        job_title=data.job_title,
        company_name=data.company_name,
        job_description=data.job_description,
        resume_id=data.resume_id,
    )
    return InterviewGuideResponse.model_validate(guide)


@router.get("", response_model=InterviewGuideListResponse)
def list_guides(
    job_id: str | None = None,
    user: User = Depends(get_current_user),
    service: InterviewGuideService = Depends(get_guide_service),
):
    guides = service.list_guides(user, job_id=job_id)
    return InterviewGuideListResponse(guides=[InterviewGuideResponse.model_validate(g) for g in guides])


@router.get("/{guide_id}", response_model=InterviewGuideResponse)
def get_guide(
    guide_id: str,
    user: User = Depends(get_current_user),
    service: InterviewGuideService = Depends(get_guide_service),
):
    return InterviewGuideResponse.model_validate(service.get_guide(user, guide_id))


@router.delete("/{guide_id}")
def delete_guide(
    guide_id: str,
    user: User = Depends(get_current_user),
    service: InterviewGuideService = Depends(get_guide_service),
):
    service.delete_guide(user, guide_id)
    return {"message": "Interview guide deleted"}
