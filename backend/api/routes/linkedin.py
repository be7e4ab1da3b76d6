"""LinkedIn profile endpoints."""

from fastapi import APIRouter, Depends, Request

from backend.ai import GenerationInvoker
from backend.api.deps import get_current_user, get_invoker, get_linkedin_service
from backend.api.limiter import generation_limit
from backend.api.schemas import LinkedInProfileCreate, LinkedInProfileResponse
from backend.db import User
from backend.services import LinkedInService

router = APIRouter()


@router.post("/profile", response_model=LinkedInProfileResponse)
@generation_limit
def generate_profile(
    request: Request,
    data: LinkedInProfileCreate,
    user: User = Depends(get_current_user),
    service: LinkedInService = Depends(get_linkedin_service),
    invoker: GenerationInvoker = Depends(get_invoker),
):
    """Generate (or regenerate) the caller's LinkedIn profile from a résumé."""
    profile = service.generate_profile(user, data.resume_id, invoker, current_profile=data.current_profile)
    return LinkedInProfileResponse.model_validate(profile)


@router.get("/profile", response_model=LinkedInProfileResponse)
def get_profile(
    user: User = Depends(get_current_user),
    service: LinkedInService = Depends(get_linkedin_service),
):
    return LinkedInProfileResponse.model_validate(service.get_profile(user))
