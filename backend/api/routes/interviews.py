"""Mock interview endpoints."""

from fastapi import APIRouter, Depends, Request

from backend.ai import GenerationInvoker
from backend.ai.schemas import AnswerFeedback, CompanyResearch
from backend.api.deps import get_current_user, get_interview_service, get_invoker
from backend.api.limiter import generation_limit
from backend.api.schemas import (
    AnswerSubmit,
    CompanyResearchRequest,
    InterviewCreate,
    InterviewListResponse,
    InterviewResponse,
)
from backend.db import User
from backend.services import InterviewService

router = APIRouter()


@router.post("", response_model=InterviewResponse)
@generation_limit
def create_mock_interview(
    request: Request,
    data: InterviewCreate,
    user: User = Depends(get_current_user),
    service: InterviewService = Depends(get_interview_service),
    invoker: GenerationInvoker = Depends(get_invoker),
):
    """Generate a mock interview for one of the caller's job applications."""
    interview = service.create_mock_interview(user, data.job_application_id, data.type, invoker)
    return InterviewResponse.model_validate(interview)


@router.post("/company-research", response_model=CompanyResearch)
@generation_limit
def research_company(
    request: Request,
    data: CompanyResearchRequest,
    user: User = Depends(get_current_user),
    service: InterviewService = Depends(get_interview_service),
    invoker: GenerationInvoker = Depends(get_invoker),
):
    return service.research_company(user, data.company_name, data.industry, invoker)


@router.post("/{interview_id}/answers", response_model=AnswerFeedback)
@generation_limit
def submit_answer(
    request: Request,
    interview_id: str,
    data: AnswerSubmit,
    user: User = Depends(get_current_user),
    service: InterviewService = Depends(get_interview_service),
    invoker: GenerationInvoker = Depends(get_invoker),
):
    """Store an answer and return feedback on it."""
    return service.submit_answer(user, interview_id, data.question_id, data.answer, invoker)


@router.get("", response_model=InterviewListResponse)
def list_interviews(
    user: User = Depends(get_current_user),
    service: InterviewService = Depends(get_interview_service),
):
    interviews = service.list_interviews(user)
    return InterviewListResponse(interviews=[InterviewResponse.model_validate(i) for i in interviews])


@router.get("/{interview_id}", response_model=InterviewResponse)
def get_interview(
    interview_id: str,
    user: User = Depends(get_current_user),
    service: InterviewService = Depends(get_interview_service),
):
    return InterviewResponse.model_validate(service.get_interview(user, interview_id))


@router.delete("/{interview_id}")
def delete_interview(
    interview_id: str,
    user: User = Depends(get_current_user),
    service: InterviewService = Depends(get_interview_service),
):
    service.delete_interview(user, interview_id)
    return {"message": "Interview deleted"}
