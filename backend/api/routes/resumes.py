"""Résumé endpoints."""

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from backend.ai import GenerationInvoker
from backend.ai.schemas import ResumeAnalysis
from backend.api.deps import get_current_user, get_invoker, get_resume_service
from backend.api.limiter import generation_limit
from backend.api.schemas import (
    ResumeAnalysisRequest,
    ResumeCreate,
    ResumeFormatRequest,
    ResumeListResponse,
    ResumeResponse,
)
from backend.db import User
from backend.services import ResumeService

router = APIRouter()


@router.post("", response_model=ResumeResponse)
def create_resume(
    data: ResumeCreate,
    user: User = Depends(get_current_user),
    service: ResumeService = Depends(get_resume_service),
):
    return ResumeResponse.model_validate(service.create_resume(user, data.title, data.content))


@router.post("/upload", response_model=ResumeResponse)
async def upload_resume(
    file: UploadFile = File(...),
    title: str = Form(""),
    user: User = Depends(get_current_user),
    service: ResumeService = Depends(get_resume_service),
):
    """Upload a résumé (PDF) and store its text."""
    content = await file.read()
    resume = service.upload_resume(user, title, file.filename or "", content)
    return ResumeResponse.model_validate(resume)


@router.get("", response_model=ResumeListResponse)
def list_resumes(
    user: User = Depends(get_current_user),
    service: ResumeService = Depends(get_resume_service),
):
    return ResumeListResponse(resumes=[ResumeResponse.model_validate(r) for r in service.list_resumes(user)])


@router.get("/{resume_id}", response_model=ResumeResponse)
def get_resume(
    resume_id: str,
    user: User = Depends(get_current_user),
    service: ResumeService = Depends(get_resume_service),
):
    return ResumeResponse.model_validate(service.get_resume(user, resume_id))


@router.delete("/{resume_id}")
def delete_resume(
    resume_id: str,
    user: User = Depends(get_current_user),
    service: ResumeService = Depends(get_resume_service),
):
    service.delete_resume(user, resume_id)
    return {"message": "Resume deleted"}


@router.post("/{resume_id}/analysis", response_model=ResumeAnalysis)
@generation_limit
def analyze_resume(
    request: Request,
    resume_id: str,
    data: ResumeAnalysisRequest,
    user: User = Depends(get_current_user),
    service: ResumeService = Depends(get_resume_service),
    invoker: GenerationInvoker = Depends(get_invoker),
):
    """Analyze a résumé against a job description."""
    return service.analyze_resume(user, resume_id, data.job_description, invoker)


@router.post("/{resume_id}/format", response_model=ResumeResponse)
def change_format(
    resume_id: str,
    data: ResumeFormatRequest,
    user: User = Depends(get_current_user),
    service: ResumeService = Depends(get_resume_service),
):
    """Create a new version of the résumé in another format."""
    return ResumeResponse.model_validate(service.change_format(user, resume_id, data.format))
