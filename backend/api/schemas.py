"""API request/response schemas."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field


# User schemas
class UserCreate(BaseModel):
    email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")


class UserResponse(BaseModel):
    id: str
    email: str
    credits: int
    subscription_status: str | None
    subscription_plan: str | None
    created_at: datetime

    class Config:
        from_attributes = True


class SubscriptionUpdate(BaseModel):
    action: Literal["cancel", "reactivate"]


class CreditGrant(BaseModel):
    user_id: str
    credits: int = Field(default=0, ge=0)
    subscription_status: str | None = Field(default=None, description="e.g. active, past_due, canceled")
    subscription_plan: str | None = None


# Interview schemas
class InterviewCreate(BaseModel):
    job_application_id: str
    type: str = Field(..., min_length=1, description="e.g. behavioral, technical")


class InterviewQuestionResponse(BaseModel):
    id: str
    position: int
    question: str
    category: str
    difficulty: str
    answer: str | None
    feedback: str | None
    score: float | None

    class Config:
        from_attributes = True


class InterviewResponse(BaseModel):
    id: str
    job_application_id: str
    type: str
    questions: list[InterviewQuestionResponse]
    created_at: datetime

    class Config:
        from_attributes = True


class InterviewListResponse(BaseModel):
    interviews: list[InterviewResponse]


class AnswerSubmit(BaseModel):
    question_id: str
    answer: str = Field(..., min_length=1)


class CompanyResearchRequest(BaseModel):
    company_name: str = Field(..., min_length=1)
    industry: str = Field(..., min_length=1)


# Interview guide schemas
class InterviewGuideCreate(BaseModel):
    job_id: str | None = None
    job_title: str | None = None
    company_name: str | None = None
    job_description: str | None = None
    resume_id: str | None = None


class InterviewGuideResponse(BaseModel):
    id: str
    job_id: str | None
    resume_id: str | None
    job_title: str
    company_name: str
    content: dict[str, Any]
    used_fallback: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class InterviewGuideListResponse(BaseModel):
    guides: list[InterviewGuideResponse]


# LinkedIn schemas
class LinkedInProfileCreate(BaseModel):
    resume_id: str
    current_profile: dict[str, Any] | None = Field(
        default=None, description="Existing headline, summary and sections to improve on"
    )


class LinkedInProfileResponse(BaseModel):
    id: str
    headline: str
    summary: str
    sections: dict[str, Any]
    keywords: list[str]
    optimization_score: float
    updated_at: datetime

    class Config:
        from_attributes = True


# Resume schemas
class ResumeCreate(BaseModel):
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)


class ResumeResponse(BaseModel):
    id: str
    title: str
    content: str
    format: str
    version: int
    analysis: dict[str, Any] | None
    created_at: datetime

    class Config:
        from_attributes = True


class ResumeListResponse(BaseModel):
    resumes: list[ResumeResponse]


class ResumeAnalysisRequest(BaseModel):
    job_description: str = Field(..., min_length=1)


class ResumeFormatRequest(BaseModel):
    format: str


# Financial schemas
class FinancialPlanRequest(BaseModel):
    current_salary: float = Field(..., ge=0)
    target_salary: float = Field(..., ge=0)
    industry: str
    location: str
    years_of_experience: int = Field(..., ge=0)
    current_benefits: list[str] | None = None
    desired_benefits: list[str] | None = None
    financial_goals: list[str] | None = None


# Job schemas
class JobSearchFilters(BaseModel):
    work_type: str | None = Field(default=None, description="full_time/part_time/contract/all")
    date_posted: str | None = None
    min_salary: int | None = None
    max_salary: int | None = None


class JobSearchRequest(BaseModel):
    query: str = Field(..., min_length=1)
    location: str = ""
    radius: int = Field(default=25, ge=0)
    filters: JobSearchFilters = Field(default_factory=JobSearchFilters)
    page_token: str | None = None


class JobResponse(BaseModel):
    id: str
    title: str
    company: str
    location: str
    description: str
    requirements: str
    salary: dict[str, Any] | None
    application_url: str
    source: str
    created_at: datetime

    class Config:
        from_attributes = True


class JobSearchResponse(BaseModel):
    jobs: list[JobResponse]
    total_count: int
    next_page_token: str | None = None


# Application schemas
class ApplicationCreate(BaseModel):
    job_id: str
    resume_id: str | None = None
    status: str = "applied"


class ApplicationUpdate(BaseModel):
    status: str | None = None
    notes: str | None = None


class ApplicationResponse(BaseModel):
    id: str
    job_id: str
    resume_id: str | None
    status: str
    notes: str
    job: JobResponse
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ApplicationListResponse(BaseModel):
    applications: list[ApplicationResponse]
