"""
FastAPI dependencies.

Services are built per request on the request's session. The caller is
identified by the X-User-ID header set by the hosted auth layer.
"""

import secrets

from fastapi import Depends, Header
from langchain_core.language_models import BaseChatModel
from sqlalchemy.orm import Session

from backend.ai import GenerationInvoker
from backend.ai.llm import get_chat_model
from backend.config import settings
from backend.db import User, get_db
from backend.db.repositories import UserRepository
from backend.errors import AuthRequired, ConfigurationError, Forbidden
from backend.services import (
    BillingService,
    FinancialService,
    InterviewGuideService,
    InterviewService,
    JobService,
    LinkedInService,
    ResumeService,
    UserService,
)


def get_current_user(
    db: Session = Depends(get_db),
    x_user_id: str | None = Header(None, alias="X-User-ID"),
) -> User:
    """Resolve the calling user. Missing header or unknown user is a 401."""
    if not x_user_id:
        raise AuthRequired("You must be logged in")
    user = UserRepository(db).get(x_user_id)
    if user is None:
        raise AuthRequired("You must be logged in")
    return user


def get_invoker(chat_model: BaseChatModel = Depends(get_chat_model)) -> GenerationInvoker:
    return GenerationInvoker(chat_model)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


def get_interview_service(db: Session = Depends(get_db)) -> InterviewService:
    return InterviewService(db)


def get_guide_service(db: Session = Depends(get_db)) -> InterviewGuideService:
    return InterviewGuideService(db)


def get_linkedin_service(db: Session = Depends(get_db)) -> LinkedInService:
    return LinkedInService(db)


def get_resume_service(db: Session = Depends(get_db)) -> ResumeService:
    return ResumeService(db)


def get_financial_service(db: Session = Depends(get_db)) -> FinancialService:
    return FinancialService(db)


def get_job_service(db: Session = Depends(get_db)) -> JobService:
    return JobService(db)


def get_billing_service(db: Session = Depends(get_db)) -> BillingService:
    return BillingService(db)


def require_billing_secret(x_billing_secret: str | None = Header(None, alias="X-Billing-Secret")) -> None:
    """Only the payment gateway integration may grant credits."""
    if not settings.billing_secret:
        raise ConfigurationError("Billing secret not configured")
    if not x_billing_secret or not secrets.compare_digest(x_billing_secret, settings.billing_secret):
        raise Forbidden("Invalid billing secret")
