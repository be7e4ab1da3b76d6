"""
Service layer.

Each service wraps the request's session and its repositories. Generation
methods check entitlement before the provider call and charge the credit in
the same transaction as the entity write.
"""

from backend.services.billing import BillingService
from backend.services.financial import FinancialService
from backend.services.interviews import InterviewGuideService, InterviewService
from backend.services.jobs import JobService
from backend.services.linkedin import LinkedInService
from backend.services.resumes import ResumeService
from backend.services.users import UserService

__all__ = [
    "BillingService",
    "FinancialService",
    "InterviewGuideService",
    "InterviewService",
    "JobService",
    "LinkedInService",
    "ResumeService",
    "UserService",
]
