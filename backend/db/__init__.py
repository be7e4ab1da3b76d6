"""Database package."""

from backend.db.base import Base, get_db, init_db
from backend.db.tables import (
    Interview,
    InterviewGuide,
    InterviewQuestion,
    Job,
    JobApplication,
    LinkedInProfile,
    Resume,
    User,
)

__all__ = [
    "Base",
    "get_db",
    "init_db",
    "User",
    "Job",
    "JobApplication",
    "Resume",
    "Interview",
    "InterviewQuestion",
    "LinkedInProfile",
    "InterviewGuide",
]
