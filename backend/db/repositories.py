"""
Repositories over the database tables.

Each repository wraps the request's session and exposes only the queries the
service layer needs. Repositories add and flush but never commit; the caller
owns the transaction.
"""

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import update
from sqlalchemy.orm import Session

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


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: str) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def create(self, email: str, credits: int) -> User:
        user = User(email=email, credits=credits)
        self.db.add(user)
        self.db.flush()
        return user

    def consume_credit(self, user_id: str) -> bool:
        """Take one credit if the user still has one.

        The balance check and the decrement are a single conditional UPDATE,
        so two requests racing on the last credit cannot both succeed.
        """
        result = self.db.execute(
            update(User)
            .where(User.id == user_id, User.credits > 0)
            .values(credits=User.credits - 1)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    def add_credits(self, user_id: str, amount: int) -> bool:
        """Increment the balance in the database, not from a possibly stale read."""
        result = self.db.execute(
            update(User)
            .where(User.id == user_id)
            .values(credits=User.credits + amount)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1


class JobRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, job_id: str) -> Job | None:
        return self.db.query(Job).filter(Job.id == job_id).first()

    def get_or_create(self, posting: dict[str, Any]) -> Job:
        """Return the stored job matching title, company and location, creating it if new."""
        existing = (
            self.db.query(Job)
            .filter(
                Job.title == posting["title"],
                Job.company == posting["company"],
                Job.location == posting.get("location", ""),
            )
            .first()
        )
        if existing:
            return existing

        job = Job(
            title=posting["title"],
            company=posting["company"],
            location=posting.get("location", ""),
            description=posting.get("description", ""),
            requirements=posting.get("requirements", ""),
            salary=posting.get("salary"),
            application_url=posting.get("application_url", ""),
            source=posting.get("source", "google"),
        )
        self.db.add(job)
        self.db.flush()
        return job


class JobApplicationRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, application_id: str) -> JobApplication | None:
        return self.db.query(JobApplication).filter(JobApplication.id == application_id).first()

    def find(self, user_id: str, job_id: str) -> JobApplication | None:
        return (
            self.db.query(JobApplication)
            .filter(JobApplication.user_id == user_id, JobApplication.job_id == job_id)
            .first()
        )

    def list_for_user(self, user_id: str, status: str | None = None) -> list[JobApplication]:
        query = self.db.query(JobApplication).filter(JobApplication.user_id == user_id)
        if status:
            query = query.filter(JobApplication.status == status)
        return query.order_by(JobApplication.created_at.desc()).all()

    def create(self, user_id: str, job_id: str, resume_id: str | None, status: str) -> JobApplication:
        application = JobApplication(user_id=user_id, job_id=job_id, resume_id=resume_id, status=status)
        self.db.add(application)
        self.db.flush()
        return application

    def delete(self, application: JobApplication) -> None:
        self.db.delete(application)
        self.db.flush()


class ResumeRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, resume_id: str) -> Resume | None:
        return self.db.query(Resume).filter(Resume.id == resume_id).first()

    def list_for_user(self, user_id: str) -> list[Resume]:
        return (
            self.db.query(Resume)
            .filter(Resume.user_id == user_id)
            .order_by(Resume.created_at.desc())
            .all()
        )

    def create(self, user_id: str, title: str, content: str, format: str = "standard", version: int = 1) -> Resume:
        resume = Resume(user_id=user_id, title=title, content=content, format=format, version=version)
        self.db.add(resume)
        self.db.flush()
        return resume

    def delete(self, resume: Resume) -> None:
        self.db.delete(resume)
        self.db.flush()


class InterviewRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, interview_id: str) -> Interview | None:
        return self.db.query(Interview).filter(Interview.id == interview_id).first()

    def get_question(self, question_id: str) -> InterviewQuestion | None:
        return self.db.query(InterviewQuestion).filter(InterviewQuestion.id == question_id).first()

    def list_for_user(self, user_id: str) -> list[Interview]:
        return (
            self.db.query(Interview)
            .filter(Interview.user_id == user_id)
            .order_by(Interview.created_at.desc())
            .all()
        )

    def create(
        self,
        user_id: str,
        job_application_id: str,
        type: str,
        questions: list[dict[str, Any]],
    ) -> Interview:
        """Insert a new interview with its questions. Never updates an existing one."""
        interview = Interview(user_id=user_id, job_application_id=job_application_id, type=type)
        interview.questions = [
            InterviewQuestion(
                position=i,
                question=q["question"],
                category=q["category"],
                difficulty=q["difficulty"],
            )
            for i, q in enumerate(questions)
        ]
        self.db.add(interview)
        self.db.flush()
        return interview

    def delete(self, interview: Interview) -> None:
        self.db.delete(interview)
        self.db.flush()


class LinkedInProfileRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_for_user(self, user_id: str) -> LinkedInProfile | None:
        return self.db.query(LinkedInProfile).filter(LinkedInProfile.user_id == user_id).first()

    def upsert(self, user_id: str, data: dict[str, Any]) -> LinkedInProfile:
        """Update the user's profile in place, or create it on first generation."""
        profile = self.get_for_user(user_id)
        if profile is None:
            profile = LinkedInProfile(user_id=user_id)
            self.db.add(profile)

        profile.headline = data["headline"]
        profile.summary = data["summary"]
        profile.sections = data["sections"]
        profile.keywords = data["keywords"]
        profile.optimization_score = data["optimization_score"]
        profile.updated_at = datetime.now(UTC)
        self.db.flush()
        return profile


class InterviewGuideRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, guide_id: str) -> InterviewGuide | None:
        return self.db.query(InterviewGuide).filter(InterviewGuide.id == guide_id).first()

    def list_for_user(self, user_id: str, job_id: str | None = None) -> list[InterviewGuide]:
        query = self.db.query(InterviewGuide).filter(InterviewGuide.user_id == user_id)
        if job_id:
            query = query.filter(InterviewGuide.job_id == job_id)
        return query.order_by(InterviewGuide.created_at.desc()).all()

    def create(self, **fields: Any) -> InterviewGuide:
        guide = InterviewGuide(**fields)
        self.db.add(guide)
        self.db.flush()
        return guide

    def delete(self, guide: InterviewGuide) -> None:
        self.db.delete(guide)
        self.db.flush()
