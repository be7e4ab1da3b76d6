"""
Mock interviews, answer feedback, company research and preparation guides.
"""

import logging

from sqlalchemy.orm import Session

from backend.ai import ContentType, GenerationInvoker
from backend.ai.schemas import QUESTIONS_PER_INTERVIEW, AnswerFeedback, CompanyResearch
from backend.db.repositories import (
    InterviewGuideRepository,
    InterviewRepository,
    JobApplicationRepository,
    JobRepository,
    ResumeRepository,
    UserRepository,
)
from backend.db.tables import Interview, InterviewGuide, User
from backend.errors import BadRequest, NotFound
from backend.services.base import require_owned, run_generation
from backend.services.billing import charge_for_generation, ensure_can_generate, generation_unit_of_work

logger = logging.getLogger(__name__)


class InterviewService:
    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.applications = JobApplicationRepository(db)
        self.interviews = InterviewRepository(db)

    def create_mock_interview(
        self,
        user: User,
        job_application_id: str,
        interview_type: str,
        invoker: GenerationInvoker,
    ) -> Interview:
        """Generate questions for a job application and store them as a new interview."""
        application = require_owned(self.applications.get(job_application_id), user, "Job application")
        ensure_can_generate(user)

        job = application.job
        output = run_generation(
            invoker,
            ContentType.INTERVIEW_QUESTIONS,
            {
                "count": str(QUESTIONS_PER_INTERVIEW),
                "interview_type": interview_type,
                "job_title": job.title,
                "company": job.company,
                "job_description": job.description,
            },
        )
        questions = [q.model_dump() for q in output.data.questions[:QUESTIONS_PER_INTERVIEW]]

        with generation_unit_of_work(self.db):
            charge_for_generation(self.users, user, output.used_fallback)
            interview = self.interviews.create(user.id, application.id, interview_type, questions)

        logger.info("Created %s interview %s with %d questions", interview_type, interview.id, len(questions))
        return interview

    def submit_answer(
        self,
        user: User,
        interview_id: str,
        question_id: str,
        answer: str,
        invoker: GenerationInvoker,
    ) -> AnswerFeedback:
        """Store an answer and the generated feedback on the question."""
        interview = require_owned(self.interviews.get(interview_id), user, "Interview")
        question = self.interviews.get_question(question_id)
        if question is None or question.interview_id != interview.id:
            raise NotFound("Question not found")

        ensure_can_generate(user)

        job = interview.job_application.job
        output = run_generation(
            invoker,
            ContentType.ANSWER_FEEDBACK,
            {
                "question": question.question,
                "answer": answer,
                "job_title": job.title,
                "company": job.company,
            },
        )
        feedback: AnswerFeedback = output.data

        with generation_unit_of_work(self.db):
            charge_for_generation(self.users, user, output.used_fallback)
            question.answer = answer
            question.feedback = feedback.feedback
            question.score = feedback.score
            self.db.flush()

        return feedback

    def research_company(
        self,
        user: User,
        company_name: str,
        industry: str,
        invoker: GenerationInvoker,
    ) -> CompanyResearch:
        ensure_can_generate(user)
        output = run_generation(
            invoker,
            ContentType.COMPANY_RESEARCH,
            {"company_name": company_name, "industry": industry},
        )
        with generation_unit_of_work(self.db):
            charge_for_generation(self.users, user, output.used_fallback)
        return output.data

    def list_interviews(self, user: User) -> list[Interview]:
        return self.interviews.list_for_user(user.id)

    def get_interview(self, user: User, interview_id: str) -> Interview:
        return require_owned(self.interviews.get(interview_id), user, "Interview")

    def delete_interview(self, user: User, interview_id: str) -> None:
        interview = self.get_interview(user, interview_id)
        self.interviews.delete(interview)
        self.db.commit()


class InterviewGuideService:
    """Interview preparation guides, generated in free-text mode."""

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.jobs = JobRepository(db)
        self.resumes = ResumeRepository(db)
        self.guides = InterviewGuideRepository(db)

    def generate_guide(
        self,
        user: User,
        invoker: GenerationInvoker,
        job_id: str | None = None,
        job_title: str | None = None,
        company_name: str | None = None,
        job_description: str | None = None,
        resume_id: str | None = None,
    ) -> InterviewGuide:
        """
        Generate and store a preparation guide.

        The job is either a stored job (``job_id``) or given inline by title,
        company and description. Inline values override the stored job's.
        """
        if job_id:
            job = self.jobs.get(job_id)
            if job is None:
                raise NotFound("Job not found")
            job_title = job_title or job.title
            company_name = company_name or job.company
            job_description = job_description or job.description

        if not (job_title and company_name and job_description):
            raise BadRequest("Job title, company name and job description are required")

        resume_section = ""
        if resume_id:
            resume = require_owned(self.resumes.get(resume_id), user, "Resume")
            resume_section = f"Resume Content: {resume.content}"

        ensure_can_generate(user)
        output = run_generation(
            invoker,
            ContentType.INTERVIEW_GUIDE,
            {
                "job_title": job_title,
                "company_name": company_name,
                "job_description": job_description,
                "resume_section": resume_section,
            },
            structured=False,
        )

        with generation_unit_of_work(self.db):
            charge_for_generation(self.users, user, output.used_fallback)
            guide = self.guides.create(
                user_id=user.id,
                job_id=job_id,
                resume_id=resume_id,
                job_title=job_title,
                company_name=company_name,
                content=output.data.model_dump(),
                used_fallback=output.used_fallback,
            )
        return guide

    def list_guides(self, user: User, job_id: str | None = None) -> list[InterviewGuide]:
        return self.guides.list_for_user(user.id, job_id=job_id)

    def get_guide(self, user: User, guide_id: str) -> InterviewGuide:
        return require_owned(self.guides.get(guide_id), user, "Interview guide")

    def delete_guide(self, user: User, guide_id: str) -> None:
        guide = self.get_guide(user, guide_id)
        self.guides.delete(guide)
        self.db.commit()
