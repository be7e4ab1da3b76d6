"""Résumé storage, analysis and format versions."""

import logging

from sqlalchemy.orm import Session

from backend.ai import ContentType, GenerationInvoker
from backend.ai.schemas import ResumeAnalysis
from backend.db.repositories import ResumeRepository, UserRepository
from backend.db.tables import InterviewGuide, JobApplication, Resume, User
from backend.errors import BadRequest
from backend.services.base import require_owned, run_generation
from backend.services.billing import charge_for_generation, ensure_can_generate, generation_unit_of_work
from backend.tools.pdf_parser import parse_pdf

logger = logging.getLogger(__name__)

MAX_UPLOAD_SIZE = 10 * 1024 * 1024  # 10 MB
RESUME_FORMATS = {"standard", "chronological", "functional", "combination", "executive"}


class ResumeService:
    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.resumes = ResumeRepository(db)

    def create_resume(self, user: User, title: str, content: str) -> Resume:
        resume = self.resumes.create(user.id, title, content)
        self.db.commit()
        return resume

    def upload_resume(self, user: User, title: str, filename: str, data: bytes) -> Resume:
        """Store a résumé from an uploaded PDF."""
        if not filename.lower().endswith(".pdf"):
            raise BadRequest("Only PDF files are supported")
        if len(data) > MAX_UPLOAD_SIZE:
            raise BadRequest("File too large. Maximum size is 10 MB.")

        content = parse_pdf(data)
        if not content.strip():
            raise BadRequest("No text could be extracted from the PDF")

        logger.info("Extracted %d characters from %s", len(content), filename)
        return self.create_resume(user, title or filename.rsplit(".", 1)[0], content)

    def list_resumes(self, user: User) -> list[Resume]:
        return self.resumes.list_for_user(user.id)

    def get_resume(self, user: User, resume_id: str) -> Resume:
        return require_owned(self.resumes.get(resume_id), user, "Resume")

    def delete_resume(self, user: User, resume_id: str) -> None:
        resume = self.get_resume(user, resume_id)

        # Applications and guides outlive the résumé they were made with
        self.db.query(JobApplication).filter(JobApplication.resume_id == resume.id).update(
            {JobApplication.resume_id: None}, synchronize_session=False
        )
        self.db.query(InterviewGuide).filter(InterviewGuide.resume_id == resume.id).update(
            {InterviewGuide.resume_id: None}, synchronize_session=False
        )
        self.resumes.delete(resume)
        self.db.commit()

    def analyze_resume(
        self,
        user: User,
        resume_id: str,
        job_description: str,
        invoker: GenerationInvoker,
    ) -> ResumeAnalysis:
        """Analyze a résumé against a job description and keep the latest analysis on it."""
        resume = self.get_resume(user, resume_id)
        ensure_can_generate(user)

        output = run_generation(
            invoker,
            ContentType.RESUME_ANALYSIS,
            {"job_description": job_description, "resume_content": resume.content},
        )

        with generation_unit_of_work(self.db):
            charge_for_generation(self.users, user, output.used_fallback)
            resume.analysis = output.data.model_dump()
            self.db.flush()
        return output.data

    def change_format(self, user: User, resume_id: str, format: str) -> Resume:
        """Create the next version of a résumé in another format."""
        resume = self.get_resume(user, resume_id)
        if format not in RESUME_FORMATS:
            raise BadRequest(f"Unsupported format: {format}")

        new_resume = self.resumes.create(
            user.id,
            title=f"{resume.title} ({format} format)",
            content=resume.content,
            format=format,
            version=resume.version + 1,
        )
        self.db.commit()
        return new_resume
