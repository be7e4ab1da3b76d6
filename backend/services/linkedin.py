"""LinkedIn profile generation."""

import json
import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.ai import ContentType, GenerationInvoker
from backend.db.repositories import LinkedInProfileRepository, ResumeRepository, UserRepository
from backend.db.tables import LinkedInProfile, User
from backend.errors import NotFound
from backend.services.base import require_owned, run_generation
from backend.services.billing import charge_for_generation, ensure_can_generate, generation_unit_of_work

logger = logging.getLogger(__name__)


class LinkedInService:
    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.resumes = ResumeRepository(db)
        self.profiles = LinkedInProfileRepository(db)

    def generate_profile(
        self,
        user: User,
        resume_id: str,
        invoker: GenerationInvoker,
        current_profile: dict[str, Any] | None = None,
    ) -> LinkedInProfile:
        """Generate a profile from a résumé and store it as the user's only profile."""
        resume = require_owned(self.resumes.get(resume_id), user, "Resume")
        ensure_can_generate(user)

        current = ""
        if current_profile:
            current = f"\n\nCurrent LinkedIn profile: {json.dumps(current_profile)}"

        output = run_generation(
            invoker,
            ContentType.LINKEDIN_PROFILE,
            {"resume_content": resume.content, "current_profile": current},
        )

        data = output.data.model_dump()
        try:
            profile = self._save(user, data, output.used_fallback)
        except IntegrityError:
            # A concurrent first generation inserted the row; update it instead
            logger.info("LinkedIn profile for user %s created concurrently, retrying as update", user.id)
            profile = self._save(user, data, output.used_fallback)
        return profile

    def _save(self, user: User, data: dict[str, Any], used_fallback: bool) -> LinkedInProfile:
        with generation_unit_of_work(self.db):
            charge_for_generation(self.users, user, used_fallback)
            return self.profiles.upsert(user.id, data)

    def get_profile(self, user: User) -> LinkedInProfile:
        profile = self.profiles.get_for_user(user.id)
        if profile is None:
            raise NotFound("LinkedIn profile not found")
        return profile
