"""User registration."""

import logging

from sqlalchemy.orm import Session

from backend.config import settings
from backend.db.repositories import UserRepository
from backend.db.tables import User
from backend.errors import BadRequest

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)

    def register(self, email: str) -> User:
        """Create a user with the signup credit allowance."""
        email = email.strip().lower()
        if self.users.get_by_email(email):
            raise BadRequest("A user with this email already exists")

        user = self.users.create(email, credits=settings.signup_credits)
        self.db.commit()
        logger.info("Registered user %s with %d credits", user.id, user.credits)
        return user
