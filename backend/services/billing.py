"""
Credits and subscriptions.

A generation costs one credit unless the user has an active subscription.
Entitlement is checked before the provider call; the credit itself is taken
only after a successful generation, in the same transaction as the entity
write.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.orm import Session

from backend.db.repositories import UserRepository
from backend.db.tables import User
from backend.errors import BadRequest, NotFound, PaymentRequired

logger = logging.getLogger(__name__)

ACTIVE_SUBSCRIPTION_STATUSES = {"active", "trialing", "cancel_at_period_end"}


def has_active_subscription(user: User) -> bool:
    return user.subscription_status in ACTIVE_SUBSCRIPTION_STATUSES


def ensure_can_generate(user: User) -> None:
    """Raise PaymentRequired when the user can pay neither by credit nor subscription."""
    if has_active_subscription(user):
        return
    if user.credits <= 0:
        logger.info("Refusing generation for user %s: no credits", user.id)
        raise PaymentRequired("You need to purchase more credits or subscribe")


def charge_for_generation(users: UserRepository, user: User, used_fallback: bool = False) -> None:
    """Take one credit for a successful generation.

    Subscribers are not charged, and neither is mock content served in place
    of a failed generation.
    """
    if has_active_subscription(user) or used_fallback:
        return
    if not users.consume_credit(user.id):
        logger.info("Credit charge refused for user %s: balance exhausted", user.id)
        raise PaymentRequired("You need to purchase more credits or subscribe")
    logger.info("Charged one credit to user %s", user.id)


@contextmanager
def generation_unit_of_work(db: Session) -> Iterator[Session]:
    """Commit the charge and the entity write together, or neither."""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


class BillingService:
    """Subscription changes and purchases recorded by the payment gateway."""

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)

    def update_subscription(self, user: User, action: str) -> User:
        """Cancel at period end, or undo a pending cancellation."""
        if action == "cancel":
            if user.subscription_status not in ("active", "trialing"):
                raise BadRequest("No active subscription to cancel")
            user.subscription_status = "cancel_at_period_end"
        elif action == "reactivate":
            if user.subscription_status != "cancel_at_period_end":
                raise BadRequest("Only a subscription pending cancellation can be reactivated")
            user.subscription_status = "active"
        else:
            raise BadRequest(f"Unknown subscription action: {action}")

        self.db.commit()
        logger.info("Subscription of user %s is now %s", user.id, user.subscription_status)
        return user

    def apply_grant(
        self,
        user_id: str,
        credits: int = 0,
        subscription_status: str | None = None,
        subscription_plan: str | None = None,
    ) -> User:
        """Add purchased credits and/or set the subscription state of a user."""
        user = self.users.get(user_id)
        if user is None:
            raise NotFound("User not found")

        if credits:
            self.users.add_credits(user.id, credits)
        if subscription_status is not None:
            user.subscription_status = subscription_status
        if subscription_plan is not None:
            user.subscription_plan = subscription_plan
        self.db.commit()
        self.db.refresh(user)

        logger.info(
            "Granted %d credits to user %s (subscription=%s)", credits, user.id, user.subscription_status
        )
        return user
