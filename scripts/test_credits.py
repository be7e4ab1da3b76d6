"""
Tests for credit entitlement and charging.

Usage: pytest scripts/test_credits.py
"""

import pytest

from backend.ai import ContentType, GenerationInvoker
from backend.db import Interview, User
from backend.db.repositories import UserRepository
from backend.errors import PaymentRequired
from backend.services import InterviewService
from backend.services.billing import charge_for_generation, ensure_can_generate, has_active_subscription


@pytest.mark.parametrize("status", ["active", "trialing", "cancel_at_period_end"])
def test_active_subscriptions(status):
    assert has_active_subscription(User(email="a@b.c", credits=0, subscription_status=status))


@pytest.mark.parametrize("status", [None, "canceled", "past_due", "incomplete"])
def test_inactive_subscriptions(status):
    user = User(email="a@b.c", credits=0, subscription_status=status)

    assert not has_active_subscription(user)
    with pytest.raises(PaymentRequired):
        ensure_can_generate(user)


def test_subscriber_is_not_charged(client, db, make, headers, fake_llm, replies, valid_output):
    user = make.user(credits=0, subscription_status="active")
    fake_llm.queue(replies.tool(valid_output(ContentType.COMPANY_RESEARCH)))

    response = client.post(
        "/interviews/company-research",
        json={"company_name": "Acme", "industry": "Aerospace"},
        headers=headers(user),
    )

    assert response.status_code == 200
    db.refresh(user)
    assert user.credits == 0


def test_charge_refused_when_balance_is_gone(db, make):
    user = make.user(credits=0)

    with pytest.raises(PaymentRequired):
        charge_for_generation(UserRepository(db), user)


def test_fallback_output_is_not_charged(db, make):
    user = make.user(credits=1)

    charge_for_generation(UserRepository(db), user, used_fallback=True)
    db.commit()

    db.refresh(user)
    assert user.credits == 1


def test_last_credit_race_charges_once(session_factory, make, fake_llm, replies, valid_output):
    """Two generations pass the entitlement check on the last credit; only one is charged."""
    owner = make.user(credits=1)
    application = make.application(owner)
    first_session = session_factory()
    second_session = session_factory()

    def run_competing_generation(messages):
        competitor = second_session.get(User, owner.id)
        InterviewService(second_session).create_mock_interview(
            competitor, application.id, "technical", GenerationInvoker(fake_llm)
        )
        return replies.tool(valid_output(ContentType.INTERVIEW_QUESTIONS))

    fake_llm.queue(run_competing_generation, replies.tool(valid_output(ContentType.INTERVIEW_QUESTIONS)))

    try:
        user = first_session.get(User, owner.id)
        with pytest.raises(PaymentRequired):
            InterviewService(first_session).create_mock_interview(
                user, application.id, "behavioral", GenerationInvoker(fake_llm)
            )
    finally:
        first_session.close()
        second_session.close()

    check = session_factory()
    try:
        assert check.get(User, owner.id).credits == 0
        interviews = check.query(Interview).all()
        assert [i.type for i in interviews] == ["technical"]
    finally:
        check.close()
