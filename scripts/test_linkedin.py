"""
Tests for LinkedIn profile generation.

Usage: pytest scripts/test_linkedin.py
"""

from backend.ai import ContentType, GenerationInvoker
from backend.db import LinkedInProfile
from backend.services import LinkedInService


def test_generate_profile_twice_keeps_one_row(client, db, make, headers, fake_llm, replies, valid_output):
    user = make.user(credits=2)
    resume = make.resume(user, content="Fifteen years of distributed systems.")
    first = valid_output(ContentType.LINKEDIN_PROFILE)
    second = valid_output(ContentType.LINKEDIN_PROFILE)
    second["headline"] = "Platform engineering executive"
    fake_llm.queue(replies.tool(first), replies.tool(second))

    created = client.post("/linkedin/profile", json={"resume_id": resume.id}, headers=headers(user))
    updated = client.post(
        "/linkedin/profile",
        json={"resume_id": resume.id, "current_profile": {"headline": created.json()["headline"]}},
        headers=headers(user),
    )

    assert created.status_code == 200
    assert updated.status_code == 200
    assert updated.json()["id"] == created.json()["id"]
    assert updated.json()["headline"] == "Platform engineering executive"
    assert db.query(LinkedInProfile).count() == 1

    prompt = fake_llm.calls[1]["messages"][1].content
    assert "Fifteen years of distributed systems." in prompt
    assert 'Current LinkedIn profile: {"headline": "Engineering leader scaling platform teams"}' in prompt

    db.refresh(user)
    assert user.credits == 0


def test_get_profile(client, make, headers, fake_llm, replies, valid_output):
    user = make.user()
    resume = make.resume(user)

    assert client.get("/linkedin/profile", headers=headers(user)).status_code == 404

    fake_llm.queue(replies.tool(valid_output(ContentType.LINKEDIN_PROFILE)))
    client.post("/linkedin/profile", json={"resume_id": resume.id}, headers=headers(user))

    response = client.get("/linkedin/profile", headers=headers(user))
    assert response.status_code == 200
    assert response.json()["keywords"] == ["engineering leadership", "platform"]
    assert response.json()["sections"]["skills"] == ["Leadership", "Distributed systems"]


def test_generate_profile_from_foreign_resume(client, make, headers, fake_llm):
    owner = make.user()
    other = make.user()
    resume = make.resume(owner)

    response = client.post("/linkedin/profile", json={"resume_id": resume.id}, headers=headers(other))

    assert response.status_code == 403
    assert fake_llm.calls == []


def test_concurrent_first_generation_updates_the_winning_row(db, make, fake_llm, replies, valid_output):
    user = make.user(credits=1)
    resume = make.resume(user)
    db.add(LinkedInProfile(user_id=user.id, headline="Written by a concurrent request"))
    db.commit()

    service = LinkedInService(db)
    lookups = []
    real_get_for_user = service.profiles.get_for_user

    def get_for_user_before_other_commit(user_id):
        # The first lookup runs before the concurrent insert is visible
        lookups.append(user_id)
        return None if len(lookups) == 1 else real_get_for_user(user_id)

    service.profiles.get_for_user = get_for_user_before_other_commit
    fake_llm.queue(replies.tool(valid_output(ContentType.LINKEDIN_PROFILE)))

    profile = service.generate_profile(user, resume.id, GenerationInvoker(fake_llm))

    assert profile.headline == "Engineering leader scaling platform teams"
    assert len(lookups) == 2
    assert db.query(LinkedInProfile).count() == 1
    db.refresh(user)
    assert user.credits == 0
