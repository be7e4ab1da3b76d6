"""
Tests for financial plan generation.

Usage: pytest scripts/test_financial.py
"""

from backend.ai import ContentType


def test_generate_plan(client, db, make, headers, fake_llm, replies, valid_output):
    user = make.user(credits=1)
    fake_llm.queue(replies.tool(valid_output(ContentType.FINANCIAL_PLAN)))

    response = client.post(
        "/financial/plan",
        json={
            "current_salary": 150000,
            "target_salary": 185000.5,
            "industry": "Fintech",
            "location": "New York",
            "years_of_experience": 8,
            "financial_goals": ["Buy a home", "Retire early"],
        },
        headers=headers(user),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["salary_analysis"]["market_rate"]["median"] == 180000
    assert body["career_growth_plan"]["milestones"][0]["title"] == "Director"

    prompt = fake_llm.calls[0]["messages"][1].content
    assert "in the Fintech industry with 8 years of experience, located in New York." in prompt
    assert "Current salary: $150000. Target salary: $185000.5." in prompt
    assert "Financial goals: Buy a home, Retire early." in prompt
    assert "Current benefits" not in prompt

    db.refresh(user)
    assert user.credits == 0


def test_generate_plan_without_credits(client, make, headers, fake_llm):
    user = make.user(credits=0)

    response = client.post(
        "/financial/plan",
        json={
            "current_salary": 100000,
            "target_salary": 120000,
            "industry": "Retail",
            "location": "Denver",
            "years_of_experience": 3,
        },
        headers=headers(user),
    )

    assert response.status_code == 402
    assert fake_llm.calls == []
