"""
Shared fixtures: a SQLite database per test, a fake chat model, and a
TestClient wired to both.

No test reaches the network: the chat model is replaced through the
get_chat_model dependency and job search through httpx monkeypatching.
"""

import copy
from typing import Any

import pytest
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from backend.ai.llm import get_chat_model
from backend.ai.prompts import ContentType
from backend.api.app import app
from backend.api.limiter import limiter
from backend.db import Base, Job, JobApplication, Resume, User, get_db
from backend.tools.google_jobs import clear_search_cache


class FakeChatModel:
    """Stands in for ChatOpenAI.

    Replies are queued as AIMessages, exceptions to raise, or callables that
    receive the messages and return either.
    """

    model_name = "fake-gpt"

    def __init__(self):
        self.replies: list[Any] = []
        self.calls: list[dict] = []

    def queue(self, *replies: Any) -> None:
        self.replies.extend(replies)

    def bind_tools(self, tools, **kwargs):
        return _BoundModel(self, {"tools": tools, **kwargs})

    def bind(self, **kwargs):
        return _BoundModel(self, kwargs)

    def _invoke(self, messages, kwargs):
        self.calls.append({"messages": messages, **kwargs})
        if not self.replies:
            raise RuntimeError("No reply queued for the fake chat model")
        reply = self.replies.pop(0)
        if callable(reply):
            reply = reply(messages)
        if isinstance(reply, Exception):
            raise reply
        return reply


class _BoundModel:
    def __init__(self, model: FakeChatModel, kwargs: dict):
        self.model = model
        self.kwargs = kwargs

    def invoke(self, messages):
        return self.model._invoke(messages, self.kwargs)


def tool_reply(args: dict, name: str = "tool") -> AIMessage:
    return AIMessage(content="", tool_calls=[{"name": name, "args": args, "id": "call_1"}])


def invalid_tool_reply(raw_args: str, name: str = "tool") -> AIMessage:
    return AIMessage(
        content="",
        invalid_tool_calls=[{"name": name, "args": raw_args, "id": "call_1", "error": "Invalid JSON"}],
    )


def text_reply(text: str) -> AIMessage:
    return AIMessage(content=text)


class Replies:
    tool = staticmethod(tool_reply)
    invalid_tool = staticmethod(invalid_tool_reply)
    text = staticmethod(text_reply)


@pytest.fixture
def replies():
    return Replies


VALID_OUTPUTS: dict[ContentType, dict] = {
    ContentType.INTERVIEW_QUESTIONS: {
        "questions": [
            {"question": "Tell me about a time you resolved a conflict.", "category": "teamwork", "difficulty": "easy"},
            {"question": "Describe a project you led end to end.", "category": "leadership", "difficulty": "medium"},
            {"question": "How do you handle a missed deadline?", "category": "ownership", "difficulty": "medium"},
            {"question": "Tell me about a hard technical decision.", "category": "judgment", "difficulty": "hard"},
            {"question": "How do you mentor junior engineers?", "category": "leadership", "difficulty": "easy"},
        ]
    },
    ContentType.ANSWER_FEEDBACK: {
        "score": 82,
        "feedback": "Clear and specific.",
        "strengths": ["Concrete example"],
        "improvements": ["Quantify the impact"],
    },
    ContentType.COMPANY_RESEARCH: {
        "market_position": [{"title": "Leader", "description": "Top three in its market."}],
        "financial_health": [{"title": "Profitable", "description": "Positive cash flow."}],
        "culture": [{"title": "Remote first", "description": "Distributed teams."}],
        "strategies": [{"title": "Expansion", "description": "Entering Europe."}],
    },
    ContentType.INTERVIEW_GUIDE: {
        "company_research": {
            "overview": "Acme builds rockets.",
            "focus_areas": ["Reusability"],
            "customer_service": "Dedicated account managers.",
        },
        "competitors": [{"name": "Globex", "description": "Cheaper launches."}],
        "growth_areas": [{"title": "Satellites", "description": "New constellation."}],
        "risks": [{"title": "Regulation", "description": "Launch permits."}],
        "role_impacts": [{"title": "Reliability", "description": "Own the launch software."}],
        "questions": [{"category": "Technical", "question": "How do you test flight code?", "answer": "Simulation first."}],
        "tips": [{"title": "Know the product", "description": "Watch the last launch."}],
    },
    ContentType.LINKEDIN_PROFILE: {
        "headline": "Engineering leader scaling platform teams",
        "summary": "Fifteen years building distributed systems.",
        "sections": {
            "experience": [
                {
                    "title": "VP Engineering",
                    "company": "Acme",
                    "description": "Led 80 engineers.",
                    "start_date": "2019-01",
                    "end_date": None,
                }
            ],
            "education": [
                {
                    "degree": "BSc Computer Science",
                    "institution": "State University",
                    "description": "",
                    "start_date": "2004-09",
                    "end_date": "2008-06",
                }
            ],
            "skills": ["Leadership", "Distributed systems"],
            "certifications": [{"name": "AWS SA", "issuer": "Amazon", "date": "2020-05"}],
        },
        "keywords": ["engineering leadership", "platform"],
        "optimization_score": 88,
    },
    ContentType.RESUME_ANALYSIS: {
        "match_score": 74,
        "strengths": ["Leadership experience"],
        "weaknesses": ["No cloud certifications"],
        "improvement_suggestions": [
            {"section": "Skills", "suggestion": "List Kubernetes.", "reason": "The job requires it."}
        ],
    },
    ContentType.FINANCIAL_PLAN: {
        "salary_analysis": {
            "market_rate": {"min": 150000, "median": 180000, "max": 220000},
            "recommendation": "Ask for 200000.",
            "justification": "Above median experience.",
        },
        "negotiation_strategy": {
            "opening_offer": 210000,
            "walk_away_point": 175000,
            "key_points": ["Scope of role"],
            "script": "Given the scope...",
        },
        "budget_plan": {
            "monthly_savings": 3000,
            "monthly_expenses": 9000,
            "breakdown": {"housing": 4000, "food": 1200},
            "recommendations": ["Max out retirement accounts"],
        },
        "career_growth_plan": {
            "milestones": [
                {"title": "Director", "timeframe": "2 years", "expected_salary": 240000, "required_skills": ["Budgeting"]}
            ],
            "recommendations": ["Find a sponsor"],
        },
    },
}


@pytest.fixture
def valid_output():
    """Return a fresh valid payload for a content type."""

    def _get(content_type: ContentType) -> dict:
        return copy.deepcopy(VALID_OUTPUTS[content_type])

    return _get


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def fake_llm():
    return FakeChatModel()


@pytest.fixture
def client(session_factory, fake_llm):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_chat_model] = lambda: fake_llm
    limiter.enabled = False
    clear_search_cache()

    yield TestClient(app)

    app.dependency_overrides.clear()
    limiter.enabled = True
    clear_search_cache()


class Factory:
    """Creates committed rows for tests."""

    def __init__(self, db):
        self.db = db
        self._count = 0

    def _save(self, obj):
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def user(self, credits: int = 3, subscription_status: str | None = None) -> User:
        self._count += 1
        return self._save(
            User(
                email=f"user{self._count}@example.com",
                credits=credits,
                subscription_status=subscription_status,
            )
        )

    def job(self, title: str = "Senior Engineer", company: str = "Acme", location: str = "Remote") -> Job:
        return self._save(
            Job(
                title=title,
                company=company,
                location=location,
                description="Build and run the platform.",
                requirements="Python, SQL",
            )
        )

    def application(self, user: User, job: Job | None = None, status: str = "applied") -> JobApplication:
        job = job or self.job()
        return self._save(JobApplication(user_id=user.id, job_id=job.id, status=status))

    def resume(self, user: User, title: str = "Main resume", content: str = "Ten years of Python.") -> Resume:
        return self._save(Resume(user_id=user.id, title=title, content=content))


@pytest.fixture
def make(db):
    return Factory(db)


def auth(user: User) -> dict[str, str]:
    return {"X-User-ID": user.id}


@pytest.fixture
def headers():
    return auth
