"""
Deterministic mock content per content type.

Only served when ``settings.mock_fallback_enabled`` is on (local development
and demos). Every builder reads the same variables as the prompt, so a mock
still mentions the right company and role.
"""

from collections.abc import Callable
from typing import Any

from backend.ai.prompts import ContentType


def _float(value: Any, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def mock_interview_questions(v: dict[str, str]) -> dict:
    job_title = v.get("job_title", "this role")
    company = v.get("company", "the company")
    questions = [
        ("Tell me about a time you led a team through a difficult project.", "leadership", "medium"),
        (f"What experience do you have that's relevant to the {job_title} role?", "experience", "easy"),
        ("Describe a challenging problem you solved in your previous role.", "problem solving", "medium"),
        ("How do you handle disagreements with stakeholders?", "communication", "medium"),
        (f"What do you know about {company} and why do you want to work here?", "company knowledge", "easy"),
    ]
    count = int(_float(v.get("count"), len(questions))) or len(questions)
    return {
        "questions": [
            {"question": q, "category": c, "difficulty": d}
            for q, c, d in questions[:count]
        ]
    }


def mock_answer_feedback(v: dict[str, str]) -> dict:
    return {
        "score": 70,
        "feedback": "The answer addresses the question but would be stronger with a concrete example and measurable results.",
        "strengths": ["Relevant to the question", "Clear structure"],
        "improvements": ["Add a specific example", "Quantify the outcome"],
    }


def mock_company_research(v: dict[str, str]) -> dict:
    company = v.get("company_name", "The company")
    industry = v.get("industry", "its industry")
    return {
        "market_position": [
            {"title": "Established player", "description": f"{company} is a recognized name in {industry}."},
        ],
        "financial_health": [
            {"title": "Stable revenue", "description": f"{company} reports steady revenue from its core business."},
        ],
        "culture": [
            {"title": "Customer focus", "description": f"{company} emphasizes long-term customer relationships."},
        ],
        "strategies": [
            {"title": "Digital transformation", "description": "Investing in digital capabilities and online presence."},
        ],
    }


def mock_interview_guide(v: dict[str, str]) -> dict:
    job_title = v.get("job_title", "this role")
    company = v.get("company_name", "The company")
    return {
        "company_research": {
            "overview": f"{company} is a leading company in its industry, known for innovation and quality service.",
            "focus_areas": [
                f"Expanding {job_title.lower()} capabilities",
                "Digital transformation initiatives",
                "Customer experience enhancement",
            ],
            "customer_service": f"{company} is known for exceptional customer service and building long-term relationships.",
        },
        "competitors": [
            {"name": "Competitor A", "description": "Major player in the industry with strong market presence."},
            {"name": "Competitor B", "description": "Known for innovation and cutting-edge technology."},
            {"name": "Competitor C", "description": "Regional competitor with loyal customer base."},
        ],
        "growth_areas": [
            {"title": "Market Expansion", "description": f"{company} is looking to expand into new geographic markets."},
            {"title": "Product Development", "description": "Investing in new product lines and services."},
            {"title": "Digital Transformation", "description": "Enhancing digital capabilities and online presence."},
        ],
        "risks": [
            {"title": "Market Volatility", "description": "Economic uncertainties affecting business operations."},
            {"title": "Competitive Pressure", "description": "Increasing competition in key markets."},
            {"title": "Regulatory Changes", "description": "Evolving regulations requiring adaptation."},
        ],
        "role_impacts": [
            {"title": "Drive Innovation", "description": f"As a {job_title}, you will help drive innovation in key areas."},
            {"title": "Enhance Efficiency", "description": "Streamline processes and improve operational efficiency."},
            {"title": "Support Growth", "description": "Contribute to company growth initiatives and strategic goals."},
        ],
        "questions": [
            {
                "category": "Technical Skills",
                "question": f"What experience do you have that's relevant to the {job_title} role?",
                "answer": "Highlight your relevant experience and skills, with specific examples of achievements.",
            },
            {
                "category": "Problem Solving",
                "question": "Describe a challenging problem you solved in your previous role.",
                "answer": "Discuss a specific problem, your approach to solving it, and the positive outcome achieved.",
            },
            {
                "category": "Leadership",
                "question": "How do you lead teams through challenging projects?",
                "answer": "Explain your leadership style and give an example of a successful project.",
            },
            {
                "category": "Company Knowledge",
                "question": f"What do you know about {company} and why do you want to work here?",
                "answer": "Show your research on the company and how your goals align with the organization.",
            },
        ],
        "tips": [
            {"title": "Research Thoroughly", "description": f"Learn everything you can about {company}, its products and recent news."},
            {"title": "Prepare Examples", "description": "Have specific examples ready that demonstrate your skills and experience."},
            {"title": "Ask Thoughtful Questions", "description": "Prepare questions that show your interest in the role and company."},
        ],
    }


def mock_linkedin_profile(v: dict[str, str]) -> dict:
    return {
        "headline": "Experienced professional driving measurable results",
        "summary": "Results-oriented professional with a track record of leading teams and delivering projects.",
        "sections": {
            "experience": [],
            "education": [],
            "skills": ["Leadership", "Strategy", "Communication"],
            "certifications": [],
        },
        "keywords": ["leadership", "strategy", "operations"],
        "optimization_score": 50,
    }


def mock_resume_analysis(v: dict[str, str]) -> dict:
    return {
        "match_score": 50,
        "strengths": ["Relevant work history"],
        "weaknesses": ["Few quantified achievements"],
        "improvement_suggestions": [
            {
                "section": "Experience",
                "suggestion": "Add numbers to your main achievements.",
                "reason": "Quantified results are easier for recruiters to compare.",
            }
        ],
    }


def mock_financial_plan(v: dict[str, str]) -> dict:
    current = _float(v.get("current_salary"))
    target = _float(v.get("target_salary"), current)
    median = (current + target) / 2 if target else current
    monthly = current / 12
    return {
        "salary_analysis": {
            "market_rate": {"min": current, "median": median, "max": max(current, target)},
            "recommendation": f"Aim for {target:,.0f} based on your experience.",
            "justification": "The target sits within the market range for your role and location.",
        },
        "negotiation_strategy": {
            "opening_offer": round(target * 1.05, 2),
            "walk_away_point": median,
            "key_points": ["Quantified achievements", "Market data for the role"],
            "script": "Based on my experience and the market rate for this role, I am looking for a salary in this range.",
        },
        "budget_plan": {
            "monthly_savings": round(monthly * 0.2, 2),
            "monthly_expenses": round(monthly * 0.8, 2),
            "breakdown": {
                "housing": round(monthly * 0.3, 2),
                "living": round(monthly * 0.3, 2),
                "other": round(monthly * 0.2, 2),
            },
            "recommendations": ["Save 20% of your monthly income"],
        },
        "career_growth_plan": {
            "milestones": [
                {
                    "title": "Reach target salary",
                    "timeframe": "12 months",
                    "expected_salary": target,
                    "required_skills": ["Leadership"],
                }
            ],
            "recommendations": ["Review your compensation yearly"],
        },
    }


MOCK_BUILDERS: dict[ContentType, Callable[[dict[str, str]], dict]] = {
    ContentType.INTERVIEW_QUESTIONS: mock_interview_questions,
    ContentType.ANSWER_FEEDBACK: mock_answer_feedback,
    ContentType.COMPANY_RESEARCH: mock_company_research,
    ContentType.INTERVIEW_GUIDE: mock_interview_guide,
    ContentType.LINKEDIN_PROFILE: mock_linkedin_profile,
    ContentType.RESUME_ANALYSIS: mock_resume_analysis,
    ContentType.FINANCIAL_PLAN: mock_financial_plan,
}


def build_mock(content_type: ContentType, variables: dict[str, str]) -> dict:
    """Build the mock payload for a content type from the request variables."""
    return MOCK_BUILDERS[content_type](variables)
