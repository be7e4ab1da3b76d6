"""
Prompt library.

One entry per content type: the system prompt, the user prompt template and
the output contract. Templates use ``{name}`` placeholders filled by
``render``; values are inserted verbatim.
"""

import re
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel

from backend.ai.schemas import (
    AnswerFeedback,
    CompanyResearch,
    FinancialPlan,
    InterviewGuideContent,
    InterviewQuestionSet,
    LinkedInProfileDraft,
    ResumeAnalysis,
)


class ContentType(str, Enum):
    INTERVIEW_QUESTIONS = "interview_questions"
    ANSWER_FEEDBACK = "answer_feedback"
    COMPANY_RESEARCH = "company_research"
    FINANCIAL_PLAN = "financial_plan"
    LINKEDIN_PROFILE = "linkedin_profile"
    RESUME_ANALYSIS = "resume_analysis"
    INTERVIEW_GUIDE = "interview_guide"


@dataclass(frozen=True)
class PromptSpec:
    system: str
    template: str
    schema: type[BaseModel]


INTERVIEW_QUESTIONS_PROMPT = """Generate {count} {interview_type} interview questions for a {job_title} position at {company}.

Job description: {job_description}

Each question needs a short category (e.g. "leadership", "system design") and a difficulty of easy, medium or hard."""

ANSWER_FEEDBACK_PROMPT = """Analyze this interview answer for the following question: "{question}".
The position is {job_title} at {company}.
The answer is: "{answer}"

Score the answer from 0 to 100, give overall feedback, and list its strengths and the areas to improve."""

COMPANY_RESEARCH_PROMPT = """Research {company_name} in the {industry} industry.

Provide detailed information about their market position, financial health, culture and strategies.
Each point needs a short title and a description."""

FINANCIAL_PLAN_PROMPT = """Generate a comprehensive financial plan for a professional in the {industry} industry \
with {years_of_experience} years of experience, located in {location}.
Current salary: ${current_salary}. Target salary: ${target_salary}.{extras}

Cover the salary analysis (market rate min/median/max), a negotiation strategy, a monthly budget plan \
and a career growth plan with milestones."""

LINKEDIN_PROFILE_PROMPT = """Generate an optimized LinkedIn profile based on this resume:
{resume_content}{current_profile}

Return a headline, a summary, experience/education/skills/certification sections, \
keywords and an optimization score from 0 to 100."""

RESUME_ANALYSIS_PROMPT = """Analyze this resume for a job with the following description:
{job_description}

Resume content:
{resume_content}

Give a match score from 0 to 100, the strengths and weaknesses, and specific improvement suggestions per section."""

INTERVIEW_GUIDE_PROMPT = """Create a comprehensive interview preparation guide for a candidate based on their resume and a job description.

The guide should include:
1. Company research (overview, focus areas, customer service approach)
2. Key competitors analysis
3. Growth trajectory insights
4. Risk assessment
5. Role impact analysis
6. Tailored interview questions and answers
7. Interview preparation tips

Use the candidate's resume to personalize the answers, highlighting experience that matches the job requirements.

## Output Format (JSON only, no explanation)
```json
{
    "company_research": {
        "overview": "Detailed overview of the company...",
        "focus_areas": ["Focus area 1", "Focus area 2", "Focus area 3"],
        "customer_service": "Description of customer service approach..."
    },
    "competitors": [{"name": "Competitor Name", "description": "Market position and strengths..."}],
    "growth_areas": [{"title": "Growth Area Title", "description": "How the company pursues it..."}],
    "risks": [{"title": "Risk Title", "description": "The risk and its potential impact..."}],
    "role_impacts": [{"title": "Impact Area Title", "description": "How the role contributes..."}],
    "questions": [{"category": "Question Category", "question": "The question...", "answer": "A suggested answer..."}],
    "tips": [{"title": "Tip Title", "description": "The tip and how to apply it..."}]
}
```

Job Title: {job_title}
Company Name: {company_name}
Job Description: {job_description}
{resume_section}"""


PROMPTS: dict[ContentType, PromptSpec] = {
    ContentType.INTERVIEW_QUESTIONS: PromptSpec(
        system="You are an expert interviewer for {interview_type} interviews.",
        template=INTERVIEW_QUESTIONS_PROMPT,
        schema=InterviewQuestionSet,
    ),
    ContentType.ANSWER_FEEDBACK: PromptSpec(
        system="You are an expert interview coach with deep experience in helping executives prepare for job interviews.",
        template=ANSWER_FEEDBACK_PROMPT,
        schema=AnswerFeedback,
    ),
    ContentType.COMPANY_RESEARCH: PromptSpec(
        system="You are an expert company researcher.",
        template=COMPANY_RESEARCH_PROMPT,
        schema=CompanyResearch,
    ),
    ContentType.FINANCIAL_PLAN: PromptSpec(
        system="You are an expert financial advisor specializing in career financial planning and salary negotiation.",
        template=FINANCIAL_PLAN_PROMPT,
        schema=FinancialPlan,
    ),
    ContentType.LINKEDIN_PROFILE: PromptSpec(
        system="You are an expert LinkedIn profile optimizer for executives.",
        template=LINKEDIN_PROFILE_PROMPT,
        schema=LinkedInProfileDraft,
    ),
    ContentType.RESUME_ANALYSIS: PromptSpec(
        system="You are an expert resume reviewer with deep experience in executive hiring.",
        template=RESUME_ANALYSIS_PROMPT,
        schema=ResumeAnalysis,
    ),
    ContentType.INTERVIEW_GUIDE: PromptSpec(
        system=(
            "You are an expert interview coach with deep knowledge of industry trends, "
            "company research, and interview preparation."
        ),
        template=INTERVIEW_GUIDE_PROMPT,
        schema=InterviewGuideContent,
    ),
}

_PLACEHOLDER = re.compile(r"\{([a-z_][a-z0-9_]*)\}")


def get_prompt(content_type: ContentType) -> PromptSpec:
    """Get the full prompt entry. Unknown content types raise KeyError."""
    return PROMPTS[content_type]


def get_template(content_type: ContentType) -> str:
    """Get the user prompt template for a content type."""
    return get_prompt(content_type).template


def render(template: str, variables: dict[str, str]) -> str:
    """Fill ``{name}`` placeholders. JSON examples in templates are left alone."""
    return _PLACEHOLDER.sub(lambda m: str(variables[m.group(1)]), template)
