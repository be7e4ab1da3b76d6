"""
Output contracts for AI generation.

Each model is handed to the provider as the single tool of a structured call,
so the class name becomes the tool name and the docstring its description.
The same model then validates whatever comes back.
"""

from typing import Literal

from pydantic import BaseModel, Field


# Interviews
QUESTIONS_PER_INTERVIEW = 5


class GeneratedQuestion(BaseModel):
    question: str = Field(..., min_length=1)
    category: str = Field(..., description="Topic of the question, e.g. leadership")
    difficulty: Literal["easy", "medium", "hard"]


class InterviewQuestionSet(BaseModel):
    """Generates interview questions."""

    questions: list[GeneratedQuestion] = Field(
        ...,
        min_length=QUESTIONS_PER_INTERVIEW,
        description=f"Exactly {QUESTIONS_PER_INTERVIEW} questions",
    )


class AnswerFeedback(BaseModel):
    """Analyzes an interview answer."""

    score: float = Field(..., ge=0, le=100, description="Score from 0-100 indicating the quality of the answer")
    feedback: str = Field(..., description="Overall feedback on the answer")
    strengths: list[str] = Field(..., description="List of strengths in the answer")
    improvements: list[str] = Field(..., description="List of areas for improvement")


class ResearchPoint(BaseModel):
    title: str
    description: str


class CompanyResearch(BaseModel):
    """Provides research about a company."""

    market_position: list[ResearchPoint]
    financial_health: list[ResearchPoint]
    culture: list[ResearchPoint]
    strategies: list[ResearchPoint]


# Interview preparation guide (free-text output)
class CompanyOverview(BaseModel):
    overview: str
    focus_areas: list[str]
    customer_service: str


class Competitor(BaseModel):
    name: str
    description: str


class GuideQuestion(BaseModel):
    category: str
    question: str
    answer: str


class InterviewGuideContent(BaseModel):
    """Complete interview preparation guide."""

    company_research: CompanyOverview
    competitors: list[Competitor]
    growth_areas: list[ResearchPoint]
    risks: list[ResearchPoint]
    role_impacts: list[ResearchPoint]
    questions: list[GuideQuestion]
    tips: list[ResearchPoint]


# LinkedIn
class ExperienceEntry(BaseModel):
    title: str
    company: str
    description: str
    start_date: str
    end_date: str | None = None


class EducationEntry(BaseModel):
    degree: str
    institution: str
    description: str
    start_date: str
    end_date: str | None = None


class Certification(BaseModel):
    name: str
    issuer: str
    date: str


class ProfileSections(BaseModel):
    experience: list[ExperienceEntry]
    education: list[EducationEntry]
    skills: list[str]
    certifications: list[Certification]


class LinkedInProfileDraft(BaseModel):
    """Generates an optimized LinkedIn profile."""

    headline: str = Field(..., description="Professional headline for LinkedIn profile")
    summary: str = Field(..., description="Professional summary for LinkedIn profile")
    sections: ProfileSections
    keywords: list[str] = Field(..., description="Keywords for LinkedIn profile optimization")
    optimization_score: float = Field(
        ..., ge=0, le=100, description="Score from 0-100 indicating the optimization level of the profile"
    )


# Résumés
class ImprovementSuggestion(BaseModel):
    section: str
    suggestion: str
    reason: str


class ResumeAnalysis(BaseModel):
    """Analyzes a resume against a job description."""

    match_score: float = Field(
        ..., ge=0, le=100, description="Score from 0-100 indicating how well the resume matches the job description"
    )
    strengths: list[str]
    weaknesses: list[str]
    improvement_suggestions: list[ImprovementSuggestion]


# Financial planning
class MarketRate(BaseModel):
    min: float
    median: float
    max: float


class SalaryAnalysis(BaseModel):
    market_rate: MarketRate
    recommendation: str
    justification: str


class NegotiationStrategy(BaseModel):
    opening_offer: float
    walk_away_point: float
    key_points: list[str]
    script: str


class BudgetPlan(BaseModel):
    monthly_savings: float
    monthly_expenses: float
    breakdown: dict[str, float]
    recommendations: list[str]


class Milestone(BaseModel):
    title: str
    timeframe: str
    expected_salary: float
    required_skills: list[str]


class CareerGrowthPlan(BaseModel):
    milestones: list[Milestone]
    recommendations: list[str]


class FinancialPlan(BaseModel):
    """Generates a comprehensive financial plan."""

    salary_analysis: SalaryAnalysis
    negotiation_strategy: NegotiationStrategy
    budget_plan: BudgetPlan
    career_growth_plan: CareerGrowthPlan
