"""Financial plans: salary analysis, negotiation, budget and career growth."""

from sqlalchemy.orm import Session

from backend.ai import ContentType, GenerationInvoker
from backend.ai.schemas import FinancialPlan
from backend.db.repositories import UserRepository
from backend.db.tables import User
from backend.services.base import run_generation
from backend.services.billing import charge_for_generation, ensure_can_generate, generation_unit_of_work


def _amount(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def _extras(
    current_benefits: list[str] | None,
    desired_benefits: list[str] | None,
    financial_goals: list[str] | None,
) -> str:
    parts = []
    if current_benefits:
        parts.append(f" Current benefits: {', '.join(current_benefits)}.")
    if desired_benefits:
        parts.append(f" Desired benefits: {', '.join(desired_benefits)}.")
    if financial_goals:
        parts.append(f" Financial goals: {', '.join(financial_goals)}.")
    return "".join(parts)


class FinancialService:
    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)

    def generate_plan(
        self,
        user: User,
        invoker: GenerationInvoker,
        current_salary: float,
        target_salary: float,
        industry: str,
        location: str,
        years_of_experience: int,
        current_benefits: list[str] | None = None,
        desired_benefits: list[str] | None = None,
        financial_goals: list[str] | None = None,
    ) -> FinancialPlan:
        """Generate a plan. Plans are returned, not stored, but still cost a credit."""
        ensure_can_generate(user)
        output = run_generation(
            invoker,
            ContentType.FINANCIAL_PLAN,
            {
                "industry": industry,
                "years_of_experience": str(years_of_experience),
                "location": location,
                "current_salary": _amount(current_salary),
                "target_salary": _amount(target_salary),
                "extras": _extras(current_benefits, desired_benefits, financial_goals),
            },
        )
        with generation_unit_of_work(self.db):
            charge_for_generation(self.users, user, output.used_fallback)
        return output.data
