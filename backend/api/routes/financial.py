"""Financial planning endpoint."""

from fastapi import APIRouter, Depends, Request

from backend.ai import GenerationInvoker
from backend.ai.schemas import FinancialPlan
from backend.api.deps import get_current_user, get_financial_service, get_invoker
from backend.api.limiter import generation_limit
from backend.api.schemas import FinancialPlanRequest
from backend.db import User
from backend.services import FinancialService

router = APIRouter()


@router.post("/plan", response_model=FinancialPlan)
@generation_limit
def generate_plan(
    request: Request,
    data: FinancialPlanRequest,
    user: User = Depends(get_current_user),
    service: FinancialService = Depends(get_financial_service),
    invoker: GenerationInvoker = Depends(get_invoker),
):
    """Generate a salary, negotiation, budget and career growth plan."""
    return service.generate_plan(user, invoker, **data.model_dump())
