"""Internal billing endpoint called by the payment gateway integration."""

from fastapi import APIRouter, Depends

from backend.api.deps import get_billing_service, require_billing_secret
from backend.api.schemas import CreditGrant, UserResponse
from backend.services import BillingService

router = APIRouter(dependencies=[Depends(require_billing_secret)])


@router.post("/grants", response_model=UserResponse)
def apply_grant(data: CreditGrant, service: BillingService = Depends(get_billing_service)):
    """Record a completed purchase: add credits and/or set the subscription."""
    user = service.apply_grant(
        data.user_id,
        credits=data.credits,
        subscription_status=data.subscription_status,
        subscription_plan=data.subscription_plan,
    )
    return UserResponse.model_validate(user)
