"""User and billing endpoints."""

from fastapi import APIRouter, Depends

from backend.api.deps import get_billing_service, get_current_user, get_user_service
from backend.api.schemas import SubscriptionUpdate, UserCreate, UserResponse
from backend.db import User
from backend.services import BillingService, UserService

router = APIRouter()


@router.post("", response_model=UserResponse)
def register(data: UserCreate, service: UserService = Depends(get_user_service)):
    """Register a user with the signup credits."""
    return UserResponse.model_validate(service.register(data.email))


@router.get("/me", response_model=UserResponse)
def get_me(user: User = Depends(get_current_user)):
    """Credits and subscription state of the caller."""
    return UserResponse.model_validate(user)


@router.post("/me/subscription", response_model=UserResponse)
def update_subscription(
    data: SubscriptionUpdate,
    user: User = Depends(get_current_user),
    service: BillingService = Depends(get_billing_service),
):
    """Cancel the caller's subscription at period end, or reactivate it."""
    return UserResponse.model_validate(service.update_subscription(user, data.action))
