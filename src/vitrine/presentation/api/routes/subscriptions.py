"""
Subscription API routes.

- POST /subscriptions/c/{channel_id} - Subscribe to / unsubscribe from a channel
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from vitrine.application.use_cases.toggle_subscription import ToggleSubscription
from vitrine.di.dependencies import get_toggle_subscription
from vitrine.domain.entities.user import User
from vitrine.presentation.api.middleware.auth import get_current_user
from vitrine.presentation.schemas.envelope import ApiResponse
from vitrine.presentation.schemas.subscription_schemas import (
    SubscriptionToggleResponse,
)

router = APIRouter(prefix="/subscriptions", tags=["Subscriptions"])


@router.post(
    "/c/{channel_id}",
    response_model=ApiResponse[SubscriptionToggleResponse],
    summary="Toggle channel subscription",
)
async def toggle_subscription(
    channel_id: UUID,
    current_user: User = Depends(get_current_user),
    use_case: ToggleSubscription = Depends(get_toggle_subscription),
) -> ApiResponse[SubscriptionToggleResponse]:
    """Subscribe if not yet subscribed, unsubscribe otherwise."""
    result = await use_case.execute(current_user.id, channel_id)
    message = "Subscribed successfully" if result.subscribed else "Unsubscribed"
    return ApiResponse.ok(
        data=SubscriptionToggleResponse.from_result(result), message=message
    )
