"""User profile endpoints."""
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends

from ridehail.core.dependencies import get_current_user
from ridehail.core.exceptions import ForbiddenError
from ridehail.models.user import User
from ridehail.schemas.auth import WelcomeData
from ridehail.schemas.base import ApiResponse

router = APIRouter(prefix="/profile", tags=["Profile"])


@router.get("/{user_id}/welcome", response_model=ApiResponse[WelcomeData])
async def get_welcome(
    user_id: UUID,
    current_user: Annotated[User, Depends(get_current_user)],
) -> ApiResponse[WelcomeData]:
    """Personalized welcome message. Only available for the caller's own id."""
    if current_user.id != user_id:
        raise ForbiddenError("You can only access your own profile")

    return ApiResponse(
        data=WelcomeData(
            user_id=current_user.id,
            name=current_user.name,
            email=current_user.email,
            role=current_user.role,
            welcome_message=f"Hello {current_user.name}, welcome to your profile!",
        ),
        message=f"Welcome to your profile, {current_user.name}!",
    )
