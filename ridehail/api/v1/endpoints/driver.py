"""
Driver onboarding endpoints.

Registration only needs an authenticated user; every ``/me`` route is
restricted to the DRIVER role.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, status

from ridehail.core.dependencies import get_current_user, get_driver_service, require_driver
from ridehail.models.user import User
from ridehail.schemas.base import ApiResponse
from ridehail.schemas.driver import (
    CompletionResponse,
    DriverProfileCreate,
    DriverProfileResponse,
    DriverProfileUpdate,
    DriverStatusUpdate,
)
from ridehail.services.driver_profile import DriverProfileService

router = APIRouter(prefix="/driver", tags=["Driver"])


@router.post(
    "/register",
    response_model=ApiResponse[DriverProfileResponse],
    status_code=status.HTTP_201_CREATED,
)
async def register_driver(
    data: DriverProfileCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[DriverProfileService, Depends(get_driver_service)],
):
    """
    Create the caller's driver profile.

    The national ID is encrypted before it is stored and only returned
    masked. The account role becomes DRIVER.
    """
    profile = await service.create_profile(current_user, data)
    return ApiResponse(data=profile, message="Driver profile created successfully")


@router.get("/me", response_model=ApiResponse[DriverProfileResponse])
async def get_my_profile(
    current_user: Annotated[User, Depends(require_driver)],
    service: Annotated[DriverProfileService, Depends(get_driver_service)],
):
    profile = await service.get_profile(current_user)
    return ApiResponse(data=profile, message="Driver profile fetched successfully")


@router.patch("/me", response_model=ApiResponse[DriverProfileResponse])
async def update_my_profile(
    data: DriverProfileUpdate,
    current_user: Annotated[User, Depends(require_driver)],
    service: Annotated[DriverProfileService, Depends(get_driver_service)],
):
    """
    Update vehicle model/color, profile picture or document expiry dates.

    Other fields in the body are ignored.
    """
    profile = await service.update_profile(current_user, data)
    return ApiResponse(data=profile, message="Driver profile updated successfully")


@router.patch("/me/status", response_model=ApiResponse[DriverProfileResponse])
async def update_my_status(
    data: DriverStatusUpdate,
    current_user: Annotated[User, Depends(require_driver)],
    service: Annotated[DriverProfileService, Depends(get_driver_service)],
):
    """Go online or offline. Going online needs a verified, 70% complete profile."""
    profile = await service.update_status(current_user, data.is_online)
    state = "online" if data.is_online else "offline"
    return ApiResponse(data=profile, message=f"Driver is now {state}")


@router.get("/me/completion", response_model=ApiResponse[CompletionResponse])
async def get_my_completion(
    current_user: Annotated[User, Depends(require_driver)],
    service: Annotated[DriverProfileService, Depends(get_driver_service)],
):
    completion = await service.get_completion(current_user)
    return ApiResponse(data=completion, message="Profile completion fetched successfully")
