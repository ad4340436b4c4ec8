"""Authentication endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, status

from ridehail.core.dependencies import get_auth_service
from ridehail.schemas.auth import AuthResult, UserLogin, UserSignup
from ridehail.schemas.base import ApiResponse
from ridehail.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/signup",
    response_model=ApiResponse[AuthResult],
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    data: UserSignup,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> ApiResponse[AuthResult]:
    """Register a new RIDER account.

    Response:
        - user: the created account (no password)
        - token: JWT access token

    Raises:
        400 Bad Request: Validation error or email/phone already registered
    """
    result = await service.signup(data)
    return ApiResponse(data=result, message="User signed up successfully")


@router.post("/login", response_model=ApiResponse[AuthResult])
async def login(
    credentials: UserLogin,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> ApiResponse[AuthResult]:
    """Login with email or phone number and password.

    Raises:
        400 Bad Request: Invalid credentials or validation error
        403 Forbidden: Account is deactivated
    """
    result = await service.login(credentials.identifier, credentials.password)
    return ApiResponse(data=result, message="User logged in successfully")
