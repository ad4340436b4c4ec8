"""FastAPI dependencies for authentication, authorization and services."""
import logging
from functools import lru_cache
from typing import Annotated, Awaitable, Callable

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ridehail.core.config import get_settings
from ridehail.core.encryption import FieldCipher
from ridehail.core.exceptions import ForbiddenError, InvalidTokenError, UnauthenticatedError
from ridehail.core.security import TokenService
from ridehail.db.database import get_async_session
from ridehail.models.enums import UserRole
from ridehail.models.user import User
from ridehail.services.auth import AuthService
from ridehail.services.driver_profile import DriverProfileService

logger = logging.getLogger(__name__)

# HTTP Bearer token extractor (reads Authorization: Bearer <token>).
# Missing or non-Bearer headers yield None instead of an automatic error.
security = HTTPBearer(auto_error=False)


@lru_cache()
def get_token_service() -> TokenService:
    return TokenService.from_settings(get_settings())


@lru_cache()
def get_field_cipher() -> FieldCipher:
    return FieldCipher.from_settings(get_settings())


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    session: Annotated[AsyncSession, Depends(get_async_session)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> User:
    """Dependency to get current authenticated user from JWT token.

    Usage:
        @router.get("/protected")
        async def protected_route(
            current_user: Annotated[User, Depends(get_current_user)]
        ):
            return {"message": f"Hello {current_user.name}"}

    Raises:
        UnauthenticatedError: Token missing, invalid or expired, or user not found
        ForbiddenError: User account is inactive
    """
    if credentials is None:
        raise UnauthenticatedError("Access denied. No token provided.")

    try:
        payload = token_service.verify(credentials.credentials)
    except InvalidTokenError as exc:
        logger.info(f"Rejected bearer token: {exc}")
        raise UnauthenticatedError("Invalid token or expired token.") from exc

    result = await session.execute(select(User).where(User.id == payload.subject_id))
    user = result.scalar_one_or_none()

    if user is None:
        raise UnauthenticatedError("User not found. Invalid token.")

    if not user.is_active:
        raise ForbiddenError("Your account is inactive. Please contact support.")

    return user


def authorize_roles(*roles: UserRole) -> Callable[..., Awaitable[User]]:
    """Build a dependency that admits only the given roles.

    Usage:
        @router.get("/me", dependencies=[Depends(authorize_roles(UserRole.DRIVER))])
    """
    allowed = tuple(dict.fromkeys(UserRole(r) for r in roles))
    names = ", ".join(r.value for r in allowed)

    async def check_role(
        current_user: Annotated[User, Depends(get_current_user)],
    ) -> User:
        if UserRole(current_user.role) not in allowed:
            raise ForbiddenError(f"Access denied. Only {names} can access this resource")
        return current_user

    return check_role


require_driver = authorize_roles(UserRole.DRIVER)


def get_auth_service(
    session: Annotated[AsyncSession, Depends(get_async_session)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> AuthService:
    return AuthService(session, token_service)


def get_driver_service(
    session: Annotated[AsyncSession, Depends(get_async_session)],
    cipher: Annotated[FieldCipher, Depends(get_field_cipher)],
) -> DriverProfileService:
    return DriverProfileService(session, cipher)
