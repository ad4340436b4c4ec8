"""
Account service: signup and login.
"""
import logging

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ridehail.core.exceptions import (
    DuplicateFieldError,
    ForbiddenError,
    InvalidCredentialsError,
    duplicate_field_from_integrity_error,
)
from ridehail.core.security import (
    TokenService,
    dummy_verify_password,
    get_password_hash,
    verify_password,
)
from ridehail.models.enums import UserRole
from ridehail.models.user import User
from ridehail.schemas.auth import AuthResult, UserPublic, UserSignup

logger = logging.getLogger(__name__)


class AuthService:
    """
    Signup and login against the users table.

    Tokens are issued by the injected TokenService; the password hash never
    leaves this class.
    """

    def __init__(self, session: AsyncSession, token_service: TokenService):
        self.session = session
        self.token_service = token_service

    async def _find_by_email_or_phone(self, email: str, phone: str) -> User | None:
        result = await self.session.execute(
            select(User).where(or_(User.email == email, User.phone == phone))
        )
        return result.scalars().first()

    def _result(self, user: User) -> AuthResult:
        token = self.token_service.issue(user.id, user.role)
        return AuthResult(user=UserPublic.model_validate(user), token=token)

    async def signup(self, data: UserSignup) -> AuthResult:
        """Create a RIDER account and return it with an access token.

        Raises:
            DuplicateFieldError: If the email or phone is already registered
        """
        existing = await self._find_by_email_or_phone(data.email, data.phone)
        if existing is not None:
            if existing.email == data.email:
                raise DuplicateFieldError("email", "Email already exists")
            raise DuplicateFieldError("phone", "Phone number already exists")

        user = User(
            name=data.name,
            email=data.email,
            phone=data.phone,
            hashed_password=get_password_hash(data.password),
            role=UserRole.RIDER,
            is_active=True,
        )
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            # Lost a race against a concurrent signup
            duplicate = duplicate_field_from_integrity_error(exc)
            if duplicate is None:
                raise
            raise duplicate from exc
        await self.session.refresh(user)

        logger.info(f"User '{user.email}' signed up (id={user.id})")
        return self._result(user)

    async def login(self, identifier: str, password: str) -> AuthResult:
        """Authenticate by email or phone.

        Raises:
            InvalidCredentialsError: Unknown identifier or wrong password
            ForbiddenError: Account is deactivated
        """
        user = await self._find_by_email_or_phone(identifier, identifier)

        if user is None:
            dummy_verify_password()
            kind = "email" if "@" in identifier else "phone"
            logger.warning(f"Login attempt failed: no user for the given {kind}")
            raise InvalidCredentialsError()

        if not verify_password(password, user.hashed_password):
            logger.warning(f"Login attempt failed: invalid password for user {user.id}")
            raise InvalidCredentialsError()

        if not user.is_active:
            logger.warning(f"Login attempt failed: user {user.id} account is deactivated")
            raise ForbiddenError("Account is deactivated. Please contact support.")

        logger.info(f"User {user.id} logged in successfully")
        return self._result(user)
