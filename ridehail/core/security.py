"""Security utilities for authentication and authorization."""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt
from passlib.context import CryptContext

from ridehail.core.config import Settings
from ridehail.core.exceptions import InvalidTokenError
from ridehail.models.enums import UserRole

# Password hashing context (bcrypt)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a hashed password.

    Args:
        plain_password: User input password
        hashed_password: Stored bcrypt hash

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


def dummy_verify_password() -> None:
    """Spend the same time as a real verification when no user was found."""
    pwd_context.dummy_verify()


def get_password_hash(password: str) -> str:
    """Hash a password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        Bcrypt hash string
    """
    return pwd_context.hash(password)


@dataclass(frozen=True)
class TokenPayload:
    """Identity carried by a verified access token."""

    subject_id: UUID
    role: UserRole


class TokenService:
    """Issues and verifies signed access tokens.

    Stateless: holds only the signing secret, algorithm and lifetime.
    """

    def __init__(self, secret: str, algorithm: str, expires_delta: timedelta):
        self._secret = secret
        self._algorithm = algorithm
        self._expires_delta = expires_delta

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expires_delta=settings.jwt_expires_delta,
        )

    def issue(
        self,
        subject_id: UUID,
        role: UserRole,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """Create a JWT access token.

        Args:
            subject_id: User id stored in the ``sub`` claim
            role: User role stored in the ``role`` claim
            expires_delta: Optional custom expiration time

        Returns:
            Encoded JWT token string
        """
        expire = datetime.now(timezone.utc) + (expires_delta or self._expires_delta)
        to_encode = {
            "sub": str(subject_id),
            "role": UserRole(role).value,
            "exp": expire,
        }
        return jwt.encode(to_encode, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenPayload:
        """Decode and validate a JWT token.

        Raises:
            InvalidTokenError: If the token is tampered, malformed, expired
                or lacks the ``sub``/``role`` claims
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as exc:
            raise InvalidTokenError(str(exc)) from exc

        subject, role = payload.get("sub"), payload.get("role")
        if subject is None or role is None:
            raise InvalidTokenError("Token is missing required claims")

        try:
            return TokenPayload(subject_id=UUID(subject), role=UserRole(role))
        except ValueError as exc:
            raise InvalidTokenError("Token claims are malformed") from exc
