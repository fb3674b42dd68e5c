import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

import bcrypt
import jwt

from auth.domain.entities import User
from auth.domain.repository import UserRepository
from shared.config import settings
from shared.exceptions import AuthenticationError, ConflictError, ValidationError

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


async def register_user(
    repo: UserRepository,
    email: str,
    password: str,
    full_name: str = "",
) -> User:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if await repo.get_by_email(email):
        raise ConflictError("Email already registered")

    user = User(
        email=email,
        full_name=full_name.strip(),
        password_hash=bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode(),
    )
    created = await repo.create(user)
    logger.info("Registered user %s", created.id)
    return created


async def authenticate_user(
    repo: UserRepository, email: str, password: str
) -> tuple[User, str]:
    user = await repo.get_by_email(email)
    if not user or not bcrypt.checkpw(password.encode(), user.password_hash.encode()):
        raise AuthenticationError("Invalid email or password")

    token = _create_token(str(user.id))
    return user, token


def decode_token(token: str) -> UUID:
    """Return the user id carried by a valid token."""
    try:
        payload = jwt.decode(
            token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM]
        )
        return UUID(payload["sub"])
    except (jwt.PyJWTError, KeyError, ValueError):
        raise AuthenticationError("Invalid or expired token")


async def verify_token(repo: UserRepository, token: str) -> User:
    user = await repo.get_by_id(decode_token(token))
    if not user:
        raise AuthenticationError("User not found")
    return user


def _create_token(user_id: str) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "iat": now,
        "exp": now + timedelta(minutes=settings.JWT_EXPIRATION_MINUTES),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
