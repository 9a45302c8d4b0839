"""
Auth service - registration, login, logout and the current session.
Challenge: Keep the email-only login of the app while centralizing the checks.
Design: Passwords are required at registration but never stored or verified.
"""

import logging

from freelancehub.core.errors import DuplicateEmailError, NotFoundError, ValidationError
from freelancehub.core.metrics import REGISTRATIONS
from freelancehub.db.repositories import Repository
from freelancehub.schemas.base import utcnow
from freelancehub.schemas.user import User, UserType
from freelancehub.services.base import Clock

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class AuthService:
    """Handles the auth form: register, login, logout."""

    def __init__(self, repo: Repository, clock: Clock = utcnow):
        self.repo = repo
        self.clock = clock

    async def register(self, email: str, password: str, full_name: str, user_type: str) -> User:
        """Create a user with an empty profile and make it the current session."""
        if _is_blank(email) or _is_blank(password) or _is_blank(full_name):
            raise ValidationError("Please fill in all fields.")
        try:
            kind = UserType(user_type)
        except ValueError:
            raise ValidationError(f"Unknown user type {user_type!r}") from None

        if await self.repo.users.get_by_email(email) is not None:
            raise DuplicateEmailError("Email already registered. Please login.")

        user = User(
            email=email,
            full_name=full_name,
            user_type=kind,
            created_at=self.clock(),
        )
        await self.repo.users.insert(user)
        await self.repo.session.set(user)
        REGISTRATIONS.labels(user_type=kind.value).inc()
        logger.info("Registered %s %s", kind.value, user.id)
        return user

    async def login(self, email: str, password: str = "") -> User:
        """Lookup by email only; ``password`` is accepted and ignored."""
        user = await self.repo.users.get_by_email(email)
        if user is None:
            raise NotFoundError("User not found. Please register first.")
        await self.repo.session.set(user)
        logger.info("User %s logged in", user.id)
        return user

    async def logout(self) -> None:
        await self.repo.session.clear()

    async def current_user(self) -> User | None:
        return await self.repo.session.get()
