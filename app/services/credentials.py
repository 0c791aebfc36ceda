"""
Signup and login against the ``users`` table.
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import DuplicateEmailError, InvalidCredentialsError, ValidationError
from app.core.security import dummy_verify, get_password_hash, verify_password
from app.models.user import User
from app.schemas.user import UserSummary

logger = logging.getLogger(__name__)


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


class CredentialStore:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def register(self, full_name: str | None, email: str | None, password: str | None) -> int:
        """Create a user with a bcrypt-hashed password and return its id.

        Email uniqueness is enforced by the table's unique constraint, so two
        concurrent signups for the same address cannot both succeed.
        """
        if _blank(full_name) or _blank(email) or _blank(password):
            raise ValidationError("All fields required.")

        try:
            hashed_password = get_password_hash(password)
        except ValueError:
            # passlib rejects passwords bcrypt cannot hash, e.g. ones with NUL bytes
            raise ValidationError("Password contains unsupported characters.") from None

        user = User(full_name=full_name, email=email, hashed_password=hashed_password)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.info("Signup rejected, email already registered: %s", email)
            raise DuplicateEmailError("Email already exists.") from None

        logger.info("Registered user %d (%s)", user.id, user.email)
        return user.id

    async def authenticate(self, email: str | None, password: str | None) -> UserSummary:
        """Return the user's public summary if the password matches.

        An unknown email and a wrong password raise the same error.
        """
        if _blank(email) or _blank(password):
            raise ValidationError("Email and password required.")

        result = await self.db.execute(select(User).where(User.email == email))
        user = result.scalar_one_or_none()

        if user is None:
            dummy_verify()
            matched = False
        else:
            try:
                matched = verify_password(password, user.hashed_password)
            except ValueError:
                matched = False

        if not matched:
            logger.warning("Failed login for %s", email)
            raise InvalidCredentialsError("Invalid credentials.")

        return UserSummary.model_validate(user)
