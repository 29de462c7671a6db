"""
Campus Web — User Service
===========================

What:  Account registration, credential checks and the registered-user list.
How:   Passwords are hashed with bcrypt (work factor from settings). Lookups
       normalise email to lower case, matching the registration form.

Security:
    - Only the bcrypt hash is stored
    - authenticate() returns None for both unknown email and wrong password, so
      callers cannot tell the two apart
    - Session payloads come from User.to_session(), which omits the hash
"""

import logging
from typing import List, Optional

import bcrypt
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from campusweb.config import settings
from campusweb.exceptions import DatabaseError
from campusweb.models.user import User

logger = logging.getLogger(__name__)


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))


class EmailAlreadyRegisteredError(DatabaseError):
    """Raised when registering an email that already has an account."""

    status_code = 409

    def __init__(self, email: str):
        super().__init__(
            message="This email is already tied to an account",
            context={"email": email},
        )


class UserService:
    async def find_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        result = await db.execute(
            select(User).where(func.lower(User.email) == email.strip().lower())
        )
        return result.scalar_one_or_none()

    async def email_exists(self, db: AsyncSession, email: str) -> bool:
        return await self.find_by_email(db, email) is not None

    async def register(self, db: AsyncSession, name: str, email: str, password: str) -> User:
        """
        Create an account with a hashed password.

        Raises:
            EmailAlreadyRegisteredError: The email already has an account
            DatabaseError: The insert failed for any other reason
        """
        if await self.email_exists(db, email):
            raise EmailAlreadyRegisteredError(email)

        user = User(name=name, email=email.strip().lower(), password_hash=hash_password(password))
        db.add(user)
        try:
            await db.flush()
        except IntegrityError as e:
            # Lost a race with a concurrent registration for the same email
            await db.rollback()
            raise EmailAlreadyRegisteredError(email) from e
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Database error saving user: %s", str(e), exc_info=True)
            raise DatabaseError(message="Registration failed, please try again another time.") from e

        logger.info("Registered user id=%s", user.id)
        return user

    async def authenticate(self, db: AsyncSession, email: str, password: str) -> Optional[User]:
        user = await self.find_by_email(db, email)
        if user is None or not verify_password(password, user.password_hash):
            return None
        return user

    async def list_users(self, db: AsyncSession) -> List[User]:
        result = await db.execute(select(User).order_by(User.created_at.desc(), User.id.desc()))
        return list(result.scalars().all())


user_service = UserService()
