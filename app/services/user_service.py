import logging

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError

from app.exceptions import (
    AuthenticationException,
    RecordNotFoundException,
    ResourceConflictException,
)
from app.models.user import User, UserRole
from app.services.base import BaseService

logger = logging.getLogger(__name__)


class UserService(BaseService):
    """Service for managing user accounts and login."""

    def create_user(
        self,
        username: str,
        password: str,
        email: str,
        role: UserRole = UserRole.BUYER,
    ) -> User:
        """Create a new user.

        Raises:
            ResourceConflictException: If username or email is already taken
        """
        existing = self.db.scalar(
            select(User).where(or_(User.username == username, User.email == email))
        )
        if existing is not None:
            identifier = (
                f"username {username}" if existing.username == username else f"email {email}"
            )
            raise ResourceConflictException("user", identifier)

        try:
            user = User(username=username, password=password, email=email, role=role)
            self.db.add(user)
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            raise ResourceConflictException("user", f"username {username}") from e

        logger.info("Created user %s with role %s", user.id, role.value)
        return user

    def get_user(self, user_id: int) -> User:
        """Get a user by ID.

        Raises:
            RecordNotFoundException: If user not found
        """
        user = self.db.scalar(select(User).where(User.id == user_id))
        if not user:
            raise RecordNotFoundException("User", user_id)
        return user

    def get_user_by_username(self, username: str) -> User | None:
        return self.db.scalar(select(User).where(User.username == username))

    def authenticate(self, username: str, password: str) -> User:
        """Return the user whose plain text password matches.

        Raises:
            AuthenticationException: If the username is unknown or the password differs
        """
        user = self.get_user_by_username(username)
        if user is None or user.password != password:
            logger.info("Rejected login for %s", username)
            raise AuthenticationException()
        return user
