import logging
from typing import Optional

from pymongo.errors import DuplicateKeyError

from teacherson.core.exceptions import ResourceAlreadyExistsError
from teacherson.repositories.user_repository import UserRepository
from teacherson.schemas.user import UserPublic
from teacherson.utils.security import hash_password, verify_password

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    # emails are stored and looked up in one canonical form
    return email.strip().lower()


class UserService:
    """Account registration and password login."""

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def register_user(self, email: str, password: str) -> UserPublic:
        """
        Create a new account.
        - reject an email that is already registered
        - store only the bcrypt hash of the password
        """
        email = normalize_email(email)
        existing = await self.user_repository.get_user_by_email(email)
        if existing:
            raise ResourceAlreadyExistsError("User", email)

        hashed_password = hash_password(password)
        try:
            new_id = await self.user_repository.create_user(email=email, hashed_password=hashed_password)
        except DuplicateKeyError:
            # concurrent registration with the same email
            raise ResourceAlreadyExistsError("User", email)

        logger.info("Registered user %s", new_id)
        return UserPublic(id=new_id, email=email)

    async def authenticate_user(self, email: str, password: str) -> Optional[dict]:
        """Return the user document when the credentials match, otherwise None."""
        email = normalize_email(email)
        user = await self.user_repository.get_user_by_email(email)
        if not user:
            return None

        if not verify_password(password, user.get("hashed_password", "")):
            return None

        return user
