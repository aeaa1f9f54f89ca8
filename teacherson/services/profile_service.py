import logging
from typing import List

from teacherson.core.exceptions import ResourceNotFoundError
from teacherson.repositories.profile_repository import ProfileRepository
from teacherson.schemas.profile import ProfilePublic, ProfileUpdate

logger = logging.getLogger(__name__)


class ProfileService:

    def __init__(self, profile_repo: ProfileRepository) -> None:
        self._profile_repo = profile_repo

    async def get_profile(self, user_id: str) -> ProfilePublic:
        doc = await self._profile_repo.get(user_id)
        if not doc:
            raise ResourceNotFoundError("Profile", user_id)
        return ProfilePublic.model_validate(doc)

    async def upsert_profile(self, user_id: str, data: ProfileUpdate) -> ProfilePublic:
        doc = await self._profile_repo.upsert(user_id, data.model_dump())
        logger.info("Profile saved for user %s", user_id)
        return ProfilePublic.model_validate(doc)

    async def list_profiles(self, exclude_user_id: str) -> List[ProfilePublic]:
        docs = await self._profile_repo.list_except(exclude_user_id)
        return [ProfilePublic.model_validate(doc) for doc in docs]
