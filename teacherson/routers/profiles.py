from typing import List

from fastapi import APIRouter, Depends

from teacherson.database.connection import mongo_db_dependency
from teacherson.repositories.profile_repository import ProfileRepository
from teacherson.routers.connections import get_connection_service
from teacherson.schemas.profile import NetworkProfile, ProfilePublic, ProfileUpdate
from teacherson.services.connection_service import ConnectionService, connection_status
from teacherson.services.profile_service import ProfileService
from teacherson.utils.dependencies import get_current_user


router = APIRouter(tags=["profile"])


def get_profile_service(db = Depends(mongo_db_dependency)) -> ProfileService:
    return ProfileService(ProfileRepository(db))


@router.get("/profile", response_model=ProfilePublic)
async def get_profile(current_user: dict = Depends(get_current_user), service: ProfileService = Depends(get_profile_service)):
    return await service.get_profile(current_user["_id"])


@router.put("/profile", response_model=ProfilePublic)
async def update_profile(body: ProfileUpdate, current_user: dict = Depends(get_current_user), service: ProfileService = Depends(get_profile_service)):
    return await service.upsert_profile(current_user["_id"], body)


@router.get("/profiles", response_model=List[NetworkProfile])
async def list_profiles(current_user: dict = Depends(get_current_user), service: ProfileService = Depends(get_profile_service), connections: ConnectionService = Depends(get_connection_service)):
    """Other educators, for the network page, each with the current user's connection status."""
    user_id = current_user["_id"]
    profiles = await service.list_profiles(exclude_user_id=user_id)
    mine = await connections.list_connections(user_id)
    return [
        NetworkProfile(**p.model_dump(), connection_status=connection_status(mine, p.id))
        for p in profiles
    ]
