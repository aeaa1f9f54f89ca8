from typing import List

from fastapi import APIRouter, Depends

from teacherson.core.exceptions import ValidationError
from teacherson.database.connection import mongo_db_dependency
from teacherson.repositories.connection_repository import ConnectionRepository
from teacherson.repositories.profile_repository import ProfileRepository
from teacherson.schemas.connection import ConnectionCreate, ConnectionPublic
from teacherson.services.connection_service import ConnectionService
from teacherson.utils.dependencies import get_current_user

router = APIRouter(prefix="/connections", tags=["network"])

def get_connection_service(db = Depends(mongo_db_dependency)):
    return ConnectionService(ConnectionRepository(db), ProfileRepository(db))

@router.get("", response_model=List[ConnectionPublic])
async def list_connections(current_user: dict = Depends(get_current_user), service: ConnectionService = Depends(get_connection_service)):
    return await service.list_connections(current_user["_id"])

@router.post("", response_model=ConnectionPublic, status_code=201)
async def request_connection(body: ConnectionCreate, current_user: dict = Depends(get_current_user), service: ConnectionService = Depends(get_connection_service)):
    try:
        return await service.request_connection(current_user["_id"], body.connected_user_id)
    except ValueError as exc:
        raise ValidationError(str(exc), field="connected_user_id")

@router.post("/{connection_id}/accept", response_model=ConnectionPublic)
async def accept_connection(connection_id: str, current_user: dict = Depends(get_current_user), service: ConnectionService = Depends(get_connection_service)):
    return await service.accept_connection(connection_id, current_user["_id"])
