from typing import List

from fastapi import APIRouter, Depends

from teacherson.core.exceptions import ValidationError
from teacherson.database.connection import mongo_db_dependency
from teacherson.repositories.message_repository import MessageRepository
from teacherson.schemas.message import Message, MessageCreate
from teacherson.services.chat_service import ChatService
from teacherson.utils.dependencies import get_current_user


router = APIRouter(prefix="/messages", tags=["chat"])


def get_chat_service(db = Depends(mongo_db_dependency)) -> ChatService:
    return ChatService(MessageRepository(db))


@router.post("", response_model=Message, status_code=201)
async def send_message(body: MessageCreate, current_user: dict = Depends(get_current_user), service: ChatService = Depends(get_chat_service)):
    try:
        return await service.send_message(current_user["_id"], body.receiver_id, body.content)
    except ValueError as exc:
        raise ValidationError(str(exc))


@router.get("/{other_id}", response_model=List[Message])
async def get_thread(other_id: str, current_user: dict = Depends(get_current_user), service: ChatService = Depends(get_chat_service)):
    return await service.get_thread(current_user["_id"], other_id)
