from typing import List

from fastapi import APIRouter, Depends, Query

from teacherson.routers.messages import get_chat_service
from teacherson.schemas.message import ConversationSummary
from teacherson.services.chat_service import ChatService
from teacherson.services.conversations import TieBreak
from teacherson.utils.dependencies import get_current_user


router = APIRouter(prefix="/conversations", tags=["chat"])


@router.get("", response_model=List[ConversationSummary])
async def list_conversations(tie_break: TieBreak = Query("scan"), current_user: dict = Depends(get_current_user), service: ChatService = Depends(get_chat_service)):
    return await service.list_conversations(current_user["_id"], tie_break=tie_break)
