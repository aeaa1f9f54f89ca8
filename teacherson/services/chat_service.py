import logging
from typing import List

from teacherson.repositories.message_repository import MessageRepository
from teacherson.schemas.message import ConversationSummary, Message
from teacherson.services.conversations import TieBreak, aggregate_conversations, filter_thread

logger = logging.getLogger(__name__)


class ChatService:
    """
    Direct messaging between educators.

    Reads always refetch the user's full history and recompute from it;
    nothing derived from a previous read is cached or patched.
    """

    def __init__(self, message_repo: MessageRepository) -> None:
        self._message_repo = message_repo

    async def send_message(self, sender_id: str, receiver_id: str, content: str) -> Message:
        if not content or not content.strip():
            raise ValueError("Message content cannot be empty")
        if sender_id == receiver_id:
            raise ValueError("Cannot send a message to yourself")
        saved = await self._message_repo.save_message(
            sender_id=sender_id,
            receiver_id=receiver_id,
            content=content.strip(),
        )
        logger.info("Message %s sent from %s to %s", saved["_id"], sender_id, receiver_id)
        return Message.model_validate(saved)

    async def list_messages(self, user_id: str) -> List[Message]:
        docs = await self._message_repo.list_for_user(user_id)
        return [Message.model_validate(doc) for doc in docs]

    async def list_conversations(self, user_id: str, tie_break: TieBreak = "scan") -> List[ConversationSummary]:
        messages = await self.list_messages(user_id)
        return aggregate_conversations(user_id, messages, tie_break=tie_break)

    async def get_thread(self, user_id: str, other_id: str) -> List[Message]:
        messages = await self.list_messages(user_id)
        return filter_thread(user_id, other_id, messages)
