from datetime import datetime, timezone
from typing import Any, Dict, List

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING

from teacherson.models.message import MessageDocument


class MessageRepository:

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self._db = db

    @property
    def collection(self):
        return self._db["messages"]

    async def ensure_indexes(self) -> None:
        await self.collection.create_index([("sender_id", ASCENDING), ("timestamp", ASCENDING)])
        await self.collection.create_index([("receiver_id", ASCENDING), ("timestamp", ASCENDING)])

    async def save_message(self, sender_id: str, receiver_id: str, content: str) -> MessageDocument:
        doc: Dict[str, Any] = {
            "sender_id": sender_id,
            "receiver_id": receiver_id,
            "content": content,
            "timestamp": datetime.now(timezone.utc),
        }
        result = await self.collection.insert_one(doc)
        doc["_id"] = str(result.inserted_id)
        return doc

    async def list_for_user(self, user_id: str) -> List[MessageDocument]:
        """Every message the user sent or received, oldest first."""
        query = {"$or": [{"sender_id": user_id}, {"receiver_id": user_id}]}
        cursor = self.collection.find(query).sort([("timestamp", ASCENDING), ("_id", ASCENDING)])
        items = await cursor.to_list(length=None)
        for it in items:
            it["_id"] = str(it.get("_id"))
        return items
