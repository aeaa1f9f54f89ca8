from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from teacherson.models.profile import ProfileDocument


class ProfileRepository:

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self._collection = db.get_collection("profiles")

    async def get(self, user_id: str) -> Optional[ProfileDocument]:
        return await self._collection.find_one({"_id": user_id})

    async def upsert(self, user_id: str, fields: Dict[str, Any]) -> ProfileDocument:
        return await self._collection.find_one_and_update(
            {"_id": user_id},
            {"$set": fields, "$setOnInsert": {"created_at": datetime.now(timezone.utc)}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )

    async def list_except(self, user_id: str) -> List[ProfileDocument]:
        cursor = self._collection.find({"_id": {"$ne": user_id}}).sort("full_name", 1)
        return await cursor.to_list(length=None)
