from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING

from teacherson.models.connection import ConnectionDocument


def pair_key(user_a: str, user_b: str) -> Dict[str, str]:
    """Direction-independent key of a connection; backs a unique index."""
    low, high = sorted((user_a, user_b))
    return {"pair_low": low, "pair_high": high}


class ConnectionRepository:
    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self._collection = db.get_collection("connections")

    async def ensure_indexes(self) -> None:
        await self._collection.create_index([("user_id", ASCENDING)])
        await self._collection.create_index([("connected_user_id", ASCENDING)])
        # one connection per pair of users, whichever side asked first
        await self._collection.create_index([("pair_low", ASCENDING), ("pair_high", ASCENDING)], unique=True)

    async def create(self, user_id: str, connected_user_id: str) -> ConnectionDocument:
        doc: Dict[str, Any] = {
            "user_id": user_id,
            "connected_user_id": connected_user_id,
            "status": "pending",
            "created_at": datetime.now(timezone.utc),
            **pair_key(user_id, connected_user_id),
        }
        result = await self._collection.insert_one(doc)
        doc["_id"] = str(result.inserted_id)
        return doc

    async def get(self, connection_id: str) -> Optional[ConnectionDocument]:
        if not ObjectId.is_valid(connection_id):
            return None
        doc = await self._collection.find_one({"_id": ObjectId(connection_id)})
        if doc:
            doc["_id"] = str(doc["_id"])
        return doc

    async def find_between(self, user_a: str, user_b: str) -> Optional[ConnectionDocument]:
        # either direction
        doc = await self._collection.find_one({
            "$or": [
                {"user_id": user_a, "connected_user_id": user_b},
                {"user_id": user_b, "connected_user_id": user_a},
            ]
        })
        if doc:
            doc["_id"] = str(doc["_id"])
        return doc

    async def update_status(self, connection_id: str, status: str) -> bool:
        result = await self._collection.update_one({"_id": ObjectId(connection_id)}, {"$set": {"status": status}})
        return result.modified_count > 0

    async def list_for_user(self, user_id: str) -> List[ConnectionDocument]:
        cursor = self._collection.find({"$or": [{"user_id": user_id}, {"connected_user_id": user_id}]}).sort("created_at", 1)
        results = []
        async for doc in cursor:
            doc["_id"] = str(doc["_id"])
            results.append(doc)
        return results
