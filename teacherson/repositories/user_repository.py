from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from teacherson.models.user import UserDocument


class UserRepository:

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self._collection = db.get_collection("users")

    async def ensure_indexes(self) -> None:
        await self._collection.create_index("email", unique=True)

    async def create_user(self, email: str, hashed_password: str) -> str:

        doc = {"email": email, "hashed_password": hashed_password}
        result = await self._collection.insert_one(doc)
        return str(result.inserted_id)

    async def get_user_by_email(self, email: str) -> Optional[UserDocument]:

        user = await self._collection.find_one({"email": email})
        if user:
            user["_id"] = str(user["_id"])  # normalize to string for API layer
        return user
