from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING

from teacherson.models.job import ApplicationDocument, JobDocument


class JobRepository:

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self._db = db

    @property
    def jobs(self):
        return self._db["jobs"]

    @property
    def applications(self):
        return self._db["applications"]

    async def ensure_indexes(self) -> None:
        await self.jobs.create_index([("date_posted", DESCENDING)])
        await self.applications.create_index([("job_id", ASCENDING), ("user_id", ASCENDING)], unique=True)

    async def create_job(self, posted_by: str, title: str, description: Optional[str], location: Optional[str]) -> JobDocument:
        doc: Dict[str, Any] = {
            "title": title,
            "description": description,
            "location": location,
            "posted_by": posted_by,
            "date_posted": datetime.now(timezone.utc),
        }
        result = await self.jobs.insert_one(doc)
        doc["_id"] = str(result.inserted_id)
        return doc

    async def get_job(self, job_id: str) -> Optional[JobDocument]:
        if not ObjectId.is_valid(job_id):
            return None
        job = await self.jobs.find_one({"_id": ObjectId(job_id)})
        if job:
            job["_id"] = str(job["_id"])
        return job

    async def list_jobs(self) -> List[JobDocument]:
        cursor = self.jobs.find({}).sort([("date_posted", DESCENDING), ("_id", DESCENDING)])
        items = await cursor.to_list(length=None)
        for it in items:
            it["_id"] = str(it.get("_id"))
        return items

    async def get_application(self, job_id: str, user_id: str) -> Optional[ApplicationDocument]:
        doc = await self.applications.find_one({"job_id": job_id, "user_id": user_id})
        if doc:
            doc["_id"] = str(doc["_id"])
        return doc

    async def create_application(self, job_id: str, user_id: str, cover_letter: Optional[str]) -> ApplicationDocument:
        doc: Dict[str, Any] = {
            "job_id": job_id,
            "user_id": user_id,
            "cover_letter": cover_letter,
            "date_applied": datetime.now(timezone.utc),
        }
        result = await self.applications.insert_one(doc)
        doc["_id"] = str(result.inserted_id)
        return doc
