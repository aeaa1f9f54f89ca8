import logging
from typing import List, Optional

from pymongo.errors import DuplicateKeyError

from teacherson.core.exceptions import ResourceAlreadyExistsError, ResourceNotFoundError
from teacherson.repositories.job_repository import JobRepository
from teacherson.schemas.job import ApplicationPublic, JobCreate, JobPublic

logger = logging.getLogger(__name__)


class JobService:

    def __init__(self, job_repo: JobRepository) -> None:
        self._job_repo = job_repo

    async def list_jobs(self) -> List[JobPublic]:
        return [JobPublic.model_validate(doc) for doc in await self._job_repo.list_jobs()]

    async def create_job(self, posted_by: str, data: JobCreate) -> JobPublic:
        doc = await self._job_repo.create_job(
            posted_by=posted_by,
            title=data.title.strip(),
            description=data.description,
            location=data.location,
        )
        logger.info("Job %s posted by %s", doc["_id"], posted_by)
        return JobPublic.model_validate(doc)

    async def apply(self, job_id: str, user_id: str, cover_letter: Optional[str] = None) -> ApplicationPublic:
        job = await self._job_repo.get_job(job_id)
        if not job:
            raise ResourceNotFoundError("Job", job_id)
        if await self._job_repo.get_application(job_id, user_id):
            raise ResourceAlreadyExistsError("Application", f"{job_id}:{user_id}")
        try:
            doc = await self._job_repo.create_application(job_id, user_id, cover_letter)
        except DuplicateKeyError:
            raise ResourceAlreadyExistsError("Application", f"{job_id}:{user_id}")
        logger.info("User %s applied to job %s", user_id, job_id)
        return ApplicationPublic.model_validate(doc)
