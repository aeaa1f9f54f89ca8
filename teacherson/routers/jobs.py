from typing import List

from fastapi import APIRouter, Depends

from teacherson.database.connection import mongo_db_dependency
from teacherson.repositories.job_repository import JobRepository
from teacherson.schemas.job import ApplicationCreate, ApplicationPublic, JobCreate, JobPublic
from teacherson.services.job_service import JobService
from teacherson.utils.dependencies import get_current_user


router = APIRouter(prefix="/jobs", tags=["jobs"])


def get_job_service(db = Depends(mongo_db_dependency)) -> JobService:
    return JobService(JobRepository(db))


@router.get("", response_model=List[JobPublic])
async def list_jobs(current_user: dict = Depends(get_current_user), service: JobService = Depends(get_job_service)):
    return await service.list_jobs()


@router.post("", response_model=JobPublic, status_code=201)
async def create_job(body: JobCreate, current_user: dict = Depends(get_current_user), service: JobService = Depends(get_job_service)):
    return await service.create_job(current_user["_id"], body)


@router.post("/{job_id}/apply", response_model=ApplicationPublic, status_code=201)
async def apply_to_job(job_id: str, body: ApplicationCreate | None = None, current_user: dict = Depends(get_current_user), service: JobService = Depends(get_job_service)):
    cover_letter = body.cover_letter if body else None
    return await service.apply(job_id, current_user["_id"], cover_letter)
