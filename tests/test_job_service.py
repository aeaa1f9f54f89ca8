import pytest

from teacherson.core.exceptions import ResourceAlreadyExistsError, ResourceNotFoundError
from teacherson.schemas.job import JobCreate


@pytest.mark.asyncio
async def test_create_job_sets_poster_and_date(job_service):
    job = await job_service.create_job("alice", JobCreate(title="  Math Teacher ", location="Leeds"))

    assert job.title == "Math Teacher"
    assert job.posted_by == "alice"
    assert job.location == "Leeds"
    assert job.date_posted is not None


@pytest.mark.asyncio
async def test_list_jobs_newest_first(job_service):
    await job_service.create_job("alice", JobCreate(title="first"))
    await job_service.create_job("bob", JobCreate(title="second"))

    jobs = await job_service.list_jobs()

    assert [j.title for j in jobs] == ["second", "first"]


@pytest.mark.asyncio
async def test_apply(job_service, repos):
    job = await job_service.create_job("alice", JobCreate(title="Physics"))

    application = await job_service.apply(job.id, "bob", "I love physics")

    assert application.job_id == job.id
    assert application.user_id == "bob"
    assert application.cover_letter == "I love physics"
    assert len(repos.jobs.applications) == 1


@pytest.mark.asyncio
async def test_apply_twice_is_rejected(job_service):
    job = await job_service.create_job("alice", JobCreate(title="Physics"))
    await job_service.apply(job.id, "bob")

    with pytest.raises(ResourceAlreadyExistsError):
        await job_service.apply(job.id, "bob")


@pytest.mark.asyncio
async def test_apply_to_missing_job(job_service):
    with pytest.raises(ResourceNotFoundError):
        await job_service.apply("j9999", "bob")
