"""
Shared fixtures.

Repositories are replaced by in-memory fakes with the same async interface,
so services and routes run without a MongoDB server.
"""

import os

os.environ.setdefault("TEACHERSON_JWT_SECRET_KEY", "test-secret-key-with-enough-bytes-for-hs256")

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError

from teacherson.main import create_app
from teacherson.routers.auth import get_user_service
from teacherson.routers.connections import get_connection_service
from teacherson.routers.jobs import get_job_service
from teacherson.routers.messages import get_chat_service
from teacherson.routers.profiles import get_profile_service
from teacherson.services.chat_service import ChatService
from teacherson.services.connection_service import ConnectionService
from teacherson.services.job_service import JobService
from teacherson.services.profile_service import ProfileService
from teacherson.services.user_service import UserService
from teacherson.utils.security import create_access_token

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


class _Clock:
    """Hands out strictly increasing timestamps, one second apart."""

    def __init__(self) -> None:
        self._ticks = 0

    def now(self) -> datetime:
        self._ticks += 1
        return BASE_TIME + timedelta(seconds=self._ticks)


class FakeMessageRepository:
    def __init__(self, clock: _Clock) -> None:
        self._clock = clock
        self.docs: List[Dict[str, Any]] = []

    async def save_message(self, sender_id: str, receiver_id: str, content: str) -> Dict[str, Any]:
        doc = {
            "_id": f"m{len(self.docs) + 1:04d}",
            "sender_id": sender_id,
            "receiver_id": receiver_id,
            "content": content,
            "timestamp": self._clock.now(),
        }
        self.docs.append(doc)
        return dict(doc)

    async def list_for_user(self, user_id: str) -> List[Dict[str, Any]]:
        mine = [d for d in self.docs if user_id in (d["sender_id"], d["receiver_id"])]
        return [dict(d) for d in sorted(mine, key=lambda d: (d["timestamp"], d["_id"]))]


class FakeUserRepository:
    def __init__(self) -> None:
        self.docs: Dict[str, Dict[str, Any]] = {}

    async def create_user(self, email: str, hashed_password: str) -> str:
        user_id = f"u{len(self.docs) + 1:04d}"
        self.docs[user_id] = {"_id": user_id, "email": email, "hashed_password": hashed_password}
        return user_id

    async def get_user_by_email(self, email: str) -> Optional[dict]:
        for doc in self.docs.values():
            if doc["email"] == email:
                return dict(doc)
        return None


class FakeProfileRepository:
    def __init__(self, clock: _Clock) -> None:
        self._clock = clock
        self.docs: Dict[str, Dict[str, Any]] = {}

    async def get(self, user_id: str) -> Optional[Dict[str, Any]]:
        doc = self.docs.get(user_id)
        return dict(doc) if doc else None

    async def upsert(self, user_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        doc = self.docs.setdefault(user_id, {"_id": user_id, "created_at": self._clock.now()})
        doc.update(fields)
        return dict(doc)

    async def list_except(self, user_id: str) -> List[Dict[str, Any]]:
        others = [dict(d) for uid, d in self.docs.items() if uid != user_id]
        return sorted(others, key=lambda d: d["full_name"])


class FakeJobRepository:
    def __init__(self, clock: _Clock) -> None:
        self._clock = clock
        self.jobs: List[Dict[str, Any]] = []
        self.applications: List[Dict[str, Any]] = []

    async def create_job(self, posted_by: str, title: str, description: Optional[str], location: Optional[str]) -> Dict[str, Any]:
        doc = {
            "_id": f"j{len(self.jobs) + 1:04d}",
            "title": title,
            "description": description,
            "location": location,
            "posted_by": posted_by,
            "date_posted": self._clock.now(),
        }
        self.jobs.append(doc)
        return dict(doc)

    async def get_job(self, job_id: str) -> Optional[Dict[str, Any]]:
        for doc in self.jobs:
            if doc["_id"] == job_id:
                return dict(doc)
        return None

    async def list_jobs(self) -> List[Dict[str, Any]]:
        return [dict(d) for d in sorted(self.jobs, key=lambda d: (d["date_posted"], d["_id"]), reverse=True)]

    async def get_application(self, job_id: str, user_id: str) -> Optional[Dict[str, Any]]:
        for doc in self.applications:
            if doc["job_id"] == job_id and doc["user_id"] == user_id:
                return dict(doc)
        return None

    async def create_application(self, job_id: str, user_id: str, cover_letter: Optional[str]) -> Dict[str, Any]:
        doc = {
            "_id": f"a{len(self.applications) + 1:04d}",
            "job_id": job_id,
            "user_id": user_id,
            "cover_letter": cover_letter,
            "date_applied": self._clock.now(),
        }
        self.applications.append(doc)
        return dict(doc)


class FakeConnectionRepository:
    def __init__(self, clock: _Clock) -> None:
        self._clock = clock
        self.docs: List[Dict[str, Any]] = []

    async def create(self, user_id: str, connected_user_id: str) -> Dict[str, Any]:
        # mirrors the unique pair index
        if any({d["user_id"], d["connected_user_id"]} == {user_id, connected_user_id} for d in self.docs):
            raise DuplicateKeyError("E11000 duplicate key error collection: connections")
        doc = {
            "_id": f"c{len(self.docs) + 1:04d}",
            "user_id": user_id,
            "connected_user_id": connected_user_id,
            "status": "pending",
            "created_at": self._clock.now(),
        }
        self.docs.append(doc)
        return dict(doc)

    async def get(self, connection_id: str) -> Optional[Dict[str, Any]]:
        for doc in self.docs:
            if doc["_id"] == connection_id:
                return dict(doc)
        return None

    async def find_between(self, user_a: str, user_b: str) -> Optional[Dict[str, Any]]:
        for doc in self.docs:
            if {doc["user_id"], doc["connected_user_id"]} == {user_a, user_b}:
                return dict(doc)
        return None

    async def update_status(self, connection_id: str, status: str) -> bool:
        for doc in self.docs:
            if doc["_id"] == connection_id and doc["status"] != status:
                doc["status"] = status
                return True
        return False

    async def list_for_user(self, user_id: str) -> List[Dict[str, Any]]:
        return [dict(d) for d in self.docs if user_id in (d["user_id"], d["connected_user_id"])]


@dataclass
class FakeRepositories:
    clock: _Clock = field(default_factory=_Clock)
    users: FakeUserRepository = field(default_factory=FakeUserRepository)
    messages: FakeMessageRepository = None
    profiles: FakeProfileRepository = None
    jobs: FakeJobRepository = None
    connections: FakeConnectionRepository = None

    def __post_init__(self) -> None:
        self.messages = FakeMessageRepository(self.clock)
        self.profiles = FakeProfileRepository(self.clock)
        self.jobs = FakeJobRepository(self.clock)
        self.connections = FakeConnectionRepository(self.clock)


@pytest.fixture
def repos() -> FakeRepositories:
    return FakeRepositories()


@pytest.fixture
def chat_service(repos: FakeRepositories) -> ChatService:
    return ChatService(repos.messages)


@pytest.fixture
def connection_service(repos: FakeRepositories) -> ConnectionService:
    return ConnectionService(repos.connections, repos.profiles)


@pytest.fixture
def job_service(repos: FakeRepositories) -> JobService:
    return JobService(repos.jobs)


@pytest.fixture
def profile_service(repos: FakeRepositories) -> ProfileService:
    return ProfileService(repos.profiles)


@pytest.fixture
def user_service(repos: FakeRepositories) -> UserService:
    return UserService(repos.users)


@pytest.fixture
def app(repos: FakeRepositories):
    app = create_app()
    app.dependency_overrides[get_chat_service] = lambda: ChatService(repos.messages)
    app.dependency_overrides[get_connection_service] = lambda: ConnectionService(repos.connections, repos.profiles)
    app.dependency_overrides[get_job_service] = lambda: JobService(repos.jobs)
    app.dependency_overrides[get_profile_service] = lambda: ProfileService(repos.profiles)
    app.dependency_overrides[get_user_service] = lambda: UserService(repos.users)
    return app


@pytest.fixture
def client(app) -> TestClient:
    # not used as a context manager, so the lifespan never touches MongoDB
    return TestClient(app)


def auth_headers(user_id: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


@pytest.fixture
def headers():
    return auth_headers


@pytest.fixture
def seed_profiles(repos: FakeRepositories):
    """Create bare profiles so the given users can be invited to connect."""

    def seed(*user_ids: str) -> None:
        for user_id in user_ids:
            repos.profiles.docs[user_id] = {
                "_id": user_id,
                "full_name": user_id.title(),
                "subjects": [],
                "experience": 0,
                "created_at": repos.clock.now(),
            }

    return seed
