import logging
from typing import Iterable, List

from pymongo.errors import DuplicateKeyError

from teacherson.core.exceptions import (
    PermissionDeniedError,
    ResourceAlreadyExistsError,
    ResourceNotFoundError,
    ValidationError,
)
from teacherson.repositories.connection_repository import ConnectionRepository
from teacherson.repositories.profile_repository import ProfileRepository
from teacherson.schemas.connection import ConnectionPublic, NetworkStatus

logger = logging.getLogger(__name__)


def _involves(conn: ConnectionPublic, other_id: str) -> bool:
    return conn.user_id == other_id or conn.connected_user_id == other_id


def is_connected(connections: Iterable[ConnectionPublic], other_id: str) -> bool:
    return any(_involves(c, other_id) and c.status == "accepted" for c in connections)


def has_pending_request(connections: Iterable[ConnectionPublic], other_id: str) -> bool:
    return any(_involves(c, other_id) and c.status == "pending" for c in connections)


def connection_status(connections: List[ConnectionPublic], other_id: str) -> NetworkStatus:
    """Badge shown next to another educator on the network page."""
    if is_connected(connections, other_id):
        return "connected"
    if has_pending_request(connections, other_id):
        return "pending"
    return "none"


class ConnectionService:
    def __init__(self, connection_repo: ConnectionRepository, profile_repo: ProfileRepository):
        self.connection_repo = connection_repo
        self.profile_repo = profile_repo

    async def list_connections(self, user_id: str) -> List[ConnectionPublic]:
        docs = await self.connection_repo.list_for_user(user_id)
        return [ConnectionPublic.model_validate(d) for d in docs]

    async def request_connection(self, user_id: str, connected_user_id: str) -> ConnectionPublic:
        if user_id == connected_user_id:
            raise ValueError("Cannot connect with yourself")
        # only educators with a profile can be invited
        if not await self.profile_repo.get(connected_user_id):
            raise ResourceNotFoundError("Profile", connected_user_id)
        existing = await self.connection_repo.find_between(user_id, connected_user_id)
        if existing:
            raise ResourceAlreadyExistsError("Connection", existing["_id"])
        try:
            doc = await self.connection_repo.create(user_id, connected_user_id)
        except DuplicateKeyError:
            # the other side asked at the same time
            raise ResourceAlreadyExistsError("Connection", f"{user_id}:{connected_user_id}")
        logger.info("Connection request %s from %s to %s", doc["_id"], user_id, connected_user_id)
        return ConnectionPublic.model_validate(doc)

    async def accept_connection(self, connection_id: str, user_id: str) -> ConnectionPublic:
        doc = await self.connection_repo.get(connection_id)
        if not doc:
            raise ResourceNotFoundError("Connection", connection_id)
        # only the addressee accepts
        if doc["connected_user_id"] != user_id:
            raise PermissionDeniedError("Only the invited user can accept this request")
        if doc["status"] != "pending":
            raise ValidationError("Connection request is not pending", field="status")
        await self.connection_repo.update_status(connection_id, "accepted")
        doc["status"] = "accepted"
        logger.info("Connection %s accepted by %s", connection_id, user_id)
        return ConnectionPublic.model_validate(doc)
