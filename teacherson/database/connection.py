import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from teacherson.core.config import get_settings

logger = logging.getLogger(__name__)

_client: Optional[AsyncIOMotorClient] = None


async def connect_to_mongo() -> None:
    global _client
    if _client is not None:
        return
    settings = get_settings()
    _client = AsyncIOMotorClient(settings.MONGO_URL, serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS, tz_aware=True)
    logger.info("MongoDB client created for database %s", settings.MONGO_DB_NAME)


async def close_mongo_connection() -> None:
    global _client
    if _client is None:
        return
    _client.close()
    _client = None
    logger.info("MongoDB client closed")


def get_database() -> AsyncIOMotorDatabase:
    if _client is None:
        raise RuntimeError("MongoDB client is not initialised; call connect_to_mongo() first")
    return _client[get_settings().MONGO_DB_NAME]


async def mongo_db_dependency() -> AsyncIOMotorDatabase:
    return get_database()


async def ping() -> bool:
    try:
        await get_database().command("ping")
    except Exception:
        logger.exception("MongoDB ping failed")
        return False
    return True
