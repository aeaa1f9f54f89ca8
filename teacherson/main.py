import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from teacherson.core.config import get_settings
from teacherson.core.error_handlers import register_exception_handlers
from teacherson.core.logging import setup_logging
from teacherson.database.connection import close_mongo_connection, connect_to_mongo, get_database
from teacherson.repositories.connection_repository import ConnectionRepository
from teacherson.repositories.job_repository import JobRepository
from teacherson.repositories.message_repository import MessageRepository
from teacherson.repositories.user_repository import UserRepository
from teacherson.routers.auth import router as auth_router
from teacherson.routers.connections import router as connections_router
from teacherson.routers.conversations import router as conversations_router
from teacherson.routers.health import router as health_router
from teacherson.routers.jobs import router as jobs_router
from teacherson.routers.messages import router as messages_router
from teacherson.routers.profiles import router as profiles_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):

    await connect_to_mongo()
    db = get_database()
    for repo in (UserRepository(db), MessageRepository(db), JobRepository(db), ConnectionRepository(db)):
        await repo.ensure_indexes()
    logger.info("Startup complete")
    try:
        yield
    finally:
        await close_mongo_connection()


def create_app() -> FastAPI:
    setup_logging()
    settings = get_settings()
    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(profiles_router)
    app.include_router(jobs_router)
    app.include_router(connections_router)
    app.include_router(messages_router)
    app.include_router(conversations_router)
    return app


app = create_app()
