import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Runtime configuration.
    Read from environment variables prefixed with TEACHERSON_ (e.g. TEACHERSON_MONGO_URL)
    or from a local .env file.
    """

    model_config = SettingsConfigDict(env_prefix="TEACHERSON_", env_file=".env", extra="ignore")

    PROJECT_NAME: str = "Teacherson API"
    LOG_LEVEL: str = "INFO"

    # MongoDB
    MONGO_URL: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "teacherson"
    MONGO_TIMEOUT_MS: int = 5000

    # Access tokens
    JWT_SECRET_KEY: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # accepts "a,b" or a list
    CORS_ORIGINS: str | list[str] = "*"

    @field_validator("CORS_ORIGINS", mode="after")
    @classmethod
    def split_origins(cls, v: str | list[str]) -> list[str]:
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache()
def get_settings() -> Settings:
    settings = Settings()
    if settings.JWT_SECRET_KEY == "change-me":
        logger.warning("TEACHERSON_JWT_SECRET_KEY is not set, using the development default")
    return settings
