import logging

from teacherson.core.config import get_settings


def setup_logging() -> None:
    """Configure the root logger from settings."""
    logging.basicConfig(
        level=get_settings().LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
