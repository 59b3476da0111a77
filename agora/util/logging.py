"""Stdlib logging for libraries that do not log through Logfire."""

import logging
import sys

from agora.config import Settings

# Loggers that are chatty at INFO under vote traffic
NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "asyncpg", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger.

    Application events go through Logfire; this only governs what
    third-party libraries print.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        stream=sys.stdout,
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
