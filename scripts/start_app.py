#!/usr/bin/env python3
"""Serve the voting API with uvicorn.

The app is built through its factory inside the server process, after
logging and Logfire are configured here.
"""

import sys

import logfire
import uvicorn

from agora.config import Settings
from agora.util.logging import setup_logging
from agora.util.observability import configure_logfire

APP_FACTORY = "agora.interface.api.app:create_app"


def main() -> int:
    """Configure observability and run the server until it exits."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Serving {factory} on {host}:{port}",
        factory=APP_FACTORY,
        host=settings.host,
        port=settings.port,
    )
    try:
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("Application startup failed")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
