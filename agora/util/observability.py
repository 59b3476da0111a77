"""Observability configuration using Logfire.

Every vote operation runs inside a ``vote transaction {operation}`` span
opened by the consistency boundary. HTTP requests and SQL statements are
traced through Logfire's FastAPI and SQLAlchemy integrations, so a single
trace shows the request, the row lock, the ledger change and the recount.
"""

from typing import Any, Optional

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine
from starlette.requests import Request

from agora.config import Settings

SERVICE_NAME = "agora-votes"

# Health checks hit this every few seconds; tracing them only adds noise
UNTRACED_URLS = "/health"


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Telemetry goes to Logfire cloud when OBSERVABILITY__SEND_TO_LOGFIRE is
    true, or when it is unset and OBSERVABILITY__LOGFIRE_TOKEN is present.
    Otherwise spans are only printed to the console.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = observability.send_to_logfire
    if send_to_logfire is None:
        send_to_logfire = bool(observability.logfire_token)

    config_kwargs: dict[str, Any] = {
        "service_name": SERVICE_NAME,
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if observability.logfire_token:
        config_kwargs["token"] = observability.logfire_token

    logfire.configure(**config_kwargs)
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _voter_attributes(
    request: Request, attributes: dict[str, Any]
) -> Optional[dict[str, Any]]:
    """Tag request spans with the voter forwarded by the gateway."""
    voter = request.headers.get("x-user-id")
    if voter:
        return {**attributes, "user_id": voter}
    return attributes


def instrument_fastapi(app: FastAPI) -> None:
    """Trace HTTP requests of an application.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_voter_attributes,
        excluded_urls=UNTRACED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements, including the ``FOR UPDATE`` locks of votes.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented", service=SERVICE_NAME)
