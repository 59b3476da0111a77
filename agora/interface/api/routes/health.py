"""Health check routes."""

from datetime import datetime, timezone
from typing import Literal

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from agora.config import Settings
from agora.domain.error import InternalError
from agora.domain.repository import UnitOfWork

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "degraded"]
    database: Literal["ok", "unavailable"]
    timestamp: datetime
    version: str
    environment: str


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings], unit_of_work: FromDishka[UnitOfWork]
) -> HealthResponse:
    """Report whether the service can open a vote transaction."""
    database: Literal["ok", "unavailable"] = "ok"
    try:
        async with unit_of_work.transaction():
            pass
    except InternalError:
        logfire.warn("Health check could not open a transaction")
        database = "unavailable"

    return HealthResponse(
        status="healthy" if database == "ok" else "degraded",
        database=database,
        timestamp=datetime.now(timezone.utc),
        version="0.1.0",
        environment=settings.environment,
    )
