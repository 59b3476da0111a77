"""Poll routes."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from agora.application.usecase.poll import (
    CreatePollRequest,
    CreatePollUseCase,
    GetPollRequest,
    GetPollUseCase,
    PollResultsResponse,
)
from agora.interface.api.routes.auth import optional_user_id, require_user_id

router = APIRouter(tags=["polls"], route_class=DishkaRoute)


class CreatePollBody(BaseModel):
    """Poll definition."""

    options: list[str]
    allow_multiple: bool = False
    max_choices: Optional[int] = None
    ends_at: Optional[datetime] = None


@router.post(
    "/posts/{post_id}/poll",
    response_model=PollResultsResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_poll(
    post_id: UUID,
    body: CreatePollBody,
    create_poll_use_case: FromDishka[CreatePollUseCase],
    user_id: str = Depends(require_user_id),
) -> PollResultsResponse:
    """Attach a poll to a POLL post.

    Args:
        post_id: Post UUID
        body: Options and voting policy
        create_poll_use_case: Create poll use case from DI
        user_id: Caller from the X-User-Id header

    Returns:
        The new poll with zeroed counters
    """
    request = CreatePollRequest(
        post_id=str(post_id),
        options=body.options,
        allow_multiple=body.allow_multiple,
        max_choices=body.max_choices,
        ends_at=body.ends_at,
    )
    return await create_poll_use_case.execute(request)


@router.get("/polls/{poll_id}", response_model=PollResultsResponse)
async def get_poll(
    poll_id: UUID,
    get_poll_use_case: FromDishka[GetPollUseCase],
    user_id: Optional[str] = Depends(optional_user_id),
) -> PollResultsResponse:
    """Read a poll's results, with the caller's selection when identified."""
    request = GetPollRequest(poll_id=str(poll_id), user_id=user_id)
    return await get_poll_use_case.execute(request)
