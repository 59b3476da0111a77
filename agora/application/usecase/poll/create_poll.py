"""Create poll use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.application.usecase.poll.get_poll import PollResultsResponse
from agora.domain.service import PollService, build_poll_results
from agora.domain.value import PostId


class CreatePollRequest(BaseModel):
    """Create poll request."""

    post_id: str
    options: list[str]
    allow_multiple: bool = False
    max_choices: Optional[int] = None
    ends_at: Optional[datetime] = None


class CreatePollUseCase(BaseUseCase[CreatePollRequest, PollResultsResponse]):
    """Use case for attaching a poll to a POLL post."""

    def __init__(self, poll_service: PollService) -> None:
        """Initialize create poll use case.

        Args:
            poll_service: Poll domain service
        """
        self.poll_service = poll_service

    async def execute(self, request: CreatePollRequest) -> PollResultsResponse:
        """Execute create poll flow.

        Args:
            request: Create poll request

        Returns:
            The new poll with zeroed counters

        Raises:
            InvalidArgumentError: If the poll definition is invalid
            NotFoundError: If the post is missing or hidden
        """
        poll = await self.poll_service.create_poll(
            post_id=PostId(UUID(request.post_id)),
            options=request.options,
            allow_multiple=request.allow_multiple,
            max_choices=request.max_choices,
            ends_at=request.ends_at,
        )
        return PollResultsResponse.from_results(build_poll_results(poll))
