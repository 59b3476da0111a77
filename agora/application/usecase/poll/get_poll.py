"""Get poll results use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.domain.service import PollService
from agora.domain.value import PollId, PollResults, UserId


class PollOptionResponse(BaseModel):
    """One option in a poll response."""

    id: str
    text: str
    vote_count: int
    percentage: int
    order: int


class PollResultsResponse(BaseModel):
    """Poll results response."""

    poll_id: str
    total_votes: int
    has_ended: bool
    options: list[PollOptionResponse]
    my_option_ids: list[str]

    @classmethod
    def from_results(cls, results: PollResults) -> "PollResultsResponse":
        """Build the response from a domain snapshot."""
        return cls(
            poll_id=str(results.poll_id),
            total_votes=results.total_votes,
            has_ended=results.has_ended,
            options=[
                PollOptionResponse(
                    id=str(option.id),
                    text=option.text,
                    vote_count=option.vote_count,
                    percentage=option.percentage,
                    order=option.order,
                )
                for option in results.options
            ],
            my_option_ids=[str(option_id) for option_id in results.my_option_ids],
        )


class GetPollRequest(BaseModel):
    """Get poll request."""

    poll_id: str
    user_id: Optional[str] = None  # Include this caller's selection


class GetPollUseCase(BaseUseCase[GetPollRequest, PollResultsResponse]):
    """Use case for reading a poll's results."""

    def __init__(self, poll_service: PollService) -> None:
        """Initialize get poll use case.

        Args:
            poll_service: Poll domain service
        """
        self.poll_service = poll_service

    async def execute(self, request: GetPollRequest) -> PollResultsResponse:
        """Execute get poll flow.

        Raises:
            NotFoundError: If the poll does not exist
        """
        user_id = UserId(UUID(request.user_id)) if request.user_id else None
        results = await self.poll_service.get_poll_results(
            PollId(UUID(request.poll_id)), user_id=user_id
        )
        return PollResultsResponse.from_results(results)
