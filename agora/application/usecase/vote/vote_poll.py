"""Poll vote use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from agora.application.usecase.base import BaseUseCase
from agora.application.usecase.poll.get_poll import PollResultsResponse
from agora.domain.service import PollService
from agora.domain.value import PollId, UserId


class VotePollRequest(BaseModel):
    """Poll vote request."""

    user_id: str
    poll_id: str
    option_ids: list[str] = Field(default_factory=list)  # complete new selection


class VotePollUseCase(BaseUseCase[VotePollRequest, PollResultsResponse]):
    """Use case for replacing a voter's selection on a poll."""

    def __init__(self, poll_service: PollService) -> None:
        """Initialize poll vote use case.

        Args:
            poll_service: Poll domain service
        """
        self.poll_service = poll_service

    async def execute(self, request: VotePollRequest) -> PollResultsResponse:
        """Execute poll vote flow.

        Args:
            request: Poll vote request

        Returns:
            Poll results after the vote

        Raises:
            NotFoundError: If the poll does not exist
            PollEndedError: If the poll has ended
            InvalidOptionError: If an option is not one of the poll's
            MultipleNotAllowedError: If a single-select poll gets several
            TooManyChoicesError: If max_choices is exceeded
        """
        results = await self.poll_service.vote_poll(
            user_id=UserId(UUID(request.user_id)),
            poll_id=PollId(UUID(request.poll_id)),
            option_ids=request.option_ids,
        )
        return PollResultsResponse.from_results(results)
