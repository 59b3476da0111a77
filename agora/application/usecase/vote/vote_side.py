"""VS side vote use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.domain.service import SideVoteService
from agora.domain.value import PostId, UserId


class VoteSideRequest(BaseModel):
    """Side vote request."""

    user_id: str
    post_id: str
    side: str  # A or B, any case


class VoteSideResponse(BaseModel):
    """Side vote response."""

    votes_a: int
    votes_b: int


class VoteSideUseCase(BaseUseCase[VoteSideRequest, VoteSideResponse]):
    """Use case for picking a side on a VS post."""

    def __init__(self, side_vote_service: SideVoteService) -> None:
        self.side_vote_service = side_vote_service

    async def execute(self, request: VoteSideRequest) -> VoteSideResponse:
        """Execute side vote flow."""
        counts = await self.side_vote_service.vote_side(
            user_id=UserId(UUID(request.user_id)),
            post_id=PostId(UUID(request.post_id)),
            side=request.side,
        )
        return VoteSideResponse(votes_a=counts.votes_a, votes_b=counts.votes_b)
