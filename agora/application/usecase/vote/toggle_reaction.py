"""Toggle reaction use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.domain.service import ReactionService
from agora.domain.value import UserId


class ToggleReactionRequest(BaseModel):
    """Toggle reaction request."""

    user_id: str  # User ID from the authenticated caller
    target_type: str  # POST or COMMENT, any case
    target_id: str  # UUID string
    reaction_type: str  # UPVOTE or DOWNVOTE, any case


class ToggleReactionResponse(BaseModel):
    """Toggle reaction response."""

    upvotes: int
    downvotes: int
    score: int


class ToggleReactionUseCase(
    BaseUseCase[ToggleReactionRequest, ToggleReactionResponse]
):
    """Use case for reacting to a post or comment."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize toggle reaction use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: ToggleReactionRequest) -> ToggleReactionResponse:
        """Execute toggle reaction flow.

        Args:
            request: Toggle reaction request

        Returns:
            The target's counters after the toggle

        Raises:
            InvalidArgumentError: If target or reaction type is unknown
            NotFoundError: If the target is missing or hidden
        """
        counts = await self.reaction_service.toggle_reaction(
            user_id=UserId(UUID(request.user_id)),
            target_type=request.target_type,
            target_id=UUID(request.target_id),
            reaction_type=request.reaction_type,
        )

        return ToggleReactionResponse(
            upvotes=counts.upvotes,
            downvotes=counts.downvotes,
            score=counts.score,
        )
