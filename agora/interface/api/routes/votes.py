"""Vote routes.

Reactions and side votes are toggles: sending the current choice again
removes it. Poll votes replace the caller's whole selection.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from agora.application.usecase.poll import PollResultsResponse
from agora.application.usecase.vote import (
    ToggleReactionRequest,
    ToggleReactionResponse,
    ToggleReactionUseCase,
    VotePollRequest,
    VotePollUseCase,
    VoteSideRequest,
    VoteSideResponse,
    VoteSideUseCase,
)
from agora.domain.value import TargetType
from agora.interface.api.routes.auth import require_user_id

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class ReactionBody(BaseModel):
    """Reaction request body."""

    type: str  # UPVOTE or DOWNVOTE


class SideVoteBody(BaseModel):
    """Side vote request body."""

    side: str  # A or B


class PollVoteBody(BaseModel):
    """Poll vote request body."""

    option_ids: list[str] = Field(default_factory=list)


@router.post("/posts/{post_id}/react", response_model=ToggleReactionResponse)
async def react_to_post(
    post_id: UUID,
    body: ReactionBody,
    toggle_reaction_use_case: FromDishka[ToggleReactionUseCase],
    user_id: str = Depends(require_user_id),
) -> ToggleReactionResponse:
    """Toggle the caller's reaction on a post.

    Args:
        post_id: Post UUID
        body: Reaction type
        toggle_reaction_use_case: Toggle reaction use case from DI
        user_id: Caller from the X-User-Id header

    Returns:
        The post's counters after the toggle
    """
    request = ToggleReactionRequest(
        user_id=user_id,
        target_type=TargetType.POST.value,
        target_id=str(post_id),
        reaction_type=body.type,
    )
    return await toggle_reaction_use_case.execute(request)


@router.post("/comments/{comment_id}/react", response_model=ToggleReactionResponse)
async def react_to_comment(
    comment_id: UUID,
    body: ReactionBody,
    toggle_reaction_use_case: FromDishka[ToggleReactionUseCase],
    user_id: str = Depends(require_user_id),
) -> ToggleReactionResponse:
    """Toggle the caller's reaction on a comment."""
    request = ToggleReactionRequest(
        user_id=user_id,
        target_type=TargetType.COMMENT.value,
        target_id=str(comment_id),
        reaction_type=body.type,
    )
    return await toggle_reaction_use_case.execute(request)


@router.post("/posts/{post_id}/vs-vote", response_model=VoteSideResponse)
async def vote_side(
    post_id: UUID,
    body: SideVoteBody,
    vote_side_use_case: FromDishka[VoteSideUseCase],
    user_id: str = Depends(require_user_id),
) -> VoteSideResponse:
    """Toggle the caller's side on a VS post."""
    request = VoteSideRequest(user_id=user_id, post_id=str(post_id), side=body.side)
    return await vote_side_use_case.execute(request)


@router.post("/polls/{poll_id}/vote", response_model=PollResultsResponse)
async def vote_poll(
    poll_id: UUID,
    body: PollVoteBody,
    vote_poll_use_case: FromDishka[VotePollUseCase],
    user_id: str = Depends(require_user_id),
) -> PollResultsResponse:
    """Replace the caller's selection on a poll.

    An empty ``option_ids`` list clears the caller's vote.
    """
    request = VotePollRequest(
        user_id=user_id, poll_id=str(poll_id), option_ids=body.option_ids
    )
    return await vote_poll_use_case.execute(request)
