"""Domain value objects for Agora."""

from agora.domain.value.identifiers import (
    CommentId,
    PollId,
    PollOptionId,
    PollVoteId,
    PostId,
    ReactionId,
    SideVoteId,
    UserId,
)
from agora.domain.value.tally import (
    PollOptionResult,
    PollResults,
    ReactionCounts,
    SideVoteCounts,
    percentage_of,
)
from agora.domain.value.types import PostType, ReactionType, TargetType, VsSide

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "PollId",
    "PollOptionId",
    "ReactionId",
    "SideVoteId",
    "PollVoteId",
    # Types
    "PostType",
    "ReactionType",
    "TargetType",
    "VsSide",
    # Tallies
    "ReactionCounts",
    "SideVoteCounts",
    "PollOptionResult",
    "PollResults",
    "percentage_of",
]
