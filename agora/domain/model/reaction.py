"""Reaction ledger record."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from agora.domain.model.common import DomainModel, utcnow
from agora.domain.value import ReactionId, ReactionType, TargetType, UserId


class Reaction(DomainModel):
    """One user's up/down reaction on a post or comment.

    Business rules:
    - One reaction per user per target (enforced by database unique constraint)
    - Repeating the same reaction removes it, the other one switches it
    """

    id: ReactionId
    user_id: UserId
    target_type: TargetType
    target_id: UUID  # PostId or CommentId (both are UUIDs)
    type: ReactionType
    created_at: datetime = Field(default_factory=utcnow)
