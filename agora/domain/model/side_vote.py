"""Side-vote ledger record for VS posts."""

from datetime import datetime

from pydantic import Field

from agora.domain.model.common import DomainModel, utcnow
from agora.domain.value import PostId, SideVoteId, UserId, VsSide


class SideVote(DomainModel):
    """One user's pick of side A or B on a VS post.

    Unique per (user_id, post_id).
    """

    id: SideVoteId
    user_id: UserId
    post_id: PostId
    side: VsSide
    created_at: datetime = Field(default_factory=utcnow)
