"""Comment entity."""

from datetime import datetime

from pydantic import Field

from agora.domain.model.common import DomainModel, utcnow
from agora.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment on a post; receives the same up/down reactions as posts."""

    id: CommentId
    post_id: PostId
    author_id: UserId
    text: str = Field(min_length=1, max_length=10000)
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    is_hidden: bool = False
    created_at: datetime = Field(default_factory=utcnow)
