"""Post aggregate root.

Posts are the primary votable target. Besides up/down reactions, VS posts
carry two named sides and POLL posts own a poll.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from agora.domain.model.common import DomainModel, utcnow
from agora.domain.value import PostId, PostType, UserId


class Post(DomainModel):
    """Post aggregate root.

    The four counters are denormalized from the reaction and side-vote
    ledgers and are only ever written by the tally recalculator.
    """

    id: PostId
    type: PostType = PostType.TEXT
    title: str = Field(min_length=1, max_length=160)
    author_id: UserId
    side_a: Optional[str] = None
    side_b: Optional[str] = None
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    votes_a: int = Field(default=0, ge=0)
    votes_b: int = Field(default=0, ge=0)
    is_hidden: bool = False
    created_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def validate_sides(self) -> "Post":
        """VS posts need both sides."""
        if self.type == PostType.VS and not (self.side_a and self.side_b):
            raise ValueError("side_a and side_b are required for VS posts")
        return self

    @property
    def score(self) -> int:
        """Net reaction score."""
        return self.upvotes - self.downvotes
