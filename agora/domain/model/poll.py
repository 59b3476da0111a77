"""Poll aggregate.

A poll hangs off a POLL post and owns a fixed, ordered set of options.
Votes are ledger rows keyed by (user, poll, option); the poll's
``total_votes`` and each option's ``vote_count`` are denormalized from them.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, field_validator, model_validator

from agora.domain.model.common import DomainModel, utcnow
from agora.domain.value import PollId, PollOptionId, PollVoteId, PostId, UserId


class PollOption(DomainModel):
    """Poll option entity."""

    id: PollOptionId
    poll_id: PollId
    text: str = Field(min_length=1, max_length=100)
    order: int = Field(ge=0)
    vote_count: int = Field(default=0, ge=0)


class Poll(DomainModel):
    """Poll aggregate root.

    Voting policy:
    - allow_multiple=False: at most one option per voter
    - allow_multiple=True: any number, capped by max_choices when set
    - ends_at: no vote may be recorded after this instant
    """

    id: PollId
    post_id: PostId
    allow_multiple: bool = False
    max_choices: Optional[int] = Field(default=None, ge=1)
    ends_at: Optional[datetime] = None
    total_votes: int = Field(default=0, ge=0)
    options: list[PollOption] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)

    @field_validator("ends_at")
    @classmethod
    def assume_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Treat naive deadlines as UTC so comparisons never mix kinds."""
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @field_validator("options")
    @classmethod
    def order_options(cls, v: list[PollOption]) -> list[PollOption]:
        """Keep options sorted by their display order."""
        return sorted(v, key=lambda o: o.order)

    @model_validator(mode="after")
    def validate_option_ownership(self) -> "Poll":
        """Every option must point back at this poll."""
        if any(o.poll_id != self.id for o in self.options):
            raise ValueError("Poll options must belong to the poll")
        return self

    @property
    def option_ids(self) -> set[PollOptionId]:
        """Ids of the options this poll owns."""
        return {o.id for o in self.options}

    def has_ended(self, now: Optional[datetime] = None) -> bool:
        """Whether the deadline has passed.

        Voting exactly at ``ends_at`` is still allowed.
        """
        if self.ends_at is None:
            return False
        return (now or utcnow()) > self.ends_at


class PollVote(DomainModel):
    """One selected option of one voter."""

    id: PollVoteId
    user_id: UserId
    poll_id: PollId
    option_id: PollOptionId
    created_at: datetime = Field(default_factory=utcnow)
