"""Count snapshots returned by the voting engine.

Each snapshot is read back from the counters the recalculator just wrote,
inside the same transaction, so its numbers always agree with the ledger.
"""

from pydantic import Field, computed_field

from agora.domain.value.common import ValueObject
from agora.domain.value.identifiers import PollId, PollOptionId


def percentage_of(vote_count: int, total_votes: int) -> int:
    """Share of ``total_votes`` held by ``vote_count``, rounded half up.

    Returns 0 for a poll nobody has voted on.
    """
    if total_votes <= 0:
        return 0
    # floor(100 * v / t + 1/2) in integer arithmetic
    return (200 * vote_count + total_votes) // (2 * total_votes)


class ReactionCounts(ValueObject):
    """Upvote/downvote counters of a post or comment."""

    upvotes: int = Field(ge=0)
    downvotes: int = Field(ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def score(self) -> int:
        """Net score shown next to the reaction buttons."""
        return self.upvotes - self.downvotes


class SideVoteCounts(ValueObject):
    """Side counters of a VS post."""

    votes_a: int = Field(ge=0)
    votes_b: int = Field(ge=0)


class PollOptionResult(ValueObject):
    """One option's line in a poll result."""

    id: PollOptionId
    text: str
    vote_count: int = Field(ge=0)
    percentage: int = Field(ge=0, le=100)
    order: int = Field(ge=0)


class PollResults(ValueObject):
    """Poll counters with per-option percentages, options in display order."""

    poll_id: PollId
    total_votes: int = Field(ge=0)
    has_ended: bool = False
    options: list[PollOptionResult]
    my_option_ids: list[PollOptionId] = Field(default_factory=list)
