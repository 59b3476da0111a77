"""Domain value types for Agora.

Value objects are immutable and defined by their values, not identity.
The enums below are the closed vocabularies a vote intent may use.
"""

from enum import Enum
from typing import TypeVar

from agora.domain.error import InvalidArgumentError

E = TypeVar("E", bound="VoteEnum")


class VoteEnum(str, Enum):
    """String enum that parses caller input case-insensitively."""

    @classmethod
    def parse(cls: type[E], raw: object) -> E:
        """Parse a raw value into a member.

        Args:
            raw: Member, or its string value in any case

        Returns:
            The matching member

        Raises:
            InvalidArgumentError: If the value is not a member
        """
        if isinstance(raw, cls):
            return raw
        value = str(raw if raw is not None else "").strip().upper()
        try:
            return cls(value)
        except ValueError:
            allowed = " or ".join(member.value for member in cls)
            raise InvalidArgumentError(f"{cls.__name__} must be {allowed}")


class ReactionType(VoteEnum):
    """Simple reaction on a post or comment."""

    UPVOTE = "UPVOTE"
    DOWNVOTE = "DOWNVOTE"


class VsSide(VoteEnum):
    """Side of a VS post."""

    A = "A"
    B = "B"


class TargetType(VoteEnum):
    """Type of entity that can receive a reaction."""

    POST = "POST"
    COMMENT = "COMMENT"


class PostType(VoteEnum):
    """Kind of post.

    VS posts accept side votes; POLL posts own exactly one poll.
    """

    TEXT = "TEXT"
    VS = "VS"
    POLL = "POLL"
