"""Strongly typed identifiers for Agora domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Votable targets
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
PollId = NewType("PollId", UUID)
PollOptionId = NewType("PollOptionId", UUID)

# Ledger records
ReactionId = NewType("ReactionId", UUID)
SideVoteId = NewType("SideVoteId", UUID)
PollVoteId = NewType("PollVoteId", UUID)

# Voters are authenticated upstream; only their id reaches the engine
UserId = NewType("UserId", UUID)
