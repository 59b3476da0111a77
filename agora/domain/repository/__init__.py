"""Repository interfaces for the Agora voting engine.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from agora.domain.repository.comment import CommentRepository
from agora.domain.repository.poll import PollRepository
from agora.domain.repository.poll_vote import PollVoteRepository
from agora.domain.repository.post import PostRepository
from agora.domain.repository.reaction import ReactionRepository
from agora.domain.repository.side_vote import SideVoteRepository
from agora.domain.repository.unit_of_work import Transaction, UnitOfWork

__all__ = [
    "PostRepository",
    "CommentRepository",
    "PollRepository",
    "ReactionRepository",
    "SideVoteRepository",
    "PollVoteRepository",
    "Transaction",
    "UnitOfWork",
]
