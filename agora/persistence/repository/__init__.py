"""PostgreSQL repository implementations."""

from agora.persistence.repository.comment import PostgresCommentRepository
from agora.persistence.repository.poll import PostgresPollRepository
from agora.persistence.repository.poll_vote import PostgresPollVoteRepository
from agora.persistence.repository.post import PostgresPostRepository
from agora.persistence.repository.reaction import PostgresReactionRepository
from agora.persistence.repository.side_vote import PostgresSideVoteRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresPollRepository",
    "PostgresReactionRepository",
    "PostgresSideVoteRepository",
    "PostgresPollVoteRepository",
]
