"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .poll import InMemoryPollRepository
from .poll_vote import InMemoryPollVoteRepository
from .post import InMemoryPostRepository
from .reaction import InMemoryReactionRepository
from .side_vote import InMemorySideVoteRepository
from .store import InMemoryStore
from .unit_of_work import InMemoryTransaction, InMemoryUnitOfWork

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryPollRepository",
    "InMemoryPollVoteRepository",
    "InMemoryPostRepository",
    "InMemoryReactionRepository",
    "InMemorySideVoteRepository",
    "InMemoryStore",
    "InMemoryTransaction",
    "InMemoryUnitOfWork",
]
