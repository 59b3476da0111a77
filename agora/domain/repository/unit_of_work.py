"""Unit of work interface.

A vote is applied as one indivisible unit: lock the target, read the voter's
ledger rows, change them, recount the target's counters from the ledger and
write those counters. ``UnitOfWork.transaction()`` is the only way to obtain
repositories, so every one of those steps runs against the same transaction.
"""

from abc import ABC, abstractmethod
from typing import AsyncContextManager

from agora.domain.repository.comment import CommentRepository
from agora.domain.repository.poll import PollRepository
from agora.domain.repository.poll_vote import PollVoteRepository
from agora.domain.repository.post import PostRepository
from agora.domain.repository.reaction import ReactionRepository
from agora.domain.repository.side_vote import SideVoteRepository


class Transaction(ABC):
    """Repositories bound to one open storage transaction."""

    posts: PostRepository
    comments: CommentRepository
    polls: PollRepository
    reactions: ReactionRepository
    side_votes: SideVoteRepository
    poll_votes: PollVoteRepository


class UnitOfWork(ABC):
    """Factory for transactions.

    Implementations commit when the ``async with`` block exits normally and
    roll back when it raises. Storage errors leave the block as domain
    errors: a unique-constraint violation as ``ConflictError``, anything else
    as ``InternalError``. Domain errors raised inside the block pass through
    unchanged after the rollback.
    """

    @abstractmethod
    def transaction(self) -> AsyncContextManager[Transaction]:
        """Open a new transaction.

        Usage:
            async with uow.transaction() as tx:
                post = await tx.posts.lock(post_id)
                ...
        """
        pass
