"""In-memory unit of work for testing.

Transactions are serialized by one lock, which stands in for the row locks
the database takes. A failed transaction restores the snapshot taken when it
began.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from agora.domain.error import ConflictError, InternalError
from agora.domain.repository import Transaction, UnitOfWork

from .comment import InMemoryCommentRepository
from .poll import InMemoryPollRepository
from .poll_vote import InMemoryPollVoteRepository
from .post import InMemoryPostRepository
from .reaction import InMemoryReactionRepository
from .side_vote import InMemorySideVoteRepository
from .store import InMemoryStore


class InMemoryTransaction(Transaction):
    """Repositories over the shared store."""

    def __init__(self, store: InMemoryStore) -> None:
        self.posts = InMemoryPostRepository(store)
        self.comments = InMemoryCommentRepository(store)
        self.polls = InMemoryPollRepository(store)
        self.reactions = InMemoryReactionRepository(store)
        self.side_votes = InMemorySideVoteRepository(store)
        self.poll_votes = InMemoryPollVoteRepository(store)


class InMemoryUnitOfWork(UnitOfWork):
    """In-memory implementation of UnitOfWork for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self.store = store or InMemoryStore()
        self._lock = asyncio.Lock()
        self.commits = 0
        self.rollbacks = 0

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[Transaction]:
        """Run one transaction against the store."""
        async with self._lock:
            snapshot = self.store.snapshot()
            try:
                yield InMemoryTransaction(self.store)
            except IntegrityError as e:
                self._rollback(snapshot)
                raise ConflictError(str(e)) from e
            except SQLAlchemyError as e:
                self._rollback(snapshot)
                raise InternalError("Database error") from e
            except BaseException:
                self._rollback(snapshot)
                raise
            self.commits += 1

    def _rollback(self, snapshot: InMemoryStore) -> None:
        self.store.restore(snapshot)
        self.rollbacks += 1
