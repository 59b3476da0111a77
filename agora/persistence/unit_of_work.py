"""SQLAlchemy unit of work.

Each transaction gets its own session, so concurrent vote operations never
share connection state. Storage exceptions are translated to domain errors
at this boundary.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from agora.domain.error import ConflictError, InternalError
from agora.domain.repository import Transaction, UnitOfWork
from agora.persistence.repository import (
    PostgresCommentRepository,
    PostgresPollRepository,
    PostgresPollVoteRepository,
    PostgresPostRepository,
    PostgresReactionRepository,
    PostgresSideVoteRepository,
)

# serialization_failure, deadlock_detected
RETRYABLE_SQLSTATES = frozenset({"40001", "40P01"})


class SqlAlchemyTransaction(Transaction):
    """Repositories sharing one session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.posts = PostgresPostRepository(session)
        self.comments = PostgresCommentRepository(session)
        self.polls = PostgresPollRepository(session)
        self.reactions = PostgresReactionRepository(session)
        self.side_votes = PostgresSideVoteRepository(session)
        self.poll_votes = PostgresPollVoteRepository(session)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """UnitOfWork backed by an async session factory."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize with a session factory.

        Args:
            session_factory: Factory for creating database sessions
        """
        self.session_factory = session_factory

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[Transaction]:
        """Open a session and a transaction; commit on success."""
        try:
            async with self.session_factory() as session, session.begin():
                yield SqlAlchemyTransaction(session)
        except IntegrityError as e:
            logfire.warn("Transaction rolled back on conflict", error=str(e.orig))
            raise ConflictError(str(e.orig)) from e
        except DBAPIError as e:
            if getattr(e.orig, "sqlstate", None) in RETRYABLE_SQLSTATES:
                logfire.warn("Transaction rolled back on contention", error=str(e.orig))
                raise ConflictError(str(e.orig)) from e
            logfire.error("Database error", error=str(e))
            raise InternalError("Database error") from e
        except SQLAlchemyError as e:
            logfire.error("Database error", error=str(e))
            raise InternalError("Database error") from e
