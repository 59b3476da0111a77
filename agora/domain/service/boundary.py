"""Consistency boundary for vote operations."""

from typing import Awaitable, Callable, TypeVar

import logfire

from agora.domain.error import ConflictError, InternalError
from agora.domain.repository import Transaction, UnitOfWork

from .base import Service

T = TypeVar("T")

Work = Callable[[Transaction], Awaitable[T]]


class ConsistencyBoundary(Service):
    """Runs one vote operation as one transaction.

    The work callable receives the open transaction and performs every step
    of the operation (lock, ledger change, recount, counter write). Callers
    get the result of a committed transaction or an exception; they never
    observe an intermediate state.

    A unique-constraint conflict means a concurrent request from the same
    voter inserted the row first. The whole unit is re-run in a fresh
    transaction, where the work sees that row and updates or deletes it
    instead of inserting.
    """

    def __init__(self, unit_of_work: UnitOfWork, max_attempts: int = 3) -> None:
        """Initialize the boundary.

        Args:
            unit_of_work: Transaction factory
            max_attempts: Attempts before a persistent conflict becomes an
                internal error
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.unit_of_work = unit_of_work
        self.max_attempts = max_attempts

    async def run(self, operation: str, work: Work[T], **attributes: str) -> T:
        """Execute ``work`` atomically.

        Args:
            operation: Operation name for tracing
            work: Coroutine function applied to the open transaction
            **attributes: Extra span attributes (ids as strings)

        Returns:
            Whatever ``work`` returned, after commit

        Raises:
            DomainError: Validation errors raised by ``work`` (rolled back)
            InternalError: Storage failure, or conflicts on every attempt
        """
        with logfire.span(
            "vote transaction {operation}", operation=operation, **attributes
        ):
            for attempt in range(1, self.max_attempts + 1):
                try:
                    async with self.unit_of_work.transaction() as tx:
                        return await work(tx)
                except ConflictError as e:
                    logfire.warn(
                        "Vote transaction conflicted",
                        operation=operation,
                        attempt=attempt,
                        error=str(e),
                    )

            logfire.error(
                "Vote transaction kept conflicting",
                operation=operation,
                attempts=self.max_attempts,
            )
            raise InternalError(
                f"{operation} did not complete after {self.max_attempts} attempts"
            )
