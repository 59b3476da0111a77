"""Poll vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from agora.domain.model.poll import PollVote
from agora.domain.value import PollId, PollOptionId, UserId


class PollVoteRepository(ABC):
    """Ledger of selected poll options.

    A voter owns one row per selected option. How many rows a voter may hold
    depends on the poll's policy, which the poll service enforces; the
    storage layer only guarantees (user, poll, option) uniqueness.
    """

    @abstractmethod
    async def find_by_user_and_poll(
        self, user_id: UserId, poll_id: PollId
    ) -> List[PollVote]:
        """Find a voter's current selection on a poll.

        Args:
            user_id: The voter's ID
            poll_id: The poll's ID

        Returns:
            The voter's rows, possibly empty
        """
        pass

    @abstractmethod
    async def delete_by_user_and_poll(self, user_id: UserId, poll_id: PollId) -> int:
        """Delete a voter's whole selection on a poll.

        Args:
            user_id: The voter's ID
            poll_id: The poll's ID

        Returns:
            Number of rows deleted
        """
        pass

    @abstractmethod
    async def save_many(self, votes: Sequence[PollVote]) -> List[PollVote]:
        """Insert poll votes.

        Args:
            votes: Rows to insert

        Returns:
            The saved rows

        Raises:
            IntegrityError: If a (user, poll, option) row already exists
        """
        pass

    @abstractmethod
    async def count_by_option(self, poll_id: PollId) -> dict[PollOptionId, int]:
        """Count rows per option of a poll.

        Options without votes are absent from the result.

        Args:
            poll_id: The poll's ID

        Returns:
            Mapping of option ID to number of rows
        """
        pass

    @abstractmethod
    async def count_by_poll(self, poll_id: PollId) -> int:
        """Count all rows of a poll.

        Args:
            poll_id: The poll's ID

        Returns:
            Number of rows
        """
        pass
