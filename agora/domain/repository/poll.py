"""Poll repository interface."""

from abc import ABC, abstractmethod
from typing import Mapping, Optional

from agora.domain.model.poll import Poll
from agora.domain.value import PollId, PollOptionId, PostId


class PollRepository(ABC):
    """Repository for Poll aggregate (poll plus its options)."""

    @abstractmethod
    async def find_by_id(self, poll_id: PollId) -> Optional[Poll]:
        """Find a poll with its options.

        Args:
            poll_id: The poll's unique identifier

        Returns:
            The poll if found, None otherwise
        """
        pass

    @abstractmethod
    async def lock(self, poll_id: PollId) -> Optional[Poll]:
        """Find a poll with its options and hold a row lock on the poll.

        Args:
            poll_id: The poll's unique identifier

        Returns:
            The poll if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> Optional[Poll]:
        """Find the poll attached to a post.

        Args:
            post_id: The owning post's ID

        Returns:
            The poll if the post has one, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, poll: Poll) -> Poll:
        """Insert a poll together with its options.

        Args:
            poll: The poll to insert

        Returns:
            The saved poll

        Raises:
            IntegrityError: If the post already has a poll
        """
        pass

    @abstractmethod
    async def update_counts(
        self,
        poll_id: PollId,
        option_counts: Mapping[PollOptionId, int],
        total_votes: int,
    ) -> None:
        """Overwrite every option's vote_count and the poll's total_votes.

        Args:
            poll_id: The poll ID
            option_counts: Recounted votes for every option of the poll
            total_votes: Recounted total
        """
        pass
