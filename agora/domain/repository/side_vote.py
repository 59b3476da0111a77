"""Side-vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.side_vote import SideVote
from agora.domain.value import PostId, UserId, VsSide


class SideVoteRepository(ABC):
    """Ledger of A/B votes on VS posts."""

    @abstractmethod
    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[SideVote]:
        """Find a user's side vote on a post, if any."""
        pass

    @abstractmethod
    async def save(self, vote: SideVote) -> SideVote:
        """Insert a new side vote.

        Raises:
            IntegrityError: If the user already voted on the post
        """
        pass

    @abstractmethod
    async def update_side(self, vote: SideVote, side: VsSide) -> SideVote:
        """Move an existing vote to the other side."""
        pass

    @abstractmethod
    async def delete(self, vote: SideVote) -> None:
        """Delete a side vote (unvote)."""
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId, side: VsSide) -> int:
        """Count votes for one side of a post."""
        pass
