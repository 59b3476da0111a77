"""In-memory side-vote repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from agora.domain.model.side_vote import SideVote
from agora.domain.repository.side_vote import SideVoteRepository
from agora.domain.value import PostId, UserId, VsSide

from .store import InMemoryStore


class InMemorySideVoteRepository(SideVoteRepository):
    """In-memory implementation of SideVoteRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[SideVote]:
        """Find a side vote by user and post."""
        for vote in self._store.side_votes.values():
            if vote.user_id == user_id and vote.post_id == post_id:
                return vote
        return None

    async def save(self, vote: SideVote) -> SideVote:
        """Save a side vote.

        Raises:
            IntegrityError: If the user already voted on the post
        """
        if await self.find_by_user_and_post(vote.user_id, vote.post_id):
            raise IntegrityError("Duplicate side vote", None, Exception())

        self._store.side_votes[vote.id] = vote
        return vote

    async def update_side(self, vote: SideVote, side: VsSide) -> SideVote:
        """Move a vote to the other side."""
        updated = vote.model_copy(update={"side": side})
        self._store.side_votes[vote.id] = updated
        return updated

    async def delete(self, vote: SideVote) -> None:
        """Delete a side vote."""
        self._store.side_votes.pop(vote.id, None)

    async def count_by_post(self, post_id: PostId, side: VsSide) -> int:
        """Count votes for one side of a post."""
        return sum(
            1
            for v in self._store.side_votes.values()
            if v.post_id == post_id and v.side == side
        )
