"""In-memory poll vote repository for testing."""

from collections import Counter
from typing import List, Sequence

from sqlalchemy.exc import IntegrityError

from agora.domain.model.poll import PollVote
from agora.domain.repository.poll_vote import PollVoteRepository
from agora.domain.value import PollId, PollOptionId, UserId

from .store import InMemoryStore


class InMemoryPollVoteRepository(PollVoteRepository):
    """In-memory implementation of PollVoteRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_user_and_poll(
        self, user_id: UserId, poll_id: PollId
    ) -> List[PollVote]:
        """Find a voter's rows on a poll."""
        return [
            v
            for v in self._store.poll_votes.values()
            if v.user_id == user_id and v.poll_id == poll_id
        ]

    async def delete_by_user_and_poll(self, user_id: UserId, poll_id: PollId) -> int:
        """Delete a voter's rows on a poll."""
        doomed = [
            k
            for k, v in self._store.poll_votes.items()
            if v.user_id == user_id and v.poll_id == poll_id
        ]
        for key in doomed:
            del self._store.poll_votes[key]
        return len(doomed)

    async def save_many(self, votes: Sequence[PollVote]) -> List[PollVote]:
        """Save poll votes.

        Raises:
            IntegrityError: If a (user, poll, option) row already exists
        """
        taken = {
            (v.user_id, v.poll_id, v.option_id)
            for v in self._store.poll_votes.values()
        }
        for vote in votes:
            key = (vote.user_id, vote.poll_id, vote.option_id)
            if key in taken:
                raise IntegrityError("Duplicate poll vote", None, Exception())
            taken.add(key)

        for vote in votes:
            self._store.poll_votes[vote.id] = vote
        return list(votes)

    async def count_by_option(self, poll_id: PollId) -> dict[PollOptionId, int]:
        """Count rows per option."""
        return dict(
            Counter(
                v.option_id
                for v in self._store.poll_votes.values()
                if v.poll_id == poll_id
            )
        )

    async def count_by_poll(self, poll_id: PollId) -> int:
        """Count all rows of a poll."""
        return sum(1 for v in self._store.poll_votes.values() if v.poll_id == poll_id)
