"""In-memory poll repository for testing."""

from typing import Mapping, Optional

from sqlalchemy.exc import IntegrityError

from agora.domain.model.poll import Poll
from agora.domain.repository.poll import PollRepository
from agora.domain.value import PollId, PollOptionId, PostId

from .store import InMemoryStore


class InMemoryPollRepository(PollRepository):
    """In-memory implementation of PollRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, poll_id: PollId) -> Optional[Poll]:
        """Find a poll by ID."""
        return self._store.polls.get(poll_id)

    async def lock(self, poll_id: PollId) -> Optional[Poll]:
        """Find a poll."""
        return self._store.polls.get(poll_id)

    async def find_by_post(self, post_id: PostId) -> Optional[Poll]:
        """Find the poll attached to a post."""
        for poll in self._store.polls.values():
            if poll.post_id == post_id:
                return poll
        return None

    async def save(self, poll: Poll) -> Poll:
        """Save a poll.

        Raises:
            IntegrityError: If the post already has a poll
        """
        if await self.find_by_post(poll.post_id):
            raise IntegrityError("Duplicate poll for post", None, Exception())

        self._store.polls[poll.id] = poll
        return poll

    async def update_counts(
        self,
        poll_id: PollId,
        option_counts: Mapping[PollOptionId, int],
        total_votes: int,
    ) -> None:
        """Overwrite every option's vote_count and the poll's total_votes."""
        poll = self._store.polls.get(poll_id)
        if not poll:
            return

        options = [
            option.model_copy(
                update={"vote_count": option_counts.get(option.id, option.vote_count)}
            )
            for option in poll.options
        ]
        self._store.polls[poll_id] = poll.model_copy(
            update={"options": options, "total_votes": total_votes}
        )
