"""PostgreSQL implementation of PollVote repository."""

from typing import List, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import PollVote
from agora.domain.repository import PollVoteRepository
from agora.domain.value import PollId, PollOptionId, UserId
from agora.persistence.mappers import poll_vote_to_dict, row_to_poll_vote
from agora.persistence.tables import poll_votes_table


class PostgresPollVoteRepository(PollVoteRepository):
    """PostgreSQL implementation of PollVoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_poll(
        self, user_id: UserId, poll_id: PollId
    ) -> List[PollVote]:
        """Find a voter's current selection on a poll."""
        stmt = select(poll_votes_table).where(
            and_(
                poll_votes_table.c.user_id == user_id,
                poll_votes_table.c.poll_id == poll_id,
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_poll_vote(row._asdict()) for row in result.fetchall()]

    async def delete_by_user_and_poll(self, user_id: UserId, poll_id: PollId) -> int:
        """Delete a voter's whole selection on a poll."""
        stmt = delete(poll_votes_table).where(
            and_(
                poll_votes_table.c.user_id == user_id,
                poll_votes_table.c.poll_id == poll_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def save_many(self, votes: Sequence[PollVote]) -> List[PollVote]:
        """Insert poll votes in one statement."""
        if not votes:
            return []

        stmt = insert(poll_votes_table).values(
            [poll_vote_to_dict(vote) for vote in votes]
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return list(votes)

    async def count_by_option(self, poll_id: PollId) -> dict[PollOptionId, int]:
        """Count rows per option of a poll."""
        stmt = (
            select(poll_votes_table.c.option_id, func.count().label("votes"))
            .where(poll_votes_table.c.poll_id == poll_id)
            .group_by(poll_votes_table.c.option_id)
        )
        result = await self.session.execute(stmt)
        return {
            PollOptionId(
                UUID(row.option_id) if isinstance(row.option_id, str) else row.option_id
            ): row.votes
            for row in result.fetchall()
        }

    async def count_by_poll(self, poll_id: PollId) -> int:
        """Count all rows of a poll."""
        stmt = (
            select(func.count())
            .select_from(poll_votes_table)
            .where(poll_votes_table.c.poll_id == poll_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
