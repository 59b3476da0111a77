"""PostgreSQL implementation of SideVote repository."""

from typing import Optional

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import SideVote
from agora.domain.repository import SideVoteRepository
from agora.domain.value import PostId, UserId, VsSide
from agora.persistence.mappers import row_to_side_vote, side_vote_to_dict
from agora.persistence.tables import side_votes_table


class PostgresSideVoteRepository(SideVoteRepository):
    """PostgreSQL implementation of SideVoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[SideVote]:
        """Find a user's side vote on a post."""
        stmt = select(side_votes_table).where(
            and_(
                side_votes_table.c.user_id == user_id,
                side_votes_table.c.post_id == post_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_side_vote(row._asdict()) if row else None

    async def save(self, vote: SideVote) -> SideVote:
        """Insert a new side vote."""
        stmt = insert(side_votes_table).values(**side_vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def update_side(self, vote: SideVote, side: VsSide) -> SideVote:
        """Move an existing vote to the other side."""
        stmt = (
            update(side_votes_table)
            .where(side_votes_table.c.id == vote.id)
            .values(side=side.value)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return vote.model_copy(update={"side": side})

    async def delete(self, vote: SideVote) -> None:
        """Delete a side vote."""
        stmt = delete(side_votes_table).where(side_votes_table.c.id == vote.id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_by_post(self, post_id: PostId, side: VsSide) -> int:
        """Count votes for one side of a post."""
        stmt = (
            select(func.count())
            .select_from(side_votes_table)
            .where(
                and_(
                    side_votes_table.c.post_id == post_id,
                    side_votes_table.c.side == side.value,
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
