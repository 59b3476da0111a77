"""PostgreSQL implementation of Poll repository."""

from typing import Mapping, Optional

import logfire
from sqlalchemy import Select, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Poll
from agora.domain.repository import PollRepository
from agora.domain.value import PollId, PollOptionId, PostId
from agora.persistence.mappers import (
    poll_option_to_dict,
    poll_to_dict,
    row_to_poll,
)
from agora.persistence.tables import poll_options_table, polls_table


class PostgresPollRepository(PollRepository):
    """PostgreSQL implementation of PollRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_one(self, stmt: Select) -> Optional[Poll]:
        """Run a polls query and attach the poll's options."""
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None

        options_stmt = (
            select(poll_options_table)
            .where(poll_options_table.c.poll_id == row.id)
            .order_by(poll_options_table.c.order)
        )
        options_result = await self.session.execute(options_stmt)
        option_rows = [r._asdict() for r in options_result.fetchall()]
        return row_to_poll(row._asdict(), option_rows)

    async def find_by_id(self, poll_id: PollId) -> Optional[Poll]:
        """Find a poll with its options."""
        with logfire.span("poll_repository.find_by_id", poll_id=str(poll_id)):
            stmt = select(polls_table).where(polls_table.c.id == poll_id)
            poll = await self._fetch_one(stmt)
            if poll is None:
                logfire.warn("Poll not found", poll_id=str(poll_id))
            return poll

    async def lock(self, poll_id: PollId) -> Optional[Poll]:
        """Find a poll with SELECT ... FOR UPDATE on the polls row."""
        with logfire.span("poll_repository.lock", poll_id=str(poll_id)):
            stmt = (
                select(polls_table)
                .where(polls_table.c.id == poll_id)
                .with_for_update()
            )
            return await self._fetch_one(stmt)

    async def find_by_post(self, post_id: PostId) -> Optional[Poll]:
        """Find the poll attached to a post."""
        stmt = select(polls_table).where(polls_table.c.post_id == post_id)
        return await self._fetch_one(stmt)

    async def save(self, poll: Poll) -> Poll:
        """Insert a poll and its options."""
        with logfire.span("poll_repository.save", poll_id=str(poll.id)):
            await self.session.execute(insert(polls_table).values(**poll_to_dict(poll)))
            if poll.options:
                await self.session.execute(
                    insert(poll_options_table).values(
                        [poll_option_to_dict(option) for option in poll.options]
                    )
                )
            await self.session.flush()
            return poll

    async def update_counts(
        self,
        poll_id: PollId,
        option_counts: Mapping[PollOptionId, int],
        total_votes: int,
    ) -> None:
        """Overwrite every option's vote_count and the poll's total_votes."""
        for option_id, vote_count in option_counts.items():
            await self.session.execute(
                update(poll_options_table)
                .where(
                    poll_options_table.c.poll_id == poll_id,
                    poll_options_table.c.id == option_id,
                )
                .values(vote_count=vote_count)
            )

        await self.session.execute(
            update(polls_table)
            .where(polls_table.c.id == poll_id)
            .values(total_votes=total_votes)
        )
        await self.session.flush()
