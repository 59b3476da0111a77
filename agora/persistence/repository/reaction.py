"""PostgreSQL implementation of Reaction repository.

Post and comment reactions live in separate ledger tables so each row can
cascade with its target. The target type picks the table.
"""

from typing import Optional, Union

from sqlalchemy import Column, Table, and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Reaction
from agora.domain.repository import ReactionRepository
from agora.domain.value import CommentId, PostId, ReactionType, TargetType, UserId
from agora.persistence.mappers import reaction_to_dict, row_to_reaction
from agora.persistence.tables import comment_reactions_table, post_reactions_table


def _ledger(target_type: TargetType) -> tuple[Table, Column]:
    """Return the ledger table for a target type and its target column."""
    if target_type == TargetType.POST:
        return post_reactions_table, post_reactions_table.c.post_id
    return comment_reactions_table, comment_reactions_table.c.comment_id


class PostgresReactionRepository(ReactionRepository):
    """PostgreSQL implementation of ReactionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_id: Union[PostId, CommentId],
    ) -> Optional[Reaction]:
        """Find a user's reaction on a specific target."""
        table, target_column = _ledger(target_type)
        stmt = select(table).where(
            and_(
                table.c.user_id == user_id,
                target_column == target_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_reaction(row._asdict(), target_type) if row else None

    async def save(self, reaction: Reaction) -> Reaction:
        """Insert a new reaction."""
        table, _ = _ledger(reaction.target_type)
        stmt = insert(table).values(**reaction_to_dict(reaction))
        await self.session.execute(stmt)
        await self.session.flush()
        return reaction

    async def update_type(
        self, reaction: Reaction, reaction_type: ReactionType
    ) -> Reaction:
        """Switch an existing reaction to the other type."""
        table, _ = _ledger(reaction.target_type)
        stmt = (
            update(table)
            .where(table.c.id == reaction.id)
            .values(type=reaction_type.value)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return reaction.model_copy(update={"type": reaction_type})

    async def delete(self, reaction: Reaction) -> None:
        """Delete a reaction."""
        table, _ = _ledger(reaction.target_type)
        stmt = delete(table).where(table.c.id == reaction.id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_by_target(
        self,
        target_type: TargetType,
        target_id: Union[PostId, CommentId],
        reaction_type: ReactionType,
    ) -> int:
        """Count reactions of one type on a target."""
        table, target_column = _ledger(target_type)
        stmt = (
            select(func.count())
            .select_from(table)
            .where(
                and_(
                    target_column == target_id,
                    table.c.type == reaction_type.value,
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
