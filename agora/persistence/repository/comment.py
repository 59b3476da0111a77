"""PostgreSQL implementation of Comment repository."""

from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Comment
from agora.domain.repository.comment import CommentRepository
from agora.domain.value import CommentId
from agora.persistence.mappers import comment_to_dict, row_to_comment
from agora.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def lock(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment with SELECT ... FOR UPDATE."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.id == comment_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)

        existing = await self.find_by_id(comment.id)

        if existing:
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = insert(comments_table).values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_reaction_counts(
        self, comment_id: CommentId, upvotes: int, downvotes: int
    ) -> None:
        """Overwrite the comment's reaction counters."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(upvotes=upvotes, downvotes=downvotes)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment; its reactions cascade in the database."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()
