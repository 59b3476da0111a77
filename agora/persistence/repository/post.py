"""PostgreSQL implementation of Post repository."""

from typing import Optional

import logfire
from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Post
from agora.domain.repository.post import PostRepository
from agora.domain.value import PostId
from agora.persistence.mappers import post_to_dict, row_to_post
from agora.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            return row_to_post(row._asdict())

    async def lock(self, post_id: PostId) -> Optional[Post]:
        """Find a post with SELECT ... FOR UPDATE."""
        with logfire.span("post_repository.lock", post_id=str(post_id)):
            stmt = (
                select(posts_table)
                .where(posts_table.c.id == post_id)
                .with_for_update()
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_post(row._asdict()) if row else None

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            post_dict = post_to_dict(post)

            existing = await self.find_by_id(post.id)

            if existing:
                stmt = (
                    update(posts_table)
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
                logfire.info("Updating existing post", post_id=str(post.id))
            else:
                stmt = insert(posts_table).values(**post_dict)
                logfire.info("Creating new post", post_id=str(post.id))

            await self.session.execute(stmt)
            await self.session.flush()
            return post

    async def update_reaction_counts(
        self, post_id: PostId, upvotes: int, downvotes: int
    ) -> None:
        """Overwrite the post's reaction counters."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(upvotes=upvotes, downvotes=downvotes)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def update_side_counts(
        self, post_id: PostId, votes_a: int, votes_b: int
    ) -> None:
        """Overwrite the post's VS counters."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(votes_a=votes_a, votes_b=votes_b)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, post_id: PostId) -> None:
        """Delete a post; dependent rows cascade in the database."""
        with logfire.span("post_repository.delete", post_id=str(post_id)):
            stmt = delete(posts_table).where(posts_table.c.id == post_id)
            await self.session.execute(stmt)
            await self.session.flush()
