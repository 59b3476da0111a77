"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.post import Post
from agora.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Only the slice of post persistence the voting engine needs: locating and
    locking a target, and writing its recomputed counters. Content CRUD is
    owned by the surrounding application.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def lock(self, post_id: PostId) -> Optional[Post]:
        """Find a post and hold a row lock on it until the transaction ends.

        Concurrent vote transactions on the same post serialize here, so each
        one recounts from a ledger that includes every earlier commit.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def update_reaction_counts(
        self, post_id: PostId, upvotes: int, downvotes: int
    ) -> None:
        """Overwrite the post's reaction counters.

        Args:
            post_id: The post ID
            upvotes: Recounted upvotes
            downvotes: Recounted downvotes
        """
        pass

    @abstractmethod
    async def update_side_counts(
        self, post_id: PostId, votes_a: int, votes_b: int
    ) -> None:
        """Overwrite the post's VS counters.

        Args:
            post_id: The post ID
            votes_a: Recounted side A votes
            votes_b: Recounted side B votes
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete).

        Reactions, side votes, comments and the post's poll go with it.

        Args:
            post_id: The post ID to delete
        """
        pass
