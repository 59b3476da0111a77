"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.comment import Comment
from agora.domain.value import CommentId


class CommentRepository(ABC):
    """Repository for Comment entity, limited to what reactions need."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        pass

    @abstractmethod
    async def lock(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment and hold a row lock on it until the transaction ends."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        pass

    @abstractmethod
    async def update_reaction_counts(
        self, comment_id: CommentId, upvotes: int, downvotes: int
    ) -> None:
        """Overwrite the comment's reaction counters."""
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and its reactions."""
        pass
