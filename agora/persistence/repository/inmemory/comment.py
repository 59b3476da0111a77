"""In-memory comment repository for testing."""

from typing import Optional

from agora.domain.model.comment import Comment
from agora.domain.repository.comment import CommentRepository
from agora.domain.value import CommentId, TargetType

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._store.comments.get(comment_id)

    async def lock(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment."""
        return self._store.comments.get(comment_id)

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._store.comments[comment.id] = comment
        return comment

    async def update_reaction_counts(
        self, comment_id: CommentId, upvotes: int, downvotes: int
    ) -> None:
        """Overwrite the comment's reaction counters."""
        comment = self._store.comments.get(comment_id)
        if comment:
            self._store.comments[comment_id] = comment.model_copy(
                update={"upvotes": upvotes, "downvotes": downvotes}
            )

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and its reactions."""
        self._store.comments.pop(comment_id, None)
        self._store.reactions = {
            k: r
            for k, r in self._store.reactions.items()
            if not (r.target_type == TargetType.COMMENT and r.target_id == comment_id)
        }
