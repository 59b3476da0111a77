"""In-memory reaction repository for testing."""

from typing import Optional, Union

from sqlalchemy.exc import IntegrityError

from agora.domain.model.reaction import Reaction
from agora.domain.repository.reaction import ReactionRepository
from agora.domain.value import CommentId, PostId, ReactionType, TargetType, UserId

from .store import InMemoryStore


class InMemoryReactionRepository(ReactionRepository):
    """In-memory implementation of ReactionRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_id: Union[PostId, CommentId],
    ) -> Optional[Reaction]:
        """Find a reaction by user and target."""
        for reaction in self._store.reactions.values():
            if (
                reaction.user_id == user_id
                and reaction.target_type == target_type
                and reaction.target_id == target_id
            ):
                return reaction
        return None

    async def save(self, reaction: Reaction) -> Reaction:
        """Save a reaction.

        Raises:
            IntegrityError: If the user already reacted to the target
        """
        existing = await self.find_by_user_and_target(
            reaction.user_id, reaction.target_type, reaction.target_id
        )
        if existing:
            raise IntegrityError("Duplicate reaction", None, Exception())

        self._store.reactions[reaction.id] = reaction
        return reaction

    async def update_type(
        self, reaction: Reaction, reaction_type: ReactionType
    ) -> Reaction:
        """Switch a reaction's type."""
        updated = reaction.model_copy(update={"type": reaction_type})
        self._store.reactions[reaction.id] = updated
        return updated

    async def delete(self, reaction: Reaction) -> None:
        """Delete a reaction."""
        self._store.reactions.pop(reaction.id, None)

    async def count_by_target(
        self,
        target_type: TargetType,
        target_id: Union[PostId, CommentId],
        reaction_type: ReactionType,
    ) -> int:
        """Count reactions of one type on a target."""
        return sum(
            1
            for r in self._store.reactions.values()
            if r.target_type == target_type
            and r.target_id == target_id
            and r.type == reaction_type
        )
