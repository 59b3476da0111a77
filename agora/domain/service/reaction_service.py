"""Reaction domain service."""

from uuid import UUID, uuid4

import logfire

from agora.domain.error import NotFoundError
from agora.domain.model.reaction import Reaction
from agora.domain.repository import Transaction
from agora.domain.value import (
    CommentId,
    PostId,
    ReactionCounts,
    ReactionId,
    ReactionType,
    TargetType,
    UserId,
)

from .base import Service
from .boundary import ConsistencyBoundary
from .tally_service import TallyService


class ReactionService(Service):
    """Domain service for up/down reactions on posts and comments."""

    def __init__(
        self, boundary: ConsistencyBoundary, tally_service: TallyService
    ) -> None:
        """Initialize reaction service.

        Args:
            boundary: Transaction runner for vote operations
            tally_service: Counter recalculator
        """
        self.boundary = boundary
        self.tally_service = tally_service

    async def toggle_reaction(
        self,
        user_id: UserId,
        target_type: TargetType | str,
        target_id: UUID,
        reaction_type: ReactionType | str,
    ) -> ReactionCounts:
        """Apply a reaction intent.

        No reaction yet creates one. The same reaction again removes it.
        The other reaction switches it in place.

        Args:
            user_id: Voter ID
            target_type: Post or comment
            target_id: Target ID
            reaction_type: UPVOTE or DOWNVOTE

        Returns:
            The target's counters after the change

        Raises:
            InvalidArgumentError: If target_type or reaction_type is unknown
            NotFoundError: If the target is missing or hidden
        """
        target_type = TargetType.parse(target_type)
        reaction_type = ReactionType.parse(reaction_type)

        async def apply(tx: Transaction) -> ReactionCounts:
            await self._lock_target(tx, target_type, target_id)

            existing = await tx.reactions.find_by_user_and_target(
                user_id, target_type, target_id
            )
            if existing is None:
                await tx.reactions.save(
                    Reaction(
                        id=ReactionId(uuid4()),
                        user_id=user_id,
                        target_type=target_type,
                        target_id=target_id,
                        type=reaction_type,
                    )
                )
                transition = "added"
            elif existing.type == reaction_type:
                await tx.reactions.delete(existing)
                transition = "removed"
            else:
                await tx.reactions.update_type(existing, reaction_type)
                transition = "switched"

            counts = await self.tally_service.recount_reactions(
                tx, target_type, target_id
            )
            logfire.info(
                "Reaction {transition}",
                transition=transition,
                target_type=target_type.value,
                target_id=str(target_id),
                user_id=str(user_id),
                reaction_type=reaction_type.value,
            )
            return counts

        return await self.boundary.run(
            "toggle_reaction",
            apply,
            target_type=target_type.value,
            target_id=str(target_id),
            user_id=str(user_id),
        )

    async def _lock_target(
        self, tx: Transaction, target_type: TargetType, target_id: UUID
    ) -> None:
        """Lock the target row, rejecting missing or hidden targets."""
        if target_type == TargetType.POST:
            target = await tx.posts.lock(PostId(target_id))
            resource = "Post"
        else:
            target = await tx.comments.lock(CommentId(target_id))
            resource = "Comment"

        if target is None or target.is_hidden:
            logfire.warn(
                "Reaction on unavailable target",
                target_type=target_type.value,
                target_id=str(target_id),
            )
            raise NotFoundError(resource, str(target_id))
