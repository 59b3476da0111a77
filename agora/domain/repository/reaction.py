"""Reaction repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union

from agora.domain.model.reaction import Reaction
from agora.domain.value import CommentId, PostId, ReactionType, TargetType, UserId


class ReactionRepository(ABC):
    """Ledger of up/down reactions on posts and comments.

    Defines the contract for reaction persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_id: Union[PostId, CommentId],
    ) -> Optional[Reaction]:
        """Find a user's reaction on a specific target.

        Args:
            user_id: The user's ID
            target_type: Type of target (post or comment)
            target_id: ID of the target

        Returns:
            The reaction if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, reaction: Reaction) -> Reaction:
        """Insert a new reaction.

        Args:
            reaction: The reaction to insert

        Returns:
            The saved reaction

        Raises:
            IntegrityError: If the user already reacted to the target
        """
        pass

    @abstractmethod
    async def update_type(
        self, reaction: Reaction, reaction_type: ReactionType
    ) -> Reaction:
        """Switch an existing reaction to the other type.

        Args:
            reaction: The stored reaction
            reaction_type: The new type

        Returns:
            The updated reaction
        """
        pass

    @abstractmethod
    async def delete(self, reaction: Reaction) -> None:
        """Delete a reaction (toggle off).

        Args:
            reaction: The stored reaction
        """
        pass

    @abstractmethod
    async def count_by_target(
        self,
        target_type: TargetType,
        target_id: Union[PostId, CommentId],
        reaction_type: ReactionType,
    ) -> int:
        """Count reactions of one type on a target.

        Args:
            target_type: Type of target (post or comment)
            target_id: ID of the target
            reaction_type: Which reactions to count

        Returns:
            Number of matching ledger rows
        """
        pass
