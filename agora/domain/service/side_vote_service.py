"""Side-vote domain service for VS posts."""

from uuid import uuid4

import logfire

from agora.domain.error import InvalidArgumentError, NotFoundError
from agora.domain.model.side_vote import SideVote
from agora.domain.repository import Transaction
from agora.domain.value import PostId, PostType, SideVoteCounts, SideVoteId, UserId, VsSide

from .base import Service
from .boundary import ConsistencyBoundary
from .tally_service import TallyService


class SideVoteService(Service):
    """Domain service for A/B voting on VS posts.

    Each (user, post) pair is in one of three states: no vote, voted A,
    voted B. Voting the current side returns to no vote; voting the other
    side switches.
    """

    def __init__(
        self, boundary: ConsistencyBoundary, tally_service: TallyService
    ) -> None:
        """Initialize side-vote service.

        Args:
            boundary: Transaction runner for vote operations
            tally_service: Counter recalculator
        """
        self.boundary = boundary
        self.tally_service = tally_service

    async def vote_side(
        self, user_id: UserId, post_id: PostId, side: VsSide | str
    ) -> SideVoteCounts:
        """Apply a side-vote intent.

        Args:
            user_id: Voter ID
            post_id: VS post ID
            side: A or B

        Returns:
            The post's side counters after the change

        Raises:
            InvalidArgumentError: If side is unknown or the post is not a VS post
            NotFoundError: If the post is missing or hidden
        """
        side = VsSide.parse(side)

        async def apply(tx: Transaction) -> SideVoteCounts:
            post = await tx.posts.lock(post_id)
            if post is None or post.is_hidden:
                logfire.warn("Side vote on unavailable post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            if post.type != PostType.VS:
                raise InvalidArgumentError("Side votes are only accepted on VS posts")

            existing = await tx.side_votes.find_by_user_and_post(user_id, post_id)
            if existing is None:
                await tx.side_votes.save(
                    SideVote(
                        id=SideVoteId(uuid4()),
                        user_id=user_id,
                        post_id=post_id,
                        side=side,
                    )
                )
                transition = "cast"
            elif existing.side == side:
                await tx.side_votes.delete(existing)
                transition = "withdrawn"
            else:
                await tx.side_votes.update_side(existing, side)
                transition = "switched"

            counts = await self.tally_service.recount_sides(tx, post_id)
            logfire.info(
                "Side vote {transition}",
                transition=transition,
                post_id=str(post_id),
                user_id=str(user_id),
                side=side.value,
            )
            return counts

        return await self.boundary.run(
            "vote_side", apply, post_id=str(post_id), user_id=str(user_id)
        )
