"""Aggregate recalculation.

Counters on posts, comments, polls and poll options are never adjusted by
+1/-1. After every ledger change they are recounted from the ledger inside
the same transaction and overwritten. A counter that drifted for any reason
is therefore corrected by the next vote on that target.
"""

from datetime import datetime
from typing import Iterable, Mapping, Optional, Union

import logfire

from agora.domain.model.poll import Poll
from agora.domain.repository import Transaction
from agora.domain.value import (
    CommentId,
    PollOptionId,
    PollOptionResult,
    PollResults,
    PostId,
    ReactionCounts,
    ReactionType,
    SideVoteCounts,
    TargetType,
    VsSide,
    percentage_of,
)

from .base import Service


def build_poll_results(
    poll: Poll,
    option_counts: Optional[Mapping[PollOptionId, int]] = None,
    total_votes: Optional[int] = None,
    now: Optional[datetime] = None,
    my_option_ids: Iterable[PollOptionId] = (),
) -> PollResults:
    """Assemble a poll result snapshot.

    Without explicit counts the poll's stored counters are used.

    Args:
        poll: Poll with its options
        option_counts: Fresh per-option counts, if just recounted
        total_votes: Fresh total, if just recounted
        now: Reference time for ``has_ended``
        my_option_ids: The caller's current selection

    Returns:
        Snapshot with options in display order
    """
    if option_counts is None:
        option_counts = {o.id: o.vote_count for o in poll.options}
    if total_votes is None:
        total_votes = poll.total_votes

    return PollResults(
        poll_id=poll.id,
        total_votes=total_votes,
        has_ended=poll.has_ended(now),
        options=[
            PollOptionResult(
                id=option.id,
                text=option.text,
                vote_count=option_counts.get(option.id, 0),
                percentage=percentage_of(option_counts.get(option.id, 0), total_votes),
                order=option.order,
            )
            for option in poll.options
        ],
        my_option_ids=list(my_option_ids),
    )


class TallyService(Service):
    """Domain service that rederives denormalized counters from the ledger.

    Every method must be called inside the transaction that changed the
    ledger, after the change. Work is bounded by the voters of a single
    target.
    """

    async def recount_reactions(
        self,
        tx: Transaction,
        target_type: TargetType,
        target_id: Union[PostId, CommentId],
    ) -> ReactionCounts:
        """Recount and store a post's or comment's reaction counters.

        Args:
            tx: The open transaction
            target_type: Post or comment
            target_id: Target ID

        Returns:
            The counters just written
        """
        upvotes = await tx.reactions.count_by_target(
            target_type, target_id, ReactionType.UPVOTE
        )
        downvotes = await tx.reactions.count_by_target(
            target_type, target_id, ReactionType.DOWNVOTE
        )

        if target_type == TargetType.POST:
            await tx.posts.update_reaction_counts(
                PostId(target_id), upvotes, downvotes
            )
        else:
            await tx.comments.update_reaction_counts(
                CommentId(target_id), upvotes, downvotes
            )

        logfire.debug(
            "Reaction counters recounted",
            target_type=target_type.value,
            target_id=str(target_id),
            upvotes=upvotes,
            downvotes=downvotes,
        )
        return ReactionCounts(upvotes=upvotes, downvotes=downvotes)

    async def recount_sides(self, tx: Transaction, post_id: PostId) -> SideVoteCounts:
        """Recount and store a VS post's side counters.

        Args:
            tx: The open transaction
            post_id: Post ID

        Returns:
            The counters just written
        """
        votes_a = await tx.side_votes.count_by_post(post_id, VsSide.A)
        votes_b = await tx.side_votes.count_by_post(post_id, VsSide.B)
        await tx.posts.update_side_counts(post_id, votes_a, votes_b)

        logfire.debug(
            "Side counters recounted",
            post_id=str(post_id),
            votes_a=votes_a,
            votes_b=votes_b,
        )
        return SideVoteCounts(votes_a=votes_a, votes_b=votes_b)

    async def recount_poll(
        self,
        tx: Transaction,
        poll: Poll,
        now: Optional[datetime] = None,
        my_option_ids: Iterable[PollOptionId] = (),
    ) -> PollResults:
        """Recount and store every option's count and the poll total.

        Args:
            tx: The open transaction
            poll: Poll with its options
            now: Reference time for ``has_ended``
            my_option_ids: The caller's selection after the change

        Returns:
            Snapshot built from the counters just written
        """
        counted = await tx.poll_votes.count_by_option(poll.id)
        option_counts = {option.id: counted.get(option.id, 0) for option in poll.options}
        total_votes = await tx.poll_votes.count_by_poll(poll.id)
        await tx.polls.update_counts(poll.id, option_counts, total_votes)

        logfire.debug(
            "Poll counters recounted",
            poll_id=str(poll.id),
            total_votes=total_votes,
        )
        return build_poll_results(
            poll,
            option_counts=option_counts,
            total_votes=total_votes,
            now=now,
            my_option_ids=my_option_ids,
        )
