"""Poll domain service."""

from datetime import datetime
from typing import Iterable, Optional, Sequence
from uuid import UUID, uuid4

import logfire

from agora.config import VotingSettings
from agora.domain.error import (
    InvalidArgumentError,
    InvalidOptionError,
    MultipleNotAllowedError,
    NotFoundError,
    PollEndedError,
    TooManyChoicesError,
)
from agora.domain.model.common import utcnow
from agora.domain.model.poll import Poll, PollOption, PollVote
from agora.domain.repository import Transaction
from agora.domain.value import (
    PollId,
    PollOptionId,
    PollResults,
    PollVoteId,
    PostId,
    PostType,
    UserId,
)

from .base import Service
from .boundary import ConsistencyBoundary
from .tally_service import TallyService, build_poll_results


class PollService(Service):
    """Domain service for poll creation, voting and results.

    Unlike reactions and side votes, a poll submission is not a toggle: it is
    the voter's complete current selection and replaces whatever they had
    selected before. An empty selection clears their vote.
    """

    def __init__(
        self,
        boundary: ConsistencyBoundary,
        tally_service: TallyService,
        settings: VotingSettings,
    ) -> None:
        """Initialize poll service.

        Args:
            boundary: Transaction runner for vote operations
            tally_service: Counter recalculator
            settings: Poll shape rules
        """
        self.boundary = boundary
        self.tally_service = tally_service
        self.settings = settings

    async def vote_poll(
        self,
        user_id: UserId,
        poll_id: PollId,
        option_ids: Iterable[PollOptionId | str],
    ) -> PollResults:
        """Replace a voter's selection on a poll.

        Checks run in this order and the first failure wins; none of them
        writes anything:

        1. the poll exists
        2. the poll has not ended
        3. every option belongs to the poll
        4. a single-select poll gets at most one option
        5. a multi-select poll with max_choices gets at most that many

        Args:
            user_id: Voter ID
            poll_id: Poll ID
            option_ids: The complete new selection; duplicates collapse

        Returns:
            Poll counters after the change, with the voter's selection

        Raises:
            NotFoundError: If the poll does not exist
            PollEndedError: If the deadline has passed
            InvalidOptionError: If an option is not one of the poll's
            MultipleNotAllowedError: If a single-select poll gets several
            TooManyChoicesError: If max_choices is exceeded
        """
        requested = list(dict.fromkeys(option_ids))

        async def apply(tx: Transaction) -> PollResults:
            poll = await tx.polls.lock(poll_id)
            if poll is None:
                logfire.warn("Vote on non-existent poll", poll_id=str(poll_id))
                raise NotFoundError("Poll", str(poll_id))

            now = utcnow()
            if poll.has_ended(now):
                raise PollEndedError(poll_id)

            selection = self._validate_selection(poll, requested)

            removed = await tx.poll_votes.delete_by_user_and_poll(user_id, poll_id)
            await tx.poll_votes.save_many(
                [
                    PollVote(
                        id=PollVoteId(uuid4()),
                        user_id=user_id,
                        poll_id=poll_id,
                        option_id=option_id,
                        created_at=now,
                    )
                    for option_id in selection
                ]
            )

            results = await self.tally_service.recount_poll(
                tx, poll, now=now, my_option_ids=selection
            )
            logfire.info(
                "Poll vote replaced",
                poll_id=str(poll_id),
                user_id=str(user_id),
                removed=removed,
                selected=len(selection),
                total_votes=results.total_votes,
            )
            return results

        return await self.boundary.run(
            "vote_poll", apply, poll_id=str(poll_id), user_id=str(user_id)
        )

    def _validate_selection(
        self, poll: Poll, requested: Sequence[PollOptionId | str]
    ) -> list[PollOptionId]:
        """Check a selection against the poll's options and policy.

        Returns:
            The selection as option IDs, in request order
        """
        selection: list[PollOptionId] = []
        for raw in requested:
            option_id = _as_option_id(raw)
            if option_id is None or option_id not in poll.option_ids:
                raise InvalidOptionError(raw)
            if option_id not in selection:
                selection.append(option_id)

        if not poll.allow_multiple and len(selection) > 1:
            raise MultipleNotAllowedError()

        if (
            poll.allow_multiple
            and poll.max_choices is not None
            and len(selection) > poll.max_choices
        ):
            raise TooManyChoicesError(poll.max_choices, len(selection))

        return selection

    async def create_poll(
        self,
        post_id: PostId,
        options: Sequence[str],
        allow_multiple: bool = False,
        max_choices: Optional[int] = None,
        ends_at: Optional[datetime] = None,
    ) -> Poll:
        """Attach a poll to a POLL post.

        Args:
            post_id: The owning post
            options: Option texts in display order
            allow_multiple: Whether voters may pick several options
            max_choices: Cap on picks for multi-select polls
            ends_at: Voting deadline

        Returns:
            The created poll with zeroed counters

        Raises:
            InvalidArgumentError: If the definition breaks a poll rule
            NotFoundError: If the post is missing or hidden
        """
        texts = self._validate_definition(options, allow_multiple, max_choices)
        poll_id = PollId(uuid4())
        poll = Poll(
            id=poll_id,
            post_id=post_id,
            allow_multiple=allow_multiple,
            max_choices=max_choices,
            ends_at=ends_at,
            options=[
                PollOption(
                    id=PollOptionId(uuid4()), poll_id=poll_id, text=text, order=order
                )
                for order, text in enumerate(texts)
            ],
        )

        async def apply(tx: Transaction) -> Poll:
            post = await tx.posts.lock(post_id)
            if post is None or post.is_hidden:
                raise NotFoundError("Post", str(post_id))
            if post.type != PostType.POLL:
                raise InvalidArgumentError("Polls can only be attached to POLL posts")
            if await tx.polls.find_by_post(post_id) is not None:
                raise InvalidArgumentError("Post already has a poll")

            saved = await tx.polls.save(poll)
            logfire.info(
                "Poll created",
                poll_id=str(saved.id),
                post_id=str(post_id),
                options=len(saved.options),
                allow_multiple=allow_multiple,
            )
            return saved

        return await self.boundary.run("create_poll", apply, post_id=str(post_id))

    def _validate_definition(
        self,
        options: Sequence[str],
        allow_multiple: bool,
        max_choices: Optional[int],
    ) -> list[str]:
        """Validate poll options and choice policy, returning trimmed texts."""
        rules = self.settings
        if not rules.poll_min_options <= len(options) <= rules.poll_max_options:
            raise InvalidArgumentError(
                f"Polls must have between {rules.poll_min_options} "
                f"and {rules.poll_max_options} options"
            )

        texts = [(text or "").strip() for text in options]
        for text in texts:
            if not (
                rules.poll_option_min_length
                <= len(text)
                <= rules.poll_option_max_length
            ):
                raise InvalidArgumentError(
                    f"Each poll option must be {rules.poll_option_min_length}-"
                    f"{rules.poll_option_max_length} characters"
                )

        # Single-select polls keep max_choices but never consult it
        if max_choices is not None and not 1 <= max_choices <= len(texts):
            raise InvalidArgumentError(
                "max_choices must be between 1 and the number of options"
            )

        return texts

    async def get_poll_results(
        self, poll_id: PollId, user_id: Optional[UserId] = None
    ) -> PollResults:
        """Read a poll's counters, with the caller's selection if known.

        Args:
            poll_id: Poll ID
            user_id: Caller whose selection to include

        Returns:
            Consistent snapshot of the poll

        Raises:
            NotFoundError: If the poll does not exist
        """

        async def read(tx: Transaction) -> PollResults:
            poll = await tx.polls.find_by_id(poll_id)
            if poll is None:
                raise NotFoundError("Poll", str(poll_id))

            mine: list[PollOptionId] = []
            if user_id is not None:
                votes = await tx.poll_votes.find_by_user_and_poll(user_id, poll_id)
                option_order = {o.id: o.order for o in poll.options}
                mine = sorted(
                    (v.option_id for v in votes),
                    key=lambda option_id: option_order.get(option_id, 0),
                )
            return build_poll_results(poll, my_option_ids=mine)

        return await self.boundary.run("get_poll_results", read, poll_id=str(poll_id))


def _as_option_id(raw: PollOptionId | str) -> Optional[PollOptionId]:
    """Coerce caller input to an option ID, None when it is not a UUID."""
    if isinstance(raw, UUID):
        return PollOptionId(raw)
    try:
        return PollOptionId(UUID(str(raw)))
    except ValueError:
        return None
