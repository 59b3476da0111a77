"""Unit tests for the in-memory unit of work and repositories."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from agora.domain.error import ConflictError
from agora.domain.model import PollVote, Reaction, SideVote
from agora.domain.value import (
    PollVoteId,
    PostType,
    ReactionId,
    ReactionType,
    SideVoteId,
    TargetType,
    UserId,
    VsSide,
)
from agora.persistence.repository.inmemory import InMemoryUnitOfWork
from tests.conftest import make_comment, make_poll, make_post


def reaction_on(target_type: TargetType, target_id, user_id=None) -> Reaction:
    return Reaction(
        id=ReactionId(uuid4()),
        user_id=user_id or UserId(uuid4()),
        target_type=target_type,
        target_id=target_id,
        type=ReactionType.UPVOTE,
    )


class TestInMemoryUnitOfWork:
    """Tests for transaction handling."""

    @pytest.mark.asyncio
    async def test_commit_keeps_writes(self):
        """Writes are visible to later transactions."""
        # Arrange
        unit_of_work = InMemoryUnitOfWork()
        post = make_post()

        # Act
        async with unit_of_work.transaction() as tx:
            await tx.posts.save(post)

        # Assert
        async with unit_of_work.transaction() as tx:
            assert await tx.posts.find_by_id(post.id) == post

    @pytest.mark.asyncio
    async def test_duplicate_reaction_raises_conflict(self):
        """A second reaction row for the same user and target is a conflict."""
        # Arrange
        unit_of_work = InMemoryUnitOfWork()
        post = make_post()
        user_id = UserId(uuid4())

        # Act & Assert
        with pytest.raises(ConflictError):
            async with unit_of_work.transaction() as tx:
                await tx.posts.save(post)
                await tx.reactions.save(reaction_on(TargetType.POST, post.id, user_id))
                await tx.reactions.save(reaction_on(TargetType.POST, post.id, user_id))

        assert unit_of_work.store.posts == {}
        assert unit_of_work.store.reactions == {}

    @pytest.mark.asyncio
    async def test_duplicate_side_vote_raises_integrity_error(self):
        """The repository raises the database's error type."""
        # Arrange
        unit_of_work = InMemoryUnitOfWork()
        post = make_post(PostType.VS)
        user_id = UserId(uuid4())
        vote = SideVote(
            id=SideVoteId(uuid4()), user_id=user_id, post_id=post.id, side=VsSide.A
        )
        again = vote.model_copy(update={"id": SideVoteId(uuid4())})

        # Act & Assert
        async with unit_of_work.transaction() as tx:
            await tx.side_votes.save(vote)
            with pytest.raises(IntegrityError):
                await tx.side_votes.save(again)

    @pytest.mark.asyncio
    async def test_duplicate_poll_option_vote_raises_integrity_error(self):
        """(user, poll, option) is unique."""
        # Arrange
        unit_of_work = InMemoryUnitOfWork()
        post = make_post(PostType.POLL)
        poll = make_poll(post)
        user_id = UserId(uuid4())
        votes = [
            PollVote(
                id=PollVoteId(uuid4()),
                user_id=user_id,
                poll_id=poll.id,
                option_id=poll.options[0].id,
            )
            for _ in range(2)
        ]

        # Act & Assert
        async with unit_of_work.transaction() as tx:
            with pytest.raises(IntegrityError):
                await tx.poll_votes.save_many(votes)
            assert await tx.poll_votes.count_by_poll(poll.id) == 0

    @pytest.mark.asyncio
    async def test_second_poll_for_post_raises_integrity_error(self):
        """A post owns at most one poll."""
        # Arrange
        unit_of_work = InMemoryUnitOfWork()
        post = make_post(PostType.POLL)

        # Act & Assert
        async with unit_of_work.transaction() as tx:
            await tx.polls.save(make_poll(post))
            with pytest.raises(IntegrityError):
                await tx.polls.save(make_poll(post))


class TestCascadingDeletes:
    """Ledger rows go with their target."""

    @pytest.mark.asyncio
    async def test_deleting_post_removes_dependent_rows(self):
        """Comments, reactions, side votes, polls and poll votes cascade."""
        # Arrange
        unit_of_work = InMemoryUnitOfWork()
        post = make_post(PostType.POLL)
        other = make_post()
        comment = make_comment(post)
        poll = make_poll(post)
        async with unit_of_work.transaction() as tx:
            await tx.posts.save(post)
            await tx.posts.save(other)
            await tx.comments.save(comment)
            await tx.polls.save(poll)
            await tx.reactions.save(reaction_on(TargetType.POST, post.id))
            await tx.reactions.save(reaction_on(TargetType.COMMENT, comment.id))
            await tx.reactions.save(reaction_on(TargetType.POST, other.id))
            await tx.side_votes.save(
                SideVote(
                    id=SideVoteId(uuid4()),
                    user_id=UserId(uuid4()),
                    post_id=post.id,
                    side=VsSide.B,
                )
            )
            await tx.poll_votes.save_many(
                [
                    PollVote(
                        id=PollVoteId(uuid4()),
                        user_id=UserId(uuid4()),
                        poll_id=poll.id,
                        option_id=poll.options[1].id,
                    )
                ]
            )

        # Act
        async with unit_of_work.transaction() as tx:
            await tx.posts.delete(post.id)

        # Assert
        store = unit_of_work.store
        assert list(store.posts) == [other.id]
        assert store.comments == {}
        assert store.polls == {}
        assert store.side_votes == {}
        assert store.poll_votes == {}
        assert [r.target_id for r in store.reactions.values()] == [other.id]

    @pytest.mark.asyncio
    async def test_deleting_comment_removes_its_reactions(self):
        """Comment reactions cascade with the comment."""
        # Arrange
        unit_of_work = InMemoryUnitOfWork()
        post = make_post()
        comment = make_comment(post)
        async with unit_of_work.transaction() as tx:
            await tx.posts.save(post)
            await tx.comments.save(comment)
            await tx.reactions.save(reaction_on(TargetType.COMMENT, comment.id))

        # Act
        async with unit_of_work.transaction() as tx:
            await tx.comments.delete(comment.id)

        # Assert
        assert unit_of_work.store.reactions == {}
        assert post.id in unit_of_work.store.posts
