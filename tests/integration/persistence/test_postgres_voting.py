"""Integration tests for voting against PostgreSQL.

These tests need a migrated database reachable at DATABASE__URL. Run them
with ``pytest -m integration``.
"""

import asyncio
from uuid import uuid4

import pytest

from agora.domain.repository import UnitOfWork
from agora.domain.service import PollService, ReactionService, SideVoteService
from agora.domain.value import PostType, TargetType, UserId
from tests.conftest import load, make_poll, make_post, seed
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


async def drop(env, post) -> None:
    """Delete a seeded post; ledger rows cascade."""
    unit_of_work = await env.get(UnitOfWork)
    async with unit_of_work.transaction() as tx:
        await tx.posts.delete(post.id)


class TestConcurrentVoting:
    """Counters stay equal to the ledger under concurrent writes."""

    @pytest.mark.asyncio
    async def test_concurrent_upvotes_from_different_users(self, integration_env):
        """Every voter is counted exactly once."""
        # Arrange
        service = await integration_env.get(ReactionService)
        post = make_post()
        await seed(integration_env, post)

        # Act
        await asyncio.gather(
            *(
                service.toggle_reaction(
                    UserId(uuid4()), TargetType.POST, post.id, "UPVOTE"
                )
                for _ in range(10)
            )
        )

        # Assert
        stored = await load(integration_env, post)
        assert stored.upvotes == 10
        await drop(integration_env, post)

    @pytest.mark.asyncio
    async def test_concurrent_first_votes_from_same_user(self, integration_env):
        """Two racing first votes leave at most one ledger row."""
        # Arrange
        service = await integration_env.get(SideVoteService)
        post = make_post(PostType.VS)
        await seed(integration_env, post)
        user_id = UserId(uuid4())

        # Act
        await asyncio.gather(
            service.vote_side(user_id, post.id, "A"),
            service.vote_side(user_id, post.id, "A"),
        )

        # Assert
        stored = await load(integration_env, post)
        assert stored.votes_a in (0, 1)
        assert stored.votes_b == 0
        unit_of_work = await integration_env.get(UnitOfWork)
        async with unit_of_work.transaction() as tx:
            vote = await tx.side_votes.find_by_user_and_post(user_id, post.id)
        assert (vote is not None) == (stored.votes_a == 1)
        await drop(integration_env, post)


class TestPollPersistence:
    """Poll round trips through the database."""

    @pytest.mark.asyncio
    async def test_replace_selection(self, integration_env):
        """Replacing a selection rewrites option counters."""
        # Arrange
        service = await integration_env.get(PollService)
        post = make_post(PostType.POLL)
        poll = make_poll(post, allow_multiple=True)
        await seed(integration_env, post, poll)
        red, green, blue = poll.options
        user_id = UserId(uuid4())

        # Act
        await service.vote_poll(user_id, poll.id, [red.id, green.id])
        results = await service.vote_poll(user_id, poll.id, [blue.id])

        # Assert
        assert [o.vote_count for o in results.options] == [0, 0, 1]
        stored = await load(integration_env, poll)
        assert stored.total_votes == 1
        assert [o.vote_count for o in stored.options] == [0, 0, 1]
        await drop(integration_env, post)
