"""Unit tests for VoteSideUseCase."""

from uuid import uuid4

import pytest

from agora.application.usecase.vote import VoteSideRequest, VoteSideUseCase
from agora.domain.error import InvalidArgumentError
from agora.domain.value import PostType
from tests.conftest import make_post, seed
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestVoteSideUseCase:
    """Tests for VoteSideUseCase."""

    @pytest.mark.asyncio
    async def test_two_voters_and_a_retraction(self, unit_env):
        """Votes from different users add up; repeating a side retracts it."""
        # Arrange
        use_case = await unit_env.get(VoteSideUseCase)
        post = make_post(PostType.VS)
        await seed(unit_env, post)
        alice, bob = str(uuid4()), str(uuid4())

        def request(user_id: str, side: str) -> VoteSideRequest:
            return VoteSideRequest(user_id=user_id, post_id=str(post.id), side=side)

        # Act & Assert
        response = await use_case.execute(request(alice, "a"))
        assert (response.votes_a, response.votes_b) == (1, 0)

        response = await use_case.execute(request(bob, "B"))
        assert (response.votes_a, response.votes_b) == (1, 1)

        response = await use_case.execute(request(alice, "A"))
        assert (response.votes_a, response.votes_b) == (0, 1)

    @pytest.mark.asyncio
    async def test_rejects_text_post(self, unit_env):
        """Only VS posts accept side votes."""
        # Arrange
        use_case = await unit_env.get(VoteSideUseCase)
        post = make_post()
        await seed(unit_env, post)

        # Act & Assert
        with pytest.raises(InvalidArgumentError):
            await use_case.execute(
                VoteSideRequest(user_id=str(uuid4()), post_id=str(post.id), side="A")
            )
