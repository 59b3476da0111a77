"""Unit tests for VotePollUseCase."""

from uuid import uuid4

import pytest

from agora.application.usecase.vote import VotePollRequest, VotePollUseCase
from agora.domain.error import InvalidOptionError
from agora.domain.value import PostType
from tests.conftest import make_poll, make_post, seed
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestVotePollUseCase:
    """Tests for VotePollUseCase."""

    @pytest.mark.asyncio
    async def test_response_carries_results(self, unit_env):
        """The response lists every option with string ids."""
        # Arrange
        use_case = await unit_env.get(VotePollUseCase)
        post = make_post(PostType.POLL)
        poll = make_poll(post, allow_multiple=True)
        await seed(unit_env, post, poll)
        red, green, _ = poll.options

        # Act
        response = await use_case.execute(
            VotePollRequest(
                user_id=str(uuid4()),
                poll_id=str(poll.id),
                option_ids=[str(red.id), str(green.id)],
            )
        )

        # Assert
        assert response.poll_id == str(poll.id)
        assert response.total_votes == 2
        assert [o.text for o in response.options] == ["Red", "Green", "Blue"]
        assert [o.percentage for o in response.options] == [50, 50, 0]
        assert sorted(response.my_option_ids) == sorted([str(red.id), str(green.id)])

    @pytest.mark.asyncio
    async def test_empty_selection_withdraws(self, unit_env):
        """Sending no options removes the voter's selection."""
        # Arrange
        use_case = await unit_env.get(VotePollUseCase)
        post = make_post(PostType.POLL)
        poll = make_poll(post)
        await seed(unit_env, post, poll)
        user_id = str(uuid4())
        await use_case.execute(
            VotePollRequest(
                user_id=user_id,
                poll_id=str(poll.id),
                option_ids=[str(poll.options[0].id)],
            )
        )

        # Act
        response = await use_case.execute(
            VotePollRequest(user_id=user_id, poll_id=str(poll.id), option_ids=[])
        )

        # Assert
        assert response.total_votes == 0
        assert response.my_option_ids == []

    @pytest.mark.asyncio
    async def test_malformed_option_id(self, unit_env):
        """Option ids that are not UUIDs are invalid options."""
        # Arrange
        use_case = await unit_env.get(VotePollUseCase)
        post = make_post(PostType.POLL)
        poll = make_poll(post)
        await seed(unit_env, post, poll)

        # Act & Assert
        with pytest.raises(InvalidOptionError):
            await use_case.execute(
                VotePollRequest(
                    user_id=str(uuid4()),
                    poll_id=str(poll.id),
                    option_ids=["not-a-uuid"],
                )
            )
