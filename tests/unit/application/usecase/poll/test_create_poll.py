"""Unit tests for CreatePollUseCase."""

from datetime import timedelta
from uuid import uuid4

import pytest

from agora.application.usecase.poll import CreatePollRequest, CreatePollUseCase
from agora.domain.error import InvalidArgumentError, NotFoundError
from agora.domain.model.common import utcnow
from agora.domain.value import PostType
from tests.conftest import make_post, seed
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePollUseCase:
    """Tests for CreatePollUseCase."""

    @pytest.mark.asyncio
    async def test_create_poll_with_zero_counters(self, unit_env):
        """A new poll starts with every option at zero."""
        # Arrange
        use_case = await unit_env.get(CreatePollUseCase)
        post = make_post(PostType.POLL)
        await seed(unit_env, post)

        # Act
        response = await use_case.execute(
            CreatePollRequest(
                post_id=str(post.id),
                options=["  Tea ", "Coffee", "Water"],
                ends_at=utcnow() + timedelta(days=1),
            )
        )

        # Assert
        assert response.total_votes == 0
        assert not response.has_ended
        assert [o.text for o in response.options] == ["Tea", "Coffee", "Water"]
        assert [o.order for o in response.options] == [0, 1, 2]
        assert all(o.percentage == 0 for o in response.options)

    @pytest.mark.asyncio
    async def test_second_poll_rejected(self, unit_env):
        """A post owns at most one poll."""
        # Arrange
        use_case = await unit_env.get(CreatePollUseCase)
        post = make_post(PostType.POLL)
        await seed(unit_env, post)
        request = CreatePollRequest(post_id=str(post.id), options=["Aa", "Bb", "Cc"])
        await use_case.execute(request)

        # Act & Assert
        with pytest.raises(InvalidArgumentError, match="already has a poll"):
            await use_case.execute(request)

    @pytest.mark.asyncio
    async def test_too_few_options(self, unit_env):
        """Option count is checked before touching storage."""
        # Arrange
        use_case = await unit_env.get(CreatePollUseCase)

        # Act & Assert
        with pytest.raises(InvalidArgumentError, match="between 3 and 6"):
            await use_case.execute(
                CreatePollRequest(post_id=str(uuid4()), options=["Yes", "No"])
            )

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        """Creating a poll on a missing post is not found."""
        # Arrange
        use_case = await unit_env.get(CreatePollUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreatePollRequest(post_id=str(uuid4()), options=["Aa", "Bb", "Cc"])
            )
