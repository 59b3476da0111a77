"""End-to-end tests for the vote endpoints."""

from uuid import uuid4

import pytest

from agora.domain.value import PostType
from tests.conftest import make_comment, make_post, seed


def auth(user_id=None) -> dict[str, str]:
    """Headers of an authenticated caller."""
    return {"X-User-Id": str(user_id or uuid4())}


class TestReactionEndpoints:
    """Tests for POST /posts/{id}/react and POST /comments/{id}/react."""

    @pytest.mark.asyncio
    async def test_toggle_post_reaction(self, client, container):
        """Reacting twice with the same type removes the reaction."""
        # Arrange
        post = make_post()
        await seed(container, post)
        headers = auth()

        # Act
        first = await client.post(
            f"/posts/{post.id}/react", json={"type": "upvote"}, headers=headers
        )
        second = await client.post(
            f"/posts/{post.id}/react", json={"type": "UPVOTE"}, headers=headers
        )

        # Assert
        assert first.status_code == 200
        assert first.json() == {"upvotes": 1, "downvotes": 0, "score": 1}
        assert second.json() == {"upvotes": 0, "downvotes": 0, "score": 0}

    @pytest.mark.asyncio
    async def test_comment_reaction(self, client, container):
        """Comments accept reactions through their own route."""
        # Arrange
        post = make_post()
        comment = make_comment(post)
        await seed(container, post, comment)

        # Act
        response = await client.post(
            f"/comments/{comment.id}/react", json={"type": "DOWNVOTE"}, headers=auth()
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["score"] == -1

    @pytest.mark.asyncio
    async def test_requires_user(self, client, container):
        """Anonymous callers cannot vote."""
        # Arrange
        post = make_post()
        await seed(container, post)

        # Act
        response = await client.post(f"/posts/{post.id}/react", json={"type": "UPVOTE"})

        # Assert
        assert response.status_code == 401
        assert response.json()["detail"] == "Authentication required to vote"

    @pytest.mark.asyncio
    async def test_malformed_user_header(self, client, container):
        """A user id that is not a UUID fails request validation."""
        # Act
        response = await client.post(
            f"/posts/{uuid4()}/react",
            json={"type": "UPVOTE"},
            headers={"X-User-Id": "alice"},
        )

        # Assert
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_unknown_reaction_type(self, client, container):
        """Unknown types come back as invalid_argument."""
        # Arrange
        post = make_post()
        await seed(container, post)

        # Act
        response = await client.post(
            f"/posts/{post.id}/react", json={"type": "LOVE"}, headers=auth()
        )

        # Assert
        assert response.status_code == 400
        assert response.json()["code"] == "invalid_argument"
        assert "UPVOTE or DOWNVOTE" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_hidden_post_not_found(self, client, container):
        """Hidden posts cannot receive reactions."""
        # Arrange
        post = make_post(is_hidden=True)
        await seed(container, post)

        # Act
        response = await client.post(
            f"/posts/{post.id}/react", json={"type": "UPVOTE"}, headers=auth()
        )

        # Assert
        assert response.status_code == 404
        assert response.json()["code"] == "not_found"


class TestSideVoteEndpoint:
    """Tests for POST /posts/{id}/vs-vote."""

    @pytest.mark.asyncio
    async def test_switch_sides(self, client, container):
        """Voting the other side moves the caller's vote."""
        # Arrange
        post = make_post(PostType.VS)
        await seed(container, post)
        headers = auth()

        # Act
        await client.post(f"/posts/{post.id}/vs-vote", json={"side": "A"}, headers=headers)
        response = await client.post(
            f"/posts/{post.id}/vs-vote", json={"side": "b"}, headers=headers
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {"votes_a": 0, "votes_b": 1}

    @pytest.mark.asyncio
    async def test_missing_side(self, client, container):
        """A body without a side fails request validation."""
        # Act
        response = await client.post(f"/posts/{uuid4()}/vs-vote", json={}, headers=auth())

        # Assert
        assert response.status_code == 422


class TestHealthEndpoint:
    """Tests for GET /health."""

    @pytest.mark.asyncio
    async def test_health(self, client):
        """Health check reports the service as healthy."""
        # Act
        response = await client.get("/health")

        # Assert
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["database"] == "ok"
