"""Unit tests for row <-> domain mappers."""

from datetime import datetime, timezone
from uuid import uuid4

from agora.domain.value import PostType, ReactionType, TargetType, VsSide
from agora.persistence.mappers import (
    poll_to_dict,
    post_to_dict,
    reaction_to_dict,
    row_to_poll,
    row_to_post,
    row_to_reaction,
    row_to_side_vote,
)
from tests.conftest import make_poll, make_post

NOW = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


class TestPostMapping:
    """Tests for post mappers."""

    def test_round_trip_preserves_fields(self):
        """A post survives conversion to a row and back."""
        post = make_post(PostType.VS, upvotes=3, votes_b=2)

        assert row_to_post(post_to_dict(post)) == post

    def test_string_ids_are_parsed(self):
        """Drivers that return UUIDs as strings are handled."""
        post_id, author_id = uuid4(), uuid4()
        row = {
            "id": str(post_id),
            "type": "TEXT",
            "title": "Hello",
            "author_id": str(author_id),
            "upvotes": 0,
            "downvotes": 0,
            "votes_a": 0,
            "votes_b": 0,
            "is_hidden": False,
            "created_at": NOW,
        }

        post = row_to_post(row)

        assert post.id == post_id
        assert post.author_id == author_id
        assert post.side_a is None


class TestReactionMapping:
    """Tests for reaction mappers."""

    def test_comment_reaction_uses_comment_column(self):
        """The target id lands in the ledger table's own column."""
        comment_id = uuid4()
        row = {
            "id": uuid4(),
            "user_id": uuid4(),
            "comment_id": comment_id,
            "type": "DOWNVOTE",
            "created_at": NOW,
        }

        reaction = row_to_reaction(row, TargetType.COMMENT)

        assert reaction.target_id == comment_id
        assert reaction.type == ReactionType.DOWNVOTE
        data = reaction_to_dict(reaction)
        assert data["comment_id"] == comment_id
        assert "post_id" not in data
        assert data["type"] == "DOWNVOTE"


class TestPollMapping:
    """Tests for poll mappers."""

    def test_poll_row_excludes_options(self):
        """Options are stored in their own table."""
        poll = make_poll(make_post(PostType.POLL))

        assert "options" not in poll_to_dict(poll)

    def test_options_are_sorted_by_order(self):
        """Options come back in display order whatever the row order."""
        poll = make_poll(make_post(PostType.POLL))
        option_rows = [o.model_dump() for o in reversed(poll.options)]

        mapped = row_to_poll(poll_to_dict(poll), option_rows)

        assert [o.order for o in mapped.options] == [0, 1, 2]
        assert mapped == poll

    def test_side_vote_row(self):
        """Side votes parse their enum."""
        row = {
            "id": uuid4(),
            "user_id": uuid4(),
            "post_id": uuid4(),
            "side": "B",
            "created_at": NOW,
        }

        assert row_to_side_vote(row).side == VsSide.B
