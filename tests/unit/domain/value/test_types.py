"""Unit tests for vote vocabularies."""

import pytest

from agora.domain.error import InvalidArgumentError
from agora.domain.value import ReactionType, TargetType, VsSide


class TestVoteEnumParse:
    """Tests for parsing caller input into enum members."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("UPVOTE", ReactionType.UPVOTE),
            ("upvote", ReactionType.UPVOTE),
            (" Downvote ", ReactionType.DOWNVOTE),
            (ReactionType.DOWNVOTE, ReactionType.DOWNVOTE),
        ],
    )
    def test_parses_any_case(self, raw, expected):
        """Values are matched case-insensitively."""
        assert ReactionType.parse(raw) is expected

    def test_parses_sides(self):
        """Side letters parse in lower case too."""
        assert VsSide.parse("b") is VsSide.B

    @pytest.mark.parametrize("raw", ["LIKE", "", None, "C"])
    def test_rejects_unknown_values(self, raw):
        """Anything outside the vocabulary is an invalid argument."""
        with pytest.raises(InvalidArgumentError):
            ReactionType.parse(raw)
        with pytest.raises(InvalidArgumentError):
            VsSide.parse(raw)

    def test_error_lists_allowed_values(self):
        """The message names every accepted value."""
        with pytest.raises(InvalidArgumentError, match="POST or COMMENT"):
            TargetType.parse("user")

    def test_error_code(self):
        """Parse failures carry the invalid_argument code."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            VsSide.parse("neither")

        assert exc_info.value.code == "invalid_argument"
