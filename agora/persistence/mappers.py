"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from agora.domain.model import Comment, Poll, PollOption, PollVote, Post, Reaction, SideVote
from agora.domain.value import (
    CommentId,
    PollId,
    PollOptionId,
    PollVoteId,
    PostId,
    PostType,
    ReactionId,
    ReactionType,
    SideVoteId,
    TargetType,
    UserId,
    VsSide,
)


def _uuid(value: Any) -> UUID:
    """Normalize a driver value (UUID or str) to UUID."""
    return UUID(value) if isinstance(value, str) else value


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        type=PostType(row["type"]),
        title=row["title"],
        author_id=UserId(_uuid(row["author_id"])),
        side_a=row.get("side_a"),
        side_b=row.get("side_b"),
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        votes_a=row["votes_a"],
        votes_b=row["votes_b"],
        is_hidden=row["is_hidden"],
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = post.model_dump()
    data["type"] = post.type.value
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        text=row["text"],
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        is_hidden=row["is_hidden"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_reaction(row: Dict[str, Any], target_type: TargetType) -> Reaction:
    """Convert a post_reactions or comment_reactions row to a Reaction.

    Args:
        row: Database row as dict
        target_type: Which ledger table the row came from

    Returns:
        Reaction domain model
    """
    target_column = "post_id" if target_type == TargetType.POST else "comment_id"
    return Reaction(
        id=ReactionId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        target_type=target_type,
        target_id=_uuid(row[target_column]),
        type=ReactionType(row["type"]),
        created_at=row["created_at"],
    )


def reaction_to_dict(reaction: Reaction) -> Dict[str, Any]:
    """Convert Reaction domain model to a row of its ledger table."""
    target_column = (
        "post_id" if reaction.target_type == TargetType.POST else "comment_id"
    )
    return {
        "id": reaction.id,
        "user_id": reaction.user_id,
        target_column: reaction.target_id,
        "type": reaction.type.value,
        "created_at": reaction.created_at,
    }


def row_to_side_vote(row: Dict[str, Any]) -> SideVote:
    """Convert database row to SideVote domain model."""
    return SideVote(
        id=SideVoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        post_id=PostId(_uuid(row["post_id"])),
        side=VsSide(row["side"]),
        created_at=row["created_at"],
    )


def side_vote_to_dict(vote: SideVote) -> Dict[str, Any]:
    """Convert SideVote domain model to database dict."""
    data = vote.model_dump()
    data["side"] = vote.side.value
    return data


def row_to_poll_option(row: Dict[str, Any]) -> PollOption:
    """Convert database row to PollOption domain model."""
    return PollOption(
        id=PollOptionId(_uuid(row["id"])),
        poll_id=PollId(_uuid(row["poll_id"])),
        text=row["text"],
        order=row["order"],
        vote_count=row["vote_count"],
    )


def row_to_poll(row: Dict[str, Any], option_rows: Iterable[Dict[str, Any]]) -> Poll:
    """Convert a polls row and its poll_options rows to a Poll aggregate.

    Args:
        row: polls row as dict
        option_rows: poll_options rows of this poll

    Returns:
        Poll domain model with options in display order
    """
    return Poll(
        id=PollId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        allow_multiple=row["allow_multiple"],
        max_choices=row.get("max_choices"),
        ends_at=row.get("ends_at"),
        total_votes=row["total_votes"],
        options=[row_to_poll_option(option_row) for option_row in option_rows],
        created_at=row["created_at"],
    )


def poll_to_dict(poll: Poll) -> Dict[str, Any]:
    """Convert Poll domain model to a polls row (options excluded)."""
    return poll.model_dump(exclude={"options"})


def poll_option_to_dict(option: PollOption) -> Dict[str, Any]:
    """Convert PollOption domain model to database dict."""
    return option.model_dump()


def row_to_poll_vote(row: Dict[str, Any]) -> PollVote:
    """Convert database row to PollVote domain model."""
    return PollVote(
        id=PollVoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        poll_id=PollId(_uuid(row["poll_id"])),
        option_id=PollOptionId(_uuid(row["option_id"])),
        created_at=row["created_at"],
    )


def poll_vote_to_dict(vote: PollVote) -> Dict[str, Any]:
    """Convert PollVote domain model to database dict."""
    return vote.model_dump()
