"""Domain model entities for Agora."""

from agora.domain.model.comment import Comment
from agora.domain.model.poll import Poll, PollOption, PollVote
from agora.domain.model.post import Post
from agora.domain.model.reaction import Reaction
from agora.domain.model.side_vote import SideVote

__all__ = [
    "Post",
    "Comment",
    "Reaction",
    "SideVote",
    "Poll",
    "PollOption",
    "PollVote",
]
