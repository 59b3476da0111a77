"""Shared in-memory tables for testing."""

from dataclasses import dataclass, field, replace

from agora.domain.model import Comment, Poll, PollVote, Post, Reaction, SideVote
from agora.domain.value import CommentId, PollId, PollVoteId, PostId, ReactionId, SideVoteId


@dataclass
class InMemoryStore:
    """Rows of every table, keyed by primary key.

    Domain models are frozen, so a snapshot only needs to copy the dicts.
    """

    posts: dict[PostId, Post] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    polls: dict[PollId, Poll] = field(default_factory=dict)
    reactions: dict[ReactionId, Reaction] = field(default_factory=dict)
    side_votes: dict[SideVoteId, SideVote] = field(default_factory=dict)
    poll_votes: dict[PollVoteId, PollVote] = field(default_factory=dict)

    def snapshot(self) -> "InMemoryStore":
        """Copy every table."""
        return replace(
            self,
            posts=dict(self.posts),
            comments=dict(self.comments),
            polls=dict(self.polls),
            reactions=dict(self.reactions),
            side_votes=dict(self.side_votes),
            poll_votes=dict(self.poll_votes),
        )

    def restore(self, snapshot: "InMemoryStore") -> None:
        """Put back the tables of an earlier snapshot."""
        self.posts = snapshot.posts
        self.comments = snapshot.comments
        self.polls = snapshot.polls
        self.reactions = snapshot.reactions
        self.side_votes = snapshot.side_votes
        self.poll_votes = snapshot.poll_votes
