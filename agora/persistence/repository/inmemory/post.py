"""In-memory post repository for testing."""

from typing import Optional

from agora.domain.model.post import Post
from agora.domain.repository.post import PostRepository
from agora.domain.value import PostId, TargetType

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._store.posts.get(post_id)

    async def lock(self, post_id: PostId) -> Optional[Post]:
        """Find a post; the unit of work already serializes transactions."""
        return self._store.posts.get(post_id)

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._store.posts[post.id] = post
        return post

    async def update_reaction_counts(
        self, post_id: PostId, upvotes: int, downvotes: int
    ) -> None:
        """Overwrite the post's reaction counters."""
        post = self._store.posts.get(post_id)
        if post:
            self._store.posts[post_id] = post.model_copy(
                update={"upvotes": upvotes, "downvotes": downvotes}
            )

    async def update_side_counts(
        self, post_id: PostId, votes_a: int, votes_b: int
    ) -> None:
        """Overwrite the post's VS counters."""
        post = self._store.posts.get(post_id)
        if post:
            self._store.posts[post_id] = post.model_copy(
                update={"votes_a": votes_a, "votes_b": votes_b}
            )

    async def delete(self, post_id: PostId) -> None:
        """Delete a post and everything that references it."""
        store = self._store
        store.posts.pop(post_id, None)

        comment_ids = {c.id for c in store.comments.values() if c.post_id == post_id}
        store.comments = {
            k: c for k, c in store.comments.items() if c.id not in comment_ids
        }
        store.reactions = {
            k: r
            for k, r in store.reactions.items()
            if not (r.target_type == TargetType.POST and r.target_id == post_id)
            and not (r.target_type == TargetType.COMMENT and r.target_id in comment_ids)
        }
        store.side_votes = {
            k: v for k, v in store.side_votes.items() if v.post_id != post_id
        }

        poll_ids = {p.id for p in store.polls.values() if p.post_id == post_id}
        store.polls = {k: p for k, p in store.polls.items() if p.id not in poll_ids}
        store.poll_votes = {
            k: v for k, v in store.poll_votes.items() if v.poll_id not in poll_ids
        }
