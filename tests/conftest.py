"""Test configuration and fixtures."""

from datetime import datetime
from typing import Optional, Sequence
from uuid import uuid4

import logfire
import pytest
from dishka import AsyncContainer

from agora.domain.model import Comment, Poll, PollOption, Post
from agora.domain.repository import UnitOfWork
from agora.domain.value import (
    CommentId,
    PollId,
    PollOptionId,
    PostId,
    PostType,
    UserId,
)


@pytest.fixture(scope="session", autouse=True)
def quiet_logfire():
    """Keep spans local and off the console during tests."""
    logfire.configure(send_to_logfire=False, console=False)


def make_post(post_type: PostType = PostType.TEXT, **overrides) -> Post:
    """Build a post; VS posts get default sides."""
    fields = {
        "id": PostId(uuid4()),
        "type": post_type,
        "title": f"Test {post_type.value.lower()} post",
        "author_id": UserId(uuid4()),
    }
    if post_type == PostType.VS:
        fields.update(side_a="Tabs", side_b="Spaces")
    fields.update(overrides)
    return Post(**fields)


def make_comment(post: Post, **overrides) -> Comment:
    """Build a comment on ``post``."""
    fields = {
        "id": CommentId(uuid4()),
        "post_id": post.id,
        "author_id": UserId(uuid4()),
        "text": "Test comment",
    }
    fields.update(overrides)
    return Comment(**fields)


def make_poll(
    post: Post,
    texts: Sequence[str] = ("Red", "Green", "Blue"),
    allow_multiple: bool = False,
    max_choices: Optional[int] = None,
    ends_at: Optional[datetime] = None,
) -> Poll:
    """Build a poll on ``post`` with options in the given order.

    Unlike PollService.create_poll this accepts any deadline, so tests can
    build polls that have already ended.
    """
    poll_id = PollId(uuid4())
    return Poll(
        id=poll_id,
        post_id=post.id,
        allow_multiple=allow_multiple,
        max_choices=max_choices,
        ends_at=ends_at,
        options=[
            PollOption(id=PollOptionId(uuid4()), poll_id=poll_id, text=text, order=i)
            for i, text in enumerate(texts)
        ],
    )


async def seed(env: AsyncContainer, *models) -> None:
    """Store posts, comments and polls in one transaction."""
    unit_of_work = await env.get(UnitOfWork)
    async with unit_of_work.transaction() as tx:
        for model in models:
            if isinstance(model, Post):
                await tx.posts.save(model)
            elif isinstance(model, Comment):
                await tx.comments.save(model)
            elif isinstance(model, Poll):
                await tx.polls.save(model)
            else:
                raise TypeError(f"Cannot seed {type(model).__name__}")


async def load(env: AsyncContainer, model):
    """Re-read a stored post, comment or poll."""
    unit_of_work = await env.get(UnitOfWork)
    async with unit_of_work.transaction() as tx:
        if isinstance(model, Post):
            return await tx.posts.find_by_id(model.id)
        if isinstance(model, Comment):
            return await tx.comments.find_by_id(model.id)
        if isinstance(model, Poll):
            return await tx.polls.find_by_id(model.id)
        raise TypeError(f"Cannot load {type(model).__name__}")
