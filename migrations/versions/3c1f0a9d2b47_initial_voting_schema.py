"""initial_voting_schema

Create the voting schema:
- Posts (TEXT / VS / POLL) with denormalized reaction and side counters
- Comments with denormalized reaction counters
- Reaction ledgers (one per target type)
- Side votes (VS posts)
- Polls, poll options and poll votes

Revision ID: 3c1f0a9d2b47
Revises:
Create Date: 2026-10-18 09:12:44.318207

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b47"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _created_at_column() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE post_type AS ENUM ('TEXT', 'VS', 'POLL');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE reaction_type AS ENUM ('UPVOTE', 'DOWNVOTE');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE vs_side AS ENUM ('A', 'B');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    reaction_type = postgresql.ENUM(
        "UPVOTE", "DOWNVOTE", name="reaction_type", create_type=False
    )

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        _id_column(),
        sa.Column(
            "type",
            postgresql.ENUM("TEXT", "VS", "POLL", name="post_type", create_type=False),
            nullable=False,
            server_default="TEXT",
        ),
        sa.Column("title", sa.String(160), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("side_a", sa.String(160), nullable=True),
        sa.Column("side_b", sa.String(160), nullable=True),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("votes_a", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("votes_b", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_hidden", sa.Boolean(), nullable=False, server_default="false"),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "upvotes >= 0 AND downvotes >= 0 AND votes_a >= 0 AND votes_b >= 0",
            name="post_counters_non_negative",
        ),
    )
    op.create_index("idx_posts_author_id", "posts", ["author_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        _id_column(),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_hidden", sa.Boolean(), nullable=False, server_default="false"),
        _created_at_column(),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_comments_post_id", "comments", ["post_id"])

    # ========================================================================
    # REACTION ledgers
    # ========================================================================
    op.create_table(
        "post_reactions",
        _id_column(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("type", reaction_type, nullable=False),
        _created_at_column(),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "post_id", name="uq_post_reaction_user_post"),
    )
    op.create_index(
        "idx_post_reactions_post_type", "post_reactions", ["post_id", "type"]
    )

    op.create_table(
        "comment_reactions",
        _id_column(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("comment_id", sa.UUID(), nullable=False),
        sa.Column("type", reaction_type, nullable=False),
        _created_at_column(),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "comment_id", name="uq_comment_reaction_user_comment"
        ),
    )
    op.create_index(
        "idx_comment_reactions_comment_type",
        "comment_reactions",
        ["comment_id", "type"],
    )

    # ========================================================================
    # SIDE_VOTES table
    # ========================================================================
    op.create_table(
        "side_votes",
        _id_column(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column(
            "side",
            postgresql.ENUM("A", "B", name="vs_side", create_type=False),
            nullable=False,
        ),
        _created_at_column(),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "post_id", name="uq_side_vote_user_post"),
    )
    op.create_index("idx_side_votes_post_side", "side_votes", ["post_id", "side"])

    # ========================================================================
    # POLLS / POLL_OPTIONS / POLL_VOTES
    # ========================================================================
    op.create_table(
        "polls",
        _id_column(),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column(
            "allow_multiple", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("max_choices", sa.Integer(), nullable=True),
        sa.Column("ends_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("total_votes", sa.Integer(), nullable=False, server_default="0"),
        _created_at_column(),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("post_id", name="uq_poll_post"),
        sa.CheckConstraint(
            "max_choices IS NULL OR max_choices >= 1", name="max_choices_positive"
        ),
    )

    op.create_table(
        "poll_options",
        _id_column(),
        sa.Column("poll_id", sa.UUID(), nullable=False),
        sa.Column("text", sa.String(100), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.Column("vote_count", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["poll_id"], ["polls.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("poll_id", "order", name="uq_poll_option_order"),
        sa.UniqueConstraint("poll_id", "id", name="uq_poll_option_poll_id"),
    )
    op.create_index("idx_poll_options_poll_id", "poll_options", ["poll_id"])

    op.create_table(
        "poll_votes",
        _id_column(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("poll_id", sa.UUID(), nullable=False),
        sa.Column("option_id", sa.UUID(), nullable=False),
        _created_at_column(),
        sa.ForeignKeyConstraint(["poll_id"], ["polls.id"], ondelete="CASCADE"),
        # The option must belong to the same poll
        sa.ForeignKeyConstraint(
            ["poll_id", "option_id"],
            ["poll_options.poll_id", "poll_options.id"],
            ondelete="CASCADE",
            name="fk_poll_vote_option_in_poll",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "poll_id", "option_id", name="uq_poll_vote_user_option"
        ),
    )
    op.create_index("idx_poll_votes_poll_id", "poll_votes", ["poll_id"])
    op.create_index("idx_poll_votes_option_id", "poll_votes", ["option_id"])
    op.create_index("idx_poll_votes_user_poll", "poll_votes", ["user_id", "poll_id"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("poll_votes")
    op.drop_table("poll_options")
    op.drop_table("polls")
    op.drop_table("side_votes")
    op.drop_table("comment_reactions")
    op.drop_table("post_reactions")
    op.drop_table("comments")
    op.drop_table("posts")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS vs_side")
    op.execute("DROP TYPE IF EXISTS reaction_type")
    op.execute("DROP TYPE IF EXISTS post_type")
