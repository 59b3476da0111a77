"""SQLAlchemy table definitions for the Agora voting engine.

These table definitions are used with SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    ForeignKeyConstraint,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

reaction_type_enum = Enum(
    "UPVOTE", "DOWNVOTE", name="reaction_type", create_type=False
)
vs_side_enum = Enum("A", "B", name="vs_side", create_type=False)
post_type_enum = Enum("TEXT", "VS", "POLL", name="post_type", create_type=False)

# ============================================================================
# POSTS TABLE (votable target; content owned elsewhere)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("type", post_type_enum, nullable=False, server_default="TEXT"),
    Column("title", String(160), nullable=False),
    Column("author_id", UUID, nullable=False),
    Column("side_a", String(160), nullable=True),
    Column("side_b", String(160), nullable=True),
    # Denormalized from post_reactions / side_votes
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column("votes_a", Integer, nullable=False, server_default="0"),
    Column("votes_b", Integer, nullable=False, server_default="0"),
    Column("is_hidden", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "upvotes >= 0 AND downvotes >= 0 AND votes_a >= 0 AND votes_b >= 0",
        name="post_counters_non_negative",
    ),
)

Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("author_id", UUID, nullable=False),
    Column("text", Text, nullable=False),
    # Denormalized from comment_reactions
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column("is_hidden", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)

# ============================================================================
# REACTION LEDGERS (one per target type so rows cascade with their target)
# ============================================================================
post_reactions_table = Table(
    "post_reactions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, nullable=False),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("type", reaction_type_enum, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "post_id", name="uq_post_reaction_user_post"),
)

Index("idx_post_reactions_post_type", post_reactions_table.c.post_id, post_reactions_table.c.type)

comment_reactions_table = Table(
    "comment_reactions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, nullable=False),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("type", reaction_type_enum, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "comment_id", name="uq_comment_reaction_user_comment"),
)

Index(
    "idx_comment_reactions_comment_type",
    comment_reactions_table.c.comment_id,
    comment_reactions_table.c.type,
)

# ============================================================================
# SIDE VOTES TABLE (VS posts)
# ============================================================================
side_votes_table = Table(
    "side_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, nullable=False),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("side", vs_side_enum, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "post_id", name="uq_side_vote_user_post"),
)

Index("idx_side_votes_post_side", side_votes_table.c.post_id, side_votes_table.c.side)

# ============================================================================
# POLLS / POLL OPTIONS / POLL VOTES
# ============================================================================
polls_table = Table(
    "polls",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "post_id",
        UUID,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    ),
    Column("allow_multiple", Boolean, nullable=False, server_default="false"),
    Column("max_choices", Integer, nullable=True),
    Column("ends_at", TIMESTAMP(timezone=True), nullable=True),
    # Denormalized from poll_votes
    Column("total_votes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("max_choices IS NULL OR max_choices >= 1", name="max_choices_positive"),
)

poll_options_table = Table(
    "poll_options",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("poll_id", UUID, ForeignKey("polls.id", ondelete="CASCADE"), nullable=False),
    Column("text", String(100), nullable=False),
    Column("order", Integer, nullable=False),
    # Denormalized from poll_votes
    Column("vote_count", Integer, nullable=False, server_default="0"),
    UniqueConstraint("poll_id", "order", name="uq_poll_option_order"),
    UniqueConstraint("poll_id", "id", name="uq_poll_option_poll_id"),
)

Index("idx_poll_options_poll_id", poll_options_table.c.poll_id)

# Uniqueness per (user, poll) depends on the poll's policy and is enforced by
# the poll service; the schema only rules out picking the same option twice.
poll_votes_table = Table(
    "poll_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, nullable=False),
    Column("poll_id", UUID, ForeignKey("polls.id", ondelete="CASCADE"), nullable=False),
    Column("option_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "poll_id", "option_id", name="uq_poll_vote_user_option"),
    # Composite key: the option must belong to the same poll
    ForeignKeyConstraint(
        ["poll_id", "option_id"],
        ["poll_options.poll_id", "poll_options.id"],
        ondelete="CASCADE",
        name="fk_poll_vote_option_in_poll",
    ),
)

Index("idx_poll_votes_poll_id", poll_votes_table.c.poll_id)
Index("idx_poll_votes_option_id", poll_votes_table.c.option_id)
Index("idx_poll_votes_user_poll", poll_votes_table.c.user_id, poll_votes_table.c.poll_id)
