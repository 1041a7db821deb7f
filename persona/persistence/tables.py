"""SQLAlchemy table definitions.

These Core tables back the Postgres repositories. They match the schema
defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

metadata = MetaData()

EMPTY_VOTE_STATS = text(
    "'{\"mbti\": {}, \"enneagram\": {}, \"zodiac\": {}}'::jsonb"
)

# ============================================================================
# PROFILES TABLE (externally assigned numeric IDs)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("name", String(100), nullable=False),
    Column("description", Text, nullable=False),
    Column("mbti", String(4), nullable=False),
    Column("enneagram", String(10), nullable=False),
    Column("variant", String(20), nullable=False),
    Column("tritype", Integer, nullable=False),
    Column("socionics", String(10), nullable=False),
    Column("sloan", String(5), nullable=False),
    Column("psyche", String(4), nullable=False),
    Column("image", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("id BETWEEN 1 AND 99999", name="profile_id_range"),
    CheckConstraint("tritype BETWEEN 100 AND 999", name="tritype_range"),
)

Index("idx_profiles_mbti", profiles_table.c.mbti)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "profile_id",
        Integer,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    Column("title", String(200), nullable=True),
    Column("author", String(100), nullable=False),
    Column("is_visible", Boolean, nullable=False, server_default="true"),
    # personality system -> personality value -> count
    Column("vote_stats", JSONB, nullable=False, server_default=EMPTY_VOTE_STATS),
    Column("total_votes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("total_votes >= 0", name="total_votes_non_negative"),
)

Index(
    "idx_comments_profile_created",
    comments_table.c.profile_id,
    comments_table.c.created_at.desc(),
)
Index("idx_comments_created_at", comments_table.c.created_at)
Index(
    "idx_comments_best",
    comments_table.c.total_votes.desc(),
    comments_table.c.created_at.desc(),
)
Index("idx_comments_is_visible", comments_table.c.is_visible)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("profile_id", Integer, nullable=False),
    Column("voter_identifier", String(100), nullable=False),
    Column(
        "personality_system",
        postgresql.ENUM(
            "mbti", "enneagram", "zodiac", name="personality_system", create_type=False
        ),
        nullable=False,
    ),
    Column("personality_value", String(50), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # One vote per voter per system per comment
    UniqueConstraint(
        "comment_id",
        "voter_identifier",
        "personality_system",
        name="uq_votes_comment_voter_system",
    ),
)

Index(
    "idx_votes_comment_system",
    votes_table.c.comment_id,
    votes_table.c.personality_system,
)
Index(
    "idx_votes_voter_created",
    votes_table.c.voter_identifier,
    votes_table.c.created_at.desc(),
)
Index("idx_votes_profile_id", votes_table.c.profile_id)
