"""initial_schema

Create the schema for profiles, comments and personality votes:
- Profiles (externally assigned numeric IDs)
- Comments (with denormalized per-system vote tallies)
- Votes (one per voter per personality system per comment)

Revision ID: 3c5e0f1a9b2d
Revises:
Create Date: 2026-10-18 10:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c5e0f1a9b2d"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE personality_system AS ENUM ('mbti', 'enneagram', 'zodiac');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # PROFILES TABLE
    # ========================================================================
    op.create_table(
        "profiles",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("mbti", sa.String(4), nullable=False),
        sa.Column("enneagram", sa.String(10), nullable=False),
        sa.Column("variant", sa.String(20), nullable=False),
        sa.Column("tritype", sa.Integer(), nullable=False),
        sa.Column("socionics", sa.String(10), nullable=False),
        sa.Column("sloan", sa.String(5), nullable=False),
        sa.Column("psyche", sa.String(4), nullable=False),
        sa.Column("image", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("id BETWEEN 1 AND 99999", name="profile_id_range"),
        sa.CheckConstraint("tritype BETWEEN 100 AND 999", name="tritype_range"),
    )
    op.create_index("idx_profiles_mbti", "profiles", ["mbti"])

    # ========================================================================
    # COMMENTS TABLE
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column(
            "id",
            postgresql.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("profile_id", sa.Integer(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("title", sa.String(200), nullable=True),
        sa.Column("author", sa.String(100), nullable=False),
        sa.Column(
            "is_visible", sa.Boolean(), server_default=sa.text("true"), nullable=False
        ),
        sa.Column(
            "vote_stats",
            postgresql.JSONB(),
            server_default=sa.text(
                "'{\"mbti\": {}, \"enneagram\": {}, \"zodiac\": {}}'::jsonb"
            ),
            nullable=False,
        ),
        sa.Column("total_votes", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["profile_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.CheckConstraint("total_votes >= 0", name="total_votes_non_negative"),
    )
    op.execute(
        "CREATE INDEX idx_comments_profile_created "
        "ON comments (profile_id, created_at DESC)"
    )
    op.create_index("idx_comments_created_at", "comments", ["created_at"])
    op.execute(
        "CREATE INDEX idx_comments_best ON comments (total_votes DESC, created_at DESC)"
    )
    op.create_index("idx_comments_is_visible", "comments", ["is_visible"])

    # ========================================================================
    # VOTES TABLE
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column(
            "id",
            postgresql.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("comment_id", postgresql.UUID(), nullable=False),
        sa.Column("profile_id", sa.Integer(), nullable=False),
        sa.Column("voter_identifier", sa.String(100), nullable=False),
        sa.Column(
            "personality_system",
            postgresql.ENUM(
                "mbti",
                "enneagram",
                "zodiac",
                name="personality_system",
                create_type=False,
            ),
            nullable=False,
        ),
        sa.Column("personality_value", sa.String(50), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.UniqueConstraint(
            "comment_id",
            "voter_identifier",
            "personality_system",
            name="uq_votes_comment_voter_system",
        ),
    )
    op.create_index(
        "idx_votes_comment_system", "votes", ["comment_id", "personality_system"]
    )
    op.execute(
        "CREATE INDEX idx_votes_voter_created ON votes (voter_identifier, created_at DESC)"
    )
    op.create_index("idx_votes_profile_id", "votes", ["profile_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("votes")
    op.drop_table("comments")
    op.drop_table("profiles")
    op.execute("DROP TYPE IF EXISTS personality_system")
