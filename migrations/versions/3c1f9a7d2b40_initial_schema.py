"""initial_schema

Create the schema for World News:
- Users (email or phone contact, home country, admin and active flags)
- Credentials (password sign-in identities)
- Posts (country and category tagged, with the liking set and its counter)

Revision ID: 3c1f9a7d2b40
Revises:
Create Date: 2026-10-19 09:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a7d2b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

COUNTRY_CODES = ("US", "UK", "FR", "DE", "JP", "BR", "IN", "AU")
CATEGORIES = (
    "culture",
    "sports",
    "education",
    "lifestyle",
    "environment",
    "politics",
)


def _create_enum(name: str, values: Sequence[str]) -> None:
    labels = ", ".join(f"'{value}'" for value in values)
    op.execute(f"""
        DO $$ BEGIN
            CREATE TYPE {name} AS ENUM ({labels});
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    _create_enum("country_code", COUNTRY_CODES)
    _create_enum("post_category", CATEGORIES)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(20), nullable=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column(
            "country",
            postgresql.ENUM(*COUNTRY_CODES, name="country_code", create_type=False),
            nullable=False,
        ),
        sa.Column("avatar", sa.String(16), nullable=False),
        sa.Column("bio", sa.Text(), nullable=False, server_default=""),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.UniqueConstraint("phone", name="uq_users_phone"),
        sa.UniqueConstraint("username", name="uq_users_username"),
        sa.CheckConstraint(
            "(email IS NOT NULL OR phone IS NOT NULL)",
            name="email_or_phone_required",
        ),
    )
    op.create_index(
        "idx_users_created_at", "users", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # CREDENTIALS table
    # ========================================================================
    op.create_table(
        "credentials",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("contact_type", sa.String(10), nullable=False),  # 'email', 'phone'
        sa.Column("contact", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("last_login_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("contact_type", "contact", name="uq_credential_contact"),
    )
    op.create_index("idx_credentials_user_id", "credentials", ["user_id"])

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "country",
            postgresql.ENUM(*COUNTRY_CODES, name="country_code", create_type=False),
            nullable=False,
        ),
        sa.Column(
            "category",
            postgresql.ENUM(*CATEGORIES, name="post_category", create_type=False),
            nullable=False,
        ),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("image", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "liked_by",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "likes = cardinality(liked_by)", name="likes_match_liked_by"
        ),
    )
    op.create_index(
        "idx_posts_feed",
        "posts",
        ["is_active", "country", "category", sa.text("created_at DESC")],
    )
    op.create_index("idx_posts_user_id", "posts", ["user_id"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("posts")
    op.drop_table("credentials")
    op.drop_table("users")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS post_category")
    op.execute("DROP TYPE IF EXISTS country_code")
