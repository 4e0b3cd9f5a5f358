"""SQLAlchemy table definitions for World News.

These table definitions are used by the Core-based repositories.
They match the schema defined in Alembic migrations.
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
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

COUNTRY_CODES = ("US", "UK", "FR", "DE", "JP", "BR", "IN", "AU")
CATEGORIES = (
    "culture",
    "sports",
    "education",
    "lifestyle",
    "environment",
    "politics",
)

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=True, unique=True),
    Column("phone", String(20), nullable=True, unique=True),
    Column("name", String(100), nullable=False),
    Column("username", String(50), nullable=False, unique=True),
    Column(
        "country",
        postgresql.ENUM(*COUNTRY_CODES, name="country_code", create_type=False),
        nullable=False,
    ),
    Column("avatar", String(16), nullable=False),
    Column("bio", Text, nullable=False, server_default=""),
    Column("is_admin", Boolean, nullable=False, server_default="false"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "(email IS NOT NULL OR phone IS NOT NULL)",
        name="email_or_phone_required",
    ),
)

Index("idx_users_created_at", users_table.c.created_at.desc())

# ============================================================================
# CREDENTIALS TABLE (sign-in identities)
# ============================================================================
credentials_table = Table(
    "credentials",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("contact_type", String(10), nullable=False),  # 'email' or 'phone'
    Column("contact", String(255), nullable=False),  # Normalized
    Column("password_hash", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("last_login_at", TIMESTAMP(timezone=True), nullable=True),
    UniqueConstraint("contact_type", "contact", name="uq_credential_contact"),
)

Index("idx_credentials_user_id", credentials_table.c.user_id)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "country",
        postgresql.ENUM(*COUNTRY_CODES, name="country_code", create_type=False),
        nullable=False,
    ),
    Column(
        "category",
        postgresql.ENUM(*CATEGORIES, name="post_category", create_type=False),
        nullable=False,
    ),
    Column("title", String(200), nullable=False),
    Column("content", Text, nullable=False),
    Column("image", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column(
        "liked_by",
        postgresql.ARRAY(UUID),
        nullable=False,
        server_default="{}",
    ),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    CheckConstraint("likes = cardinality(liked_by)", name="likes_match_liked_by"),
)

Index(
    "idx_posts_feed",
    posts_table.c.is_active,
    posts_table.c.country,
    posts_table.c.category,
    posts_table.c.created_at.desc(),
)
Index("idx_posts_user_id", posts_table.c.user_id)
