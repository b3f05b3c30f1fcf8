"""SQLAlchemy table definitions for the comment board.

These match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, ForeignKey, Index, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("user_name", String(100), nullable=False),
    Column("email", String(255), nullable=False),  # Lookup key, not unique
    Column("home_page", String(500), nullable=True),
    Column("ip_address", String(64), nullable=False),
    Column("user_agent", Text, nullable=False, server_default=""),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_email", users_table.c.email)

# ============================================================================
# COMMENTS TABLE (replies reference their parent)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "parent_id",
        UUID(as_uuid=True),
        ForeignKey("comments.id", ondelete="RESTRICT"),
        nullable=True,
    ),
    Column("text", Text, nullable=False),  # Sanitized HTML
    Column("image_path", String(500), nullable=True),
    Column("text_file_path", String(500), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_created_at", comments_table.c.created_at)
Index("idx_comments_user_id", comments_table.c.user_id)
