"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import (
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# CONTENT NODES TABLE
# ============================================================================
content_nodes_table = Table(
    "content_nodes",
    metadata,
    Column("id", String, primary_key=True),
    Column("parent_id", String, nullable=False),  # "-1" for top-level nodes
    Column("name", String, nullable=False),
    Column("path", Text, nullable=False),  # "-1,1066,1234", root to node
    Column("level", Integer, nullable=False),
)

Index("idx_content_nodes_parent_id", content_nodes_table.c.parent_id)
