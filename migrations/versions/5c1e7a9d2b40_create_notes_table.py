"""create notes table

Revision ID: 5c1e7a9d2b40
Revises:
Create Date: 2026-10-19 10:12:44.204117

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from pgvector.sqlalchemy import Vector

# revision identifiers, used by Alembic.
revision: str = "5c1e7a9d2b40"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create the notes table with its embedding column."""
    op.execute("CREATE EXTENSION IF NOT EXISTS vector")

    op.create_table(
        "notes",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("ai_summary", sa.Text(), nullable=True),
        sa.Column("tags", sa.Text(), nullable=True),
        # Fixed size; Settings rejects any other EMBEDDING_DIMENSION
        sa.Column("embedding", Vector(1536), nullable=True),
        sa.Column("owner_subject", sa.String(255), nullable=False),
        sa.Column(
            "is_archived",
            sa.Boolean(),
            nullable=False,
            server_default=sa.false(),
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_notes_owner_subject", "notes", ["owner_subject"])


def downgrade() -> None:
    """Drop the notes table."""
    op.drop_index("ix_notes_owner_subject", table_name="notes")
    op.drop_table("notes")
