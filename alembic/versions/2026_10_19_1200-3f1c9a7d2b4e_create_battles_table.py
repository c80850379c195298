# pyright: reportAttributeAccessIssue=false, reportUndefinedVariable=false
"""create_battles_table

Revision ID: 3f1c9a7d2b4e
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel.sql.sqltypes

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b4e"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "battles",
        sa.Column("id", sqlmodel.sql.sqltypes.AutoString(length=36), nullable=False),
        sa.Column("pokemon1_id", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("pokemon1_name", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("pokemon2_id", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("pokemon2_name", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("winner_id", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("winner_name", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("battle_log", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_battles_created_at"), "battles", ["created_at"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_battles_created_at"), table_name="battles")
    op.drop_table("battles")
