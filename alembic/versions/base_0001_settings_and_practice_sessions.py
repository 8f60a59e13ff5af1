"""settings and practice sessions

Revision ID: base_0001
Revises:
Create Date: 2026-10-19 09:12:44.104522

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "base_0001"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "settings",
        sa.Column("key", sa.String(length=64), primary_key=True),
        sa.Column("value", sa.String(length=255), nullable=False),
    )
    op.create_table(
        "practice_sessions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("operand1", sa.Integer(), nullable=False),
        sa.Column("operand2", sa.Integer(), nullable=False),
        sa.Column("operator", sa.String(length=1), nullable=False),
        sa.Column("answer", sa.Integer(), nullable=False),
        sa.Column("hint_state", sa.String(length=16), nullable=False),
        sa.Column("scratch", sa.JSON(), nullable=False),
        sa.Column("problem_count", sa.Integer(), nullable=False),
    )
    op.create_index("ix_practice_sessions_created_at", "practice_sessions", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_practice_sessions_created_at", table_name="practice_sessions")
    op.drop_table("practice_sessions")
    op.drop_table("settings")
