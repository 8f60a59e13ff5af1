"""widen problem columns to bigint, add version_id

Revision ID: 7c2e4a91d3b0
Revises: base_0001
Create Date: 2026-10-19 14:31:07.518226

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "7c2e4a91d3b0"
down_revision: Union[str, Sequence[str], None] = "base_0001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_PROBLEM_COLUMNS = ("operand1", "operand2", "answer")


def upgrade() -> None:
    # batch mode so SQLite can rebuild the table
    with op.batch_alter_table("practice_sessions") as batch:
        for name in _PROBLEM_COLUMNS:
            batch.alter_column(
                name, existing_type=sa.Integer(), type_=sa.BigInteger(), existing_nullable=False
            )
        batch.add_column(
            sa.Column("version_id", sa.Integer(), nullable=False, server_default="1")
        )


def downgrade() -> None:
    with op.batch_alter_table("practice_sessions") as batch:
        batch.drop_column("version_id")
        for name in _PROBLEM_COLUMNS:
            batch.alter_column(
                name, existing_type=sa.BigInteger(), type_=sa.Integer(), existing_nullable=False
            )
