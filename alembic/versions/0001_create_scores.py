"""create Scores

Revision ID: 0001_scores
Revises:
Create Date: 2026-10-19 10:12:03.114208

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0001_scores"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "Scores",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("totalQuestions", sa.Integer()),
        sa.Column("correctAnswers", sa.Integer()),
        sa.Column("percentage", sa.Float()),
        sa.Column("timestamp", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP")),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    op.drop_table("Scores")
