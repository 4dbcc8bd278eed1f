"""Add matches_generated claim flag to ladderday

Revision ID: 002_matches_generated
Revises: 001_initial
Create Date: 2026-10-17 00:00:00.000000

"""

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "002_matches_generated"
down_revision = "001_initial"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.add_column(
        "ladderday",
        sa.Column("matches_generated", sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    # Days that already have matches count as claimed
    op.execute(
        "UPDATE ladderday SET matches_generated = TRUE "
        "WHERE id IN (SELECT DISTINCT day_id FROM laddermatch)"
    )


def downgrade() -> None:
    op.drop_column("ladderday", "matches_generated")
