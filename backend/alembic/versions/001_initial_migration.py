"""Initial migration: create user, ladder registration, ladder day and match tables

Revision ID: 001_initial
Revises:
Create Date: 2026-10-01 00:00:00.000000

"""

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Create registration pool table
    op.create_table(
        "ladderregisteredteam",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("owner_id", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_ladderregisteredteam_owner_id"), "ladderregisteredteam", ["owner_id"], unique=True)

    # Create user table
    op.create_table(
        "user",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("discord_id", sa.String(), nullable=False),
        sa.Column("username", sa.String(), nullable=False),
        sa.Column("discriminator", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("ladder_team_id", sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["ladder_team_id"],
            ["ladderregisteredteam.id"],
        ),
    )
    op.create_index(op.f("ix_user_discord_id"), "user", ["discord_id"], unique=True)
    op.create_index(op.f("ix_user_ladder_team_id"), "user", ["ladder_team_id"], unique=False)

    # Create ladder_day table
    op.create_table(
        "ladderday",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_ladderday_date"), "ladderday", ["date"], unique=True)

    # Create ladder_match table
    op.create_table(
        "laddermatch",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("day_id", sa.Integer(), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.Column("maplist", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["day_id"],
            ["ladderday.id"],
        ),
    )
    op.create_index(op.f("ix_laddermatch_day_id"), "laddermatch", ["day_id"], unique=False)

    # Create ladder_player_in_match table
    op.create_table(
        "ladderplayerinmatch",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("match_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("team", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["match_id"],
            ["laddermatch.id"],
        ),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["user.id"],
        ),
        sa.UniqueConstraint("match_id", "user_id", name="uq_ladder_match_user"),
    )
    op.create_index(op.f("ix_ladderplayerinmatch_match_id"), "ladderplayerinmatch", ["match_id"], unique=False)
    op.create_index(op.f("ix_ladderplayerinmatch_user_id"), "ladderplayerinmatch", ["user_id"], unique=False)


def downgrade() -> None:
    op.drop_table("ladderplayerinmatch")
    op.drop_table("laddermatch")
    op.drop_table("ladderday")
    op.drop_table("user")
    op.drop_table("ladderregisteredteam")
