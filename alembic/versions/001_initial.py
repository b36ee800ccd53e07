"""Initial tables: listings, progress, game_results.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "listings",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("location", sa.String(255), nullable=False),
        sa.Column("price", sa.String(64), nullable=False),
        sa.Column("deposit", sa.String(64), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("image", sa.String(512), nullable=True),
        sa.Column("is_scam", sa.Boolean(), nullable=False),
        sa.Column("red_flags_json", sa.Text(), nullable=False),
        sa.Column("green_flags_json", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "progress",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("session_id", sa.String(64), nullable=False),
        sa.Column("current_level", sa.String(8), nullable=False, server_default="A1"),
        sa.Column("total_score", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("unlocked_scenarios_json", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_progress_session_id"), "progress", ["session_id"], unique=True)

    op.create_table(
        "game_results",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("progress_id", sa.Integer(), nullable=False),
        sa.Column("scenario", sa.String(64), nullable=False),
        sa.Column("level", sa.String(8), nullable=False),
        sa.Column("game_type", sa.String(64), nullable=False),
        sa.Column("score", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("completed_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(["progress_id"], ["progress.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("progress_id", "scenario", "level", "game_type", name="uq_game_results_slot"),
    )
    op.create_index(op.f("ix_game_results_progress_id"), "game_results", ["progress_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_game_results_progress_id"), table_name="game_results")
    op.drop_table("game_results")
    op.drop_index(op.f("ix_progress_session_id"), table_name="progress")
    op.drop_table("progress")
    op.drop_table("listings")
