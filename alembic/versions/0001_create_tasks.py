"""create tasks table

Revision ID: 0001
Revises:
Create Date: 2025-01-01 00:00:00

"""
from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

task_status = sa.Enum("pending", "in-progress", "completed", name="task_status")
task_priority = sa.Enum("high", "medium", "normal", name="task_priority")


def upgrade() -> None:
    op.create_table(
        "tasks",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("status", task_status, nullable=False),
        sa.Column("is_deleted", sa.Boolean(), nullable=False),
        sa.Column("assignee", sa.String(length=255), nullable=True),
        sa.Column("priority", task_priority, nullable=False),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("rating", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(
            "rating IS NULL OR (rating >= 1 AND rating <= 5)",
            name="ck_tasks_rating_range",
        ),
    )
    op.create_index("ix_tasks_is_deleted", "tasks", ["is_deleted"])


def downgrade() -> None:
    op.drop_index("ix_tasks_is_deleted", table_name="tasks")
    op.drop_table("tasks")
    task_priority.drop(op.get_bind(), checkfirst=True)
    task_status.drop(op.get_bind(), checkfirst=True)
