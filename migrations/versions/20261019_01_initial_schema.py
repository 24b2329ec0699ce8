"""Initial activity coach schema."""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "20261019_01"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "activities",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("user_id", sa.String(length=64), nullable=False),
        sa.Column("type", sa.String(length=32), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("calories_burned", sa.Integer(), nullable=False),
        sa.Column("start_time", sa.DateTime(timezone=False), nullable=True),
        sa.Column("additional_metrics", sa.JSON(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
    )
    op.create_index(
        "ix_activities_user_id",
        "activities",
        ["user_id"],
        unique=False,
    )

    op.create_table(
        "recommendations",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("activity_id", sa.String(length=36), nullable=False),
        sa.Column("user_id", sa.String(length=64), nullable=False),
        sa.Column("activity_type", sa.String(length=32), nullable=False),
        sa.Column("recommendation", sa.Text(), nullable=False),
        sa.Column("improvements", sa.JSON(), nullable=False),
        sa.Column("suggestions", sa.JSON(), nullable=False),
        sa.Column("safety", sa.JSON(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
    )
    op.create_index(
        "ix_recommendations_activity_id",
        "recommendations",
        ["activity_id"],
        unique=False,
    )
    op.create_index(
        "ix_recommendations_user_id",
        "recommendations",
        ["user_id"],
        unique=False,
    )
    op.create_index(
        "idx_recommendation_activity_created",
        "recommendations",
        ["activity_id", "created_at"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("idx_recommendation_activity_created", table_name="recommendations")
    op.drop_index("ix_recommendations_user_id", table_name="recommendations")
    op.drop_index("ix_recommendations_activity_id", table_name="recommendations")
    op.drop_table("recommendations")
    op.drop_index("ix_activities_user_id", table_name="activities")
    op.drop_table("activities")
