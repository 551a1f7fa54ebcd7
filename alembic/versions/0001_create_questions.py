"""create questions table

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "questions",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("category", sa.String(), nullable=False),
        sa.Column("difficulty", sa.String(length=16), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("approach", sa.Text(), nullable=True),
        sa.Column("tags", sa.JSON(), nullable=True),
        sa.Column("estimated_time", sa.Integer(), nullable=True),
        sa.Column("source", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_questions_category", "questions", ["category"])
    op.create_index("ix_questions_difficulty", "questions", ["difficulty"])


def downgrade() -> None:
    op.drop_index("ix_questions_difficulty", table_name="questions")
    op.drop_index("ix_questions_category", table_name="questions")
    op.drop_table("questions")
