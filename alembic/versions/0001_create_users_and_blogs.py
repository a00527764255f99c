"""create users and blogs

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00
"""
from alembic import op
import sqlalchemy as sa


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "blogs",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("image_urls", sa.JSON(), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "author_id",
            sa.String(36),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
        ),
    )
    op.create_index("ix_blogs_title", "blogs", ["title"])
    op.create_index("ix_blogs_author_id", "blogs", ["author_id"])
    op.create_index("ix_blogs_created_at_id", "blogs", ["created_at", "id"])


def downgrade() -> None:
    op.drop_index("ix_blogs_created_at_id", table_name="blogs")
    op.drop_index("ix_blogs_author_id", table_name="blogs")
    op.drop_index("ix_blogs_title", table_name="blogs")
    op.drop_table("blogs")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
