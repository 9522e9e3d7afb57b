"""initial schema: users, auth tokens, notebooks, organizations

Revision ID: 0001
Revises:
Create Date: 2024-06-01 00:00:00
"""
from alembic import op
import sqlalchemy as sa


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("company", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        *_timestamps(),
    )
    op.create_index("idx_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_username", "users", ["username"])
    op.create_index("ix_users_created_at", "users", ["created_at"])

    op.create_table(
        "auth_tokens",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        # No foreign key: deleting a user leaves its token rows behind
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("token", sa.Text(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_auth_tokens_user_id", "auth_tokens", ["user_id"])
    op.create_index("ix_auth_tokens_created_at", "auth_tokens", ["created_at"])

    op.create_table(
        "notebooks",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("file_name", sa.String(500), nullable=False),
        sa.Column("filesize", sa.BigInteger(), nullable=True),
        sa.Column("status", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_rows", sa.Integer(), nullable=True),
        sa.Column("task_id", sa.String(100), nullable=True),
        *_timestamps(),
    )
    op.create_index("idx_notebooks_status", "notebooks", ["status"])
    op.create_index("ix_notebooks_task_id", "notebooks", ["task_id"])
    op.create_index("ix_notebooks_created_at", "notebooks", ["created_at"])

    op.create_table(
        "organizations",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("address", sa.String(500), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_organizations_created_at", "organizations", ["created_at"])


def downgrade():
    op.drop_table("organizations")
    op.drop_table("notebooks")
    op.drop_table("auth_tokens")
    op.drop_table("users")
