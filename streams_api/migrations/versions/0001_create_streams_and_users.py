"""create streams and users

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "users",
        sa.Column("user_id", sa.Uuid(as_uuid=True), primary_key=True),
    )
    op.create_table(
        "streams",
        sa.Column("stream_id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("user_id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_streams_user_id", "streams", ["user_id"])
    op.create_index("ix_streams_created_at", "streams", ["created_at"])


def downgrade():
    op.drop_index("ix_streams_created_at", table_name="streams")
    op.drop_index("ix_streams_user_id", table_name="streams")
    op.drop_table("streams")
    op.drop_table("users")
