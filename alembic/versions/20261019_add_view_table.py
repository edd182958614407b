# File: /alembic/versions/20261019_add_view_table.py | Version: 1.0 | Title: Add view_table (+ belong_to_id index)
"""add view_table"""

from alembic import op
import sqlalchemy as sa

revision = "add_view_table_20261019"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "view_table",
        sa.Column("id", sa.String(36), primary_key=True, nullable=False),
        sa.Column("belong_to_id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(256), nullable=False),
        sa.Column("description", sa.String(1000), nullable=False),
        sa.Column("thumbnail", sa.String(1000), nullable=False),
        sa.Column("view_type", sa.Integer(), nullable=False),
        sa.Column("is_trash", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("modified_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("create_time", sa.DateTime(timezone=True), nullable=False),
    )
    # children are always looked up by their parent id
    op.create_index("ix_view_table_belong_to_id", "view_table", ["belong_to_id"])


def downgrade():
    op.drop_index("ix_view_table_belong_to_id", table_name="view_table")
    op.drop_table("view_table")
