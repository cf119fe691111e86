"""Spare parts.

Revision ID: 003
Revises: 001
Create Date: 2025-01-17 12:00:00
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "003"
down_revision = "001"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "parts",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column("article", sa.String(100), nullable=False, unique=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("model", sa.String(100), nullable=False),
        sa.Column("purchase_price", sa.Float(), nullable=False),
        sa.Column("sale_price", sa.Float(), nullable=False),
        sa.Column(
            "compatible_vins",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.CheckConstraint("purchase_price >= 0", name="parts_purchase_price_check"),
        sa.CheckConstraint("sale_price >= 0", name="parts_sale_price_check"),
    )

    op.create_index("idx_parts_article", "parts", ["article"])
    op.create_index("idx_parts_model", "parts", ["model"])
    op.create_index("idx_parts_created_at", "parts", [sa.text("created_at DESC")])
    op.create_index("idx_parts_compatible_vins", "parts", ["compatible_vins"], postgresql_using="gin")


def downgrade() -> None:
    op.drop_table("parts")
