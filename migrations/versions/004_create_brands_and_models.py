"""Brands and car models, linked from cars and parts.

Revision ID: 004
Revises: 003
Create Date: 2025-01-24 12:00:00
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "004"
down_revision = "003"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "brands",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
        sa.Column("country", sa.String(100), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
    )

    op.create_table(
        "car_models",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("brand_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.ForeignKeyConstraint(["brand_id"], ["brands.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("brand_id", "name", name="car_models_brand_id_name_key"),
    )

    op.add_column("cars", sa.Column("brand_id", postgresql.UUID(as_uuid=True), nullable=True))
    op.add_column("cars", sa.Column("model_id", postgresql.UUID(as_uuid=True), nullable=True))
    op.create_foreign_key("cars_brand_id_fkey", "cars", "brands", ["brand_id"], ["id"])
    op.create_foreign_key("cars_model_id_fkey", "cars", "car_models", ["model_id"], ["id"])

    op.add_column("parts", sa.Column("brand_id", postgresql.UUID(as_uuid=True), nullable=True))
    op.add_column("parts", sa.Column("car_model_id", postgresql.UUID(as_uuid=True), nullable=True))
    op.create_foreign_key("parts_brand_id_fkey", "parts", "brands", ["brand_id"], ["id"])
    op.create_foreign_key("parts_car_model_id_fkey", "parts", "car_models", ["car_model_id"], ["id"])

    op.create_index("idx_brands_name", "brands", ["name"])
    op.create_index("idx_car_models_brand_id", "car_models", ["brand_id"])
    op.create_index("idx_car_models_name", "car_models", ["name"])
    op.create_index("idx_cars_brand_id", "cars", ["brand_id"])
    op.create_index("idx_cars_model_id", "cars", ["model_id"])
    op.create_index("idx_parts_brand_id", "parts", ["brand_id"])
    op.create_index("idx_parts_car_model_id", "parts", ["car_model_id"])


def downgrade() -> None:
    op.drop_index("idx_parts_car_model_id", table_name="parts")
    op.drop_index("idx_parts_brand_id", table_name="parts")
    op.drop_index("idx_cars_model_id", table_name="cars")
    op.drop_index("idx_cars_brand_id", table_name="cars")

    op.drop_constraint("parts_car_model_id_fkey", "parts", type_="foreignkey")
    op.drop_constraint("parts_brand_id_fkey", "parts", type_="foreignkey")
    op.drop_column("parts", "car_model_id")
    op.drop_column("parts", "brand_id")

    op.drop_constraint("cars_model_id_fkey", "cars", type_="foreignkey")
    op.drop_constraint("cars_brand_id_fkey", "cars", type_="foreignkey")
    op.drop_column("cars", "model_id")
    op.drop_column("cars", "brand_id")

    op.drop_table("car_models")
    op.drop_table("brands")
