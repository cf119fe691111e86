"""Cars, customers and purchase requests.

Revision ID: 001
Revises: None
Create Date: 2025-01-10 12:00:00
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def _id_column():
    return sa.Column(
        "id",
        postgresql.UUID(as_uuid=True),
        primary_key=True,
        server_default=sa.text("gen_random_uuid()"),
    )


def _timestamp(name: str):
    return sa.Column(name, sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()"))


def upgrade() -> None:
    # gen_random_uuid() is built in from PostgreSQL 13, pgcrypto before that
    op.execute("CREATE EXTENSION IF NOT EXISTS pgcrypto")

    op.create_table(
        "cars",
        _id_column(),
        sa.Column("brand", sa.String(100), nullable=False),
        sa.Column("model", sa.String(100), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("mileage", sa.Integer(), nullable=False),
        sa.Column("color", sa.String(50), nullable=False),
        sa.Column("fuel_type", sa.String(20), nullable=False),
        sa.Column("transmission", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="Available"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.CheckConstraint("year >= 1990 AND year <= 2024", name="cars_year_check"),
        sa.CheckConstraint("price >= 0", name="cars_price_check"),
        sa.CheckConstraint("mileage >= 0", name="cars_mileage_check"),
        sa.CheckConstraint(
            "fuel_type IN ('Petrol', 'Diesel', 'Electric', 'Hybrid')",
            name="cars_fuel_type_check",
        ),
        sa.CheckConstraint(
            "transmission IN ('Manual', 'Automatic', 'CVT')",
            name="cars_transmission_check",
        ),
        sa.CheckConstraint(
            "status IN ('Available', 'Reserved', 'Sold', 'Maintenance')",
            name="cars_status_check",
        ),
    )

    op.create_table(
        "customers",
        _id_column(),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("phone", sa.String(50), nullable=False),
        _timestamp("created_at"),
    )

    op.create_table(
        "purchase_requests",
        _id_column(),
        sa.Column("car_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("customer_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="Pending"),
        sa.Column("offer_price", sa.Float(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["car_id"], ["cars.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["customer_id"], ["customers.id"], ondelete="CASCADE"),
        sa.CheckConstraint(
            "status IN ('Pending', 'Approved', 'Rejected', 'Completed')",
            name="purchase_requests_status_check",
        ),
        sa.CheckConstraint("offer_price >= 0", name="purchase_requests_offer_price_check"),
    )

    op.create_index("idx_cars_brand_model", "cars", ["brand", "model"])
    op.create_index("idx_cars_status", "cars", ["status"])
    op.create_index("idx_cars_price", "cars", ["price"])
    op.create_index("idx_cars_created_at", "cars", [sa.text("created_at DESC")])

    op.create_index("idx_customers_email", "customers", ["email"])
    op.create_index("idx_customers_name", "customers", ["first_name", "last_name"])

    op.create_index("idx_purchase_requests_customer_id", "purchase_requests", ["customer_id"])
    op.create_index("idx_purchase_requests_car_id", "purchase_requests", ["car_id"])
    op.create_index("idx_purchase_requests_status", "purchase_requests", ["status"])
    op.create_index("idx_purchase_requests_created_at", "purchase_requests", [sa.text("created_at DESC")])

    # one Pending request per customer per car
    op.create_index(
        "idx_purchase_requests_car_customer_pending",
        "purchase_requests",
        ["car_id", "customer_id"],
        unique=True,
        postgresql_where=sa.text("status = 'Pending'"),
    )


def downgrade() -> None:
    op.drop_table("purchase_requests")
    op.drop_table("customers")
    op.drop_table("cars")
