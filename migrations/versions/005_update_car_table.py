"""Service campaigns completed per car.

Revision ID: 005
Revises: 004
Create Date: 2025-02-03 12:00:00
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "005"
down_revision = "004"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.add_column(
        "cars",
        sa.Column(
            "completed_service_campaigns",
            postgresql.ARRAY(postgresql.UUID(as_uuid=True)),
            nullable=False,
            server_default=sa.text("'{}'"),
            comment="IDs of the service campaigns already completed on this car",
        ),
    )
    op.create_index(
        "idx_cars_completed_campaigns",
        "cars",
        ["completed_service_campaigns"],
        postgresql_using="gin",
    )


def downgrade() -> None:
    op.drop_index("idx_cars_completed_campaigns", table_name="cars")
    op.drop_column("cars", "completed_service_campaigns")
