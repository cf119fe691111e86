"""VIN on cars.

Revision ID: 006
Revises: 005
Create Date: 2025-02-10 12:00:00
"""

from alembic import op
import sqlalchemy as sa


revision = "006"
down_revision = "005"
branch_labels = None
depends_on = None


def upgrade() -> None:
    # nullable, cars created before this revision have no VIN
    op.add_column("cars", sa.Column("vin", sa.String(17), nullable=True))
    op.create_unique_constraint("cars_vin_key", "cars", ["vin"])


def downgrade() -> None:
    op.drop_constraint("cars_vin_key", "cars", type_="unique")
    op.drop_column("cars", "vin")
