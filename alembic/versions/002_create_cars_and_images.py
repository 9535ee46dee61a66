"""Create cars and car_images tables

Revision ID: 002
Revises: 001
Create Date: 2024-06-02 00:00:00.000000

"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "cars",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("user_id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("brand", sa.String(), nullable=False),
        sa.Column("model", sa.String(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("condition", sa.String(length=16), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("address", sa.String(), nullable=False),
        sa.Column("city", sa.String(), nullable=False),
        sa.Column("province", sa.String(), nullable=False),
        sa.Column("mileage", sa.Integer(), nullable=True),
        sa.Column("transmission", sa.String(), nullable=True),
        sa.Column("fuel_type", sa.String(), nullable=True),
        sa.Column("color", sa.String(), nullable=True),
        sa.Column("tax_status", sa.String(), nullable=True),
        sa.Column("tax_year", sa.Integer(), nullable=True),
        sa.Column("stnk_status", sa.String(), nullable=True),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_cars_user_id"), "cars", ["user_id"], unique=False)
    op.create_index(op.f("ix_cars_brand"), "cars", ["brand"], unique=False)
    op.create_index(op.f("ix_cars_is_active"), "cars", ["is_active"], unique=False)
    op.create_index(op.f("ix_cars_created_at"), "cars", ["created_at"], unique=False)

    op.create_table(
        "car_images",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("car_id", sa.String(length=36), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("position", sa.String(length=32), nullable=False),
        sa.ForeignKeyConstraint(["car_id"], ["cars.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_car_images_car_id"), "car_images", ["car_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_car_images_car_id"), table_name="car_images")
    op.drop_table("car_images")
    op.drop_index(op.f("ix_cars_created_at"), table_name="cars")
    op.drop_index(op.f("ix_cars_is_active"), table_name="cars")
    op.drop_index(op.f("ix_cars_brand"), table_name="cars")
    op.drop_index(op.f("ix_cars_user_id"), table_name="cars")
    op.drop_table("cars")
