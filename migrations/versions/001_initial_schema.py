"""Initial schema with PostGIS extension and all core tables.

Revision ID: 001
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa
from geoalchemy2 import Geometry


revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Enable PostGIS extension
    op.execute("CREATE EXTENSION IF NOT EXISTS postgis")

    # ── users ─────────────────────────────────────────────────────────
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(120), nullable=False),
        sa.Column("email", sa.String(255), unique=True, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
        ),
    )

    # ── hospitals ─────────────────────────────────────────────────────
    op.create_table(
        "hospitals",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("address", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(40), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("website", sa.String(255), nullable=True),
        sa.Column(
            "location",
            Geometry("POINT", srid=4326, spatial_index=False),
            nullable=True,
        ),
        sa.Column("latitude", sa.Float, nullable=False),
        sa.Column("longitude", sa.Float, nullable=False),
        sa.Column("type", sa.String(40), nullable=False),
        sa.Column("services", sa.JSON, nullable=False),
        sa.Column("rating", sa.Float, nullable=True),
        sa.Column("is_emergency", sa.Boolean, default=False, nullable=False),
        sa.Column("operating_hours", sa.JSON, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
        ),
        sa.CheckConstraint(
            "latitude BETWEEN -90 AND 90", name="ck_hospitals_latitude"
        ),
        sa.CheckConstraint(
            "longitude BETWEEN -180 AND 180", name="ck_hospitals_longitude"
        ),
    )
    op.create_index(
        "idx_hospitals_location",
        "hospitals",
        ["location"],
        postgresql_using="gist",
    )
    op.create_index("idx_hospitals_type", "hospitals", ["type"])
    op.create_index("idx_hospitals_emergency", "hospitals", ["is_emergency"])
    op.create_index("idx_hospitals_name", "hospitals", ["name"])

    # ── user_locations ────────────────────────────────────────────────
    op.create_table(
        "user_locations",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "user_id",
            sa.Integer,
            sa.ForeignKey("users.id"),
            unique=True,
            nullable=False,
        ),
        sa.Column("latitude", sa.Float, nullable=False),
        sa.Column("longitude", sa.Float, nullable=False),
        sa.Column("address", sa.String(255), nullable=True),
        sa.Column("last_updated", sa.DateTime(timezone=True), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("user_locations")
    op.drop_table("hospitals")
    op.drop_table("users")
