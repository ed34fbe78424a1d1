"""
SQLAlchemy ORM models  (maps to PostgreSQL + PostGIS).

Tables
------
* ``users``           -- authenticated principals
* ``hospitals``       -- hospital directory (seeded, read-only afterwards)
* ``user_locations``  -- last saved position, one row per user

Indexes
-------
* **GIST** on ``hospitals.location`` for spatial queries.
* **B-Tree** on ``hospitals.type``, ``hospitals.is_emergency`` and
  ``hospitals.name`` (the equality filters and search field).
* **Unique** on ``user_locations.user_id``; the location upsert relies on it.
"""

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    func,
)
from geoalchemy2 import Geometry

from .database import Base


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(120), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class HospitalModel(Base):
    __tablename__ = "hospitals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    address = Column(String(255), nullable=False)
    phone = Column(String(40), nullable=True)
    email = Column(String(255), nullable=True)
    website = Column(String(255), nullable=True)

    # Stored as PostGIS geometry for spatial indexing
    location = Column(
        Geometry("POINT", srid=4326, spatial_index=False), nullable=True
    )

    # Also stored as plain floats for fast reads (avoids ST_X / ST_Y)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)

    type = Column(String(40), nullable=False)
    services = Column(JSON, nullable=False, default=list)
    rating = Column(Float, nullable=True)
    is_emergency = Column(Boolean, default=False, nullable=False)
    operating_hours = Column(JSON, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        Index("idx_hospitals_location", "location", postgresql_using="gist"),
        Index("idx_hospitals_type", "type"),
        Index("idx_hospitals_emergency", "is_emergency"),
        Index("idx_hospitals_name", "name"),
        CheckConstraint("latitude BETWEEN -90 AND 90", name="ck_hospitals_latitude"),
        CheckConstraint(
            "longitude BETWEEN -180 AND 180", name="ck_hospitals_longitude"
        ),
    )


class UserLocationModel(Base):
    __tablename__ = "user_locations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    address = Column(String(255), nullable=True)
    last_updated = Column(DateTime(timezone=True), nullable=False)
