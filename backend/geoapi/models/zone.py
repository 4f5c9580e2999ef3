from datetime import datetime

from sqlalchemy import DateTime, Float, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column
from geoalchemy2 import Geometry

from geoapi.models.base import Base


class ZoneRecord(Base):
    __tablename__ = "zones"

    osm_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    geometry = mapped_column(Geometry(srid=4326), nullable=False)
    centroid = mapped_column(Geometry("POINT", srid=4326), nullable=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    malagasy_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    iso_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    population: Mapped[int | None] = mapped_column(Integer, nullable=True)
    tags: Mapped[dict | None] = mapped_column(JSONB, nullable=True)
    area: Mapped[float | None] = mapped_column(Float, nullable=True)
    zone_type: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    created_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
