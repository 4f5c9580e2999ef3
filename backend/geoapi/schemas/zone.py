from datetime import datetime
from typing import Any

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from geoapi.schemas.geometry import Geometry
from geoapi.schemas.pagination import CursorPaginationParams, GeoPoint


class Zone(BaseModel):
    """An administrative zone. ``centroid`` is taken as stored, not checked."""

    osm_id: str
    geometry: Geometry
    name: str
    zone_type: str
    malagasy_name: str | None = None
    iso_code: str | None = None
    population: int | None = None
    tags: dict[str, Any] | None = None
    area: float | None = None
    centroid: Geometry | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True


class ZoneListQuery(CursorPaginationParams):
    zone_type: str | None = None
    containing: GeoPoint | None = None


class ZoneList(BaseModel):
    """Unpaginated zone listing, as returned for a containing-point lookup."""

    items: list[Zone]

    class Config:
        # page payloads (nextCursor, hasMore) must not validate as a ZoneList
        extra = "forbid"
