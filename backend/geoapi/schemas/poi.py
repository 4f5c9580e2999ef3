from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from geoapi.schemas.geometry import Geometry
from geoapi.schemas.pagination import CursorPaginationParams, GeoPoint, RadiusQuery


class Poi(BaseModel):
    """A point of interest, built from a ``pois`` row and never mutated."""

    osm_id: str
    geometry: Geometry
    category: str
    subcategory: str | None = None
    name: str | None = None
    address: dict[str, Any] | None = None  # street, city, postcode, country, ...
    phone: str | None = None
    opening_hours: str | None = None
    price_range: int | None = None
    website: str | None = None
    tags: dict[str, Any] | None = None
    is_24_7: bool | None = Field(default=None, alias="is247")
    formatted_address: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True


class PoiListQuery(CursorPaginationParams):
    """Filters for listing POIs; at most one spatial/category filter is applied."""

    category: str | None = None
    near: GeoPoint | None = None
    radius: RadiusQuery | None = None
    zone_id: str | None = None
