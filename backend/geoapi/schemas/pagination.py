from typing import Generic, TypeVar

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CursorPaginationParams(BaseModel):
    cursor: str | None = None
    limit: int = Field(gt=0)


class CursorPage(BaseModel, Generic[T]):
    items: list[T]
    next_cursor: str | None = None
    has_more: bool = False

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class GeoPoint(BaseModel):
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)

    class Config:
        frozen = True


class RadiusQuery(BaseModel):
    center: GeoPoint
    radius_meters: float = Field(ge=0)

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True
