"""GeoJSON-shaped geometry values.

Each shape is its own model tagged by ``type``; ``Geometry`` is the
discriminated union over all of them. Adding a shape means adding a model
here and a branch in ``geoapi.services.geometry``.
"""
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

# (longitude, latitude)
Position = tuple[float, float]
LinearRing = list[Position]


class PointGeometry(BaseModel):
    type: Literal["Point"] = "Point"
    coordinates: Position

    class Config:
        frozen = True


class LineStringGeometry(BaseModel):
    type: Literal["LineString"] = "LineString"
    coordinates: list[Position]

    class Config:
        frozen = True


class PolygonGeometry(BaseModel):
    type: Literal["Polygon"] = "Polygon"
    coordinates: list[LinearRing]

    class Config:
        frozen = True


class MultiPointGeometry(BaseModel):
    type: Literal["MultiPoint"] = "MultiPoint"
    coordinates: list[Position]

    class Config:
        frozen = True


class MultiLineStringGeometry(BaseModel):
    type: Literal["MultiLineString"] = "MultiLineString"
    coordinates: list[list[Position]]

    class Config:
        frozen = True


class MultiPolygonGeometry(BaseModel):
    type: Literal["MultiPolygon"] = "MultiPolygon"
    coordinates: list[list[LinearRing]]

    class Config:
        frozen = True


class GeometryCollection(BaseModel):
    type: Literal["GeometryCollection"] = "GeometryCollection"
    geometries: list["Geometry"]

    class Config:
        frozen = True


Geometry = Annotated[
    Union[
        PointGeometry,
        LineStringGeometry,
        PolygonGeometry,
        MultiPointGeometry,
        MultiLineStringGeometry,
        MultiPolygonGeometry,
        GeometryCollection,
    ],
    Field(discriminator="type"),
]

GeometryCollection.model_rebuild()
