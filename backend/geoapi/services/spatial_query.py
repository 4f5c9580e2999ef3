"""Building blocks for spatial filters and keyset-paginated statements."""
from sqlalchemy import Select, cast
from sqlalchemy.sql.elements import ColumnElement
from geoalchemy2 import Geography
from geoalchemy2.functions import ST_Contains, ST_Distance, ST_DWithin, ST_MakePoint, ST_SetSRID

from geoapi.schemas.pagination import CursorPaginationParams, GeoPoint
from geoapi.services.cursor import cursor_osm_id

WGS84_SRID = 4326


def make_point(point: GeoPoint):
    """Build an SRID 4326 point expression (x = longitude, y = latitude)."""
    return ST_SetSRID(ST_MakePoint(point.lng, point.lat), WGS84_SRID)


def as_geography(expr):
    return cast(expr, Geography(srid=WGS84_SRID))


def distance_to(column, point: GeoPoint):
    """Great-circle distance in meters between a geometry column and a point."""
    return ST_Distance(as_geography(column), as_geography(make_point(point)))


def within_radius(column, center: GeoPoint, radius_meters: float):
    """True when the geometry lies within ``radius_meters`` of ``center``, boundary included."""
    return ST_DWithin(as_geography(column), as_geography(make_point(center)), radius_meters)


def contains(container, contained):
    return ST_Contains(container, contained)


def contains_point(column, point: GeoPoint):
    return ST_Contains(column, make_point(point))


def paginate(
    stmt: Select,
    id_column,
    params: CursorPaginationParams,
    *order_by: ColumnElement,
) -> Select:
    """
    Apply keyset pagination to a filtered statement.

    The cursor predicate is layered on top of whatever filters ``stmt`` already
    carries; ordering always ends with the identifier so ties in the primary
    sort key are broken deterministically. One extra row is requested so the
    page builder can tell whether another page exists.
    """
    after = cursor_osm_id(params)
    if after is not None:
        stmt = stmt.where(id_column > after)

    return stmt.order_by(*order_by, id_column.asc()).limit(params.limit + 1)
