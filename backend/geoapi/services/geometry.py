"""Decoder for the (E)WKB geometry encoding returned by PostGIS.

Layout of every (sub-)geometry:

    byte order  1 byte   0 = big-endian (XDR), 1 = little-endian (NDR)
    type code   uint32   low bits select the shape, 0x20000000 = SRID follows
    srid        uint32   only when the SRID flag is set; discarded
    body        shape specific (counts are uint32, coordinates float64 pairs)

Multi* and GeometryCollection bodies are a count followed by complete nested
geometries, each carrying its own byte order and type code.
"""
import struct
from typing import Any

from geoapi.exceptions import MalformedGeometry
from geoapi.schemas.geometry import (
    Geometry,
    GeometryCollection,
    LineStringGeometry,
    MultiLineStringGeometry,
    MultiPointGeometry,
    MultiPolygonGeometry,
    PointGeometry,
    PolygonGeometry,
    Position,
)

SRID_FLAG = 0x20000000

POINT = 1
LINESTRING = 2
POLYGON = 3
MULTIPOINT = 4
MULTILINESTRING = 5
MULTIPOLYGON = 6
GEOMETRYCOLLECTION = 7

# Collections may nest; deeper payloads are rejected instead of recursing on.
MAX_NESTING_DEPTH = 32

_BYTE_ORDERS = {0: ">", 1: "<"}
_PAIR_SIZE = 16


class _WkbReader:
    """Cursor over one payload. Created per decode call."""

    def __init__(self, data: bytes):
        self.data = data
        self.offset = 0

    @property
    def remaining(self) -> int:
        return len(self.data) - self.offset

    def _take(self, size: int) -> bytes:
        if size > self.remaining:
            raise MalformedGeometry(
                f"Truncated geometry: needed {size} bytes at offset {self.offset}, "
                f"{self.remaining} left"
            )
        chunk = self.data[self.offset:self.offset + size]
        self.offset += size
        return chunk

    def byte_order(self) -> str:
        flag = self._take(1)[0]
        if flag not in _BYTE_ORDERS:
            raise MalformedGeometry(f"Invalid byte order flag {flag}")
        return _BYTE_ORDERS[flag]

    def uint32(self, order: str) -> int:
        return struct.unpack(order + "I", self._take(4))[0]

    def count(self, order: str, item_size: int) -> int:
        """Read a count and check the remaining bytes can hold that many items."""
        n = self.uint32(order)
        if n * item_size > self.remaining:
            raise MalformedGeometry(
                f"Declared count {n} exceeds remaining payload ({self.remaining} bytes)"
            )
        return n

    def position(self, order: str) -> Position:
        x, y = struct.unpack(order + "dd", self._take(_PAIR_SIZE))
        return (x, y)

    def positions(self, order: str) -> list[Position]:
        n = self.count(order, _PAIR_SIZE)
        return [self.position(order) for _ in range(n)]


def _read_ring(reader: _WkbReader, order: str) -> list[Position]:
    ring = reader.positions(order)
    if len(ring) < 4:
        raise MalformedGeometry(f"Polygon ring has {len(ring)} points, need at least 4")
    if ring[0] != ring[-1]:
        raise MalformedGeometry("Polygon ring is not closed")
    return ring


def _read_polygon_rings(reader: _WkbReader, order: str) -> list[list[Position]]:
    n = reader.count(order, 4)
    return [_read_ring(reader, order) for _ in range(n)]


def _read_members(
    reader: _WkbReader, order: str, expected: int, depth: int
) -> list[Any]:
    # smallest nested geometry: byte order + type code + empty count
    n = reader.count(order, 9)
    members = []
    for _ in range(n):
        member = _read_geometry(reader, depth + 1)
        if _TYPE_CODES[type(member)] != expected:
            raise MalformedGeometry(
                f"Unexpected {member.type} inside a multi-geometry"
            )
        members.append(member)
    return members


def _read_geometry(reader: _WkbReader, depth: int = 0) -> Geometry:
    if depth > MAX_NESTING_DEPTH:
        raise MalformedGeometry("Geometry nesting too deep")
    order = reader.byte_order()
    type_code = reader.uint32(order)
    if type_code & SRID_FLAG:
        reader.uint32(order)
        type_code &= ~SRID_FLAG

    if type_code == POINT:
        return PointGeometry(coordinates=reader.position(order))
    if type_code == LINESTRING:
        return LineStringGeometry(coordinates=reader.positions(order))
    if type_code == POLYGON:
        return PolygonGeometry(coordinates=_read_polygon_rings(reader, order))
    if type_code == MULTIPOINT:
        points = _read_members(reader, order, POINT, depth)
        return MultiPointGeometry(coordinates=[p.coordinates for p in points])
    if type_code == MULTILINESTRING:
        lines = _read_members(reader, order, LINESTRING, depth)
        return MultiLineStringGeometry(coordinates=[line.coordinates for line in lines])
    if type_code == MULTIPOLYGON:
        polygons = _read_members(reader, order, POLYGON, depth)
        return MultiPolygonGeometry(coordinates=[p.coordinates for p in polygons])
    if type_code == GEOMETRYCOLLECTION:
        n = reader.count(order, 9)
        return GeometryCollection(geometries=[_read_geometry(reader, depth + 1) for _ in range(n)])

    raise MalformedGeometry(f"Unsupported geometry type code 0x{type_code:08x}")


_TYPE_CODES = {
    PointGeometry: POINT,
    LineStringGeometry: LINESTRING,
    PolygonGeometry: POLYGON,
    MultiPointGeometry: MULTIPOINT,
    MultiLineStringGeometry: MULTILINESTRING,
    MultiPolygonGeometry: MULTIPOLYGON,
    GeometryCollection: GEOMETRYCOLLECTION,
}


def decode_wkb(payload: str | bytes) -> Geometry:
    """
    Decode a hex (or raw) WKB/EWKB payload into a geometry value.

    Args:
        payload: Hex string as produced by PostGIS, or the raw bytes

    Returns:
        The decoded geometry; SRID, if present, is dropped

    Raises:
        MalformedGeometry: Invalid hex, truncated data, unknown type code,
            unsatisfiable counts, broken polygon rings or trailing bytes
    """
    if isinstance(payload, str):
        try:
            data = bytes.fromhex(payload)
        except ValueError as e:
            raise MalformedGeometry(f"Geometry payload is not valid hex: {e}") from e
    else:
        data = bytes(payload)

    reader = _WkbReader(data)
    geometry = _read_geometry(reader)
    if reader.remaining:
        raise MalformedGeometry(f"{reader.remaining} unexpected trailing bytes")
    return geometry


def decode_geometry_column(value: Any) -> Geometry:
    """Decode a value read from a geometry column.

    GeoAlchemy2 hands back ``WKBElement`` objects whose ``data`` is either raw
    bytes (asyncpg) or a hex string; plain hex strings and bytes are accepted
    too.
    """
    data = getattr(value, "data", value)
    if isinstance(data, memoryview):
        data = data.tobytes()
    if not isinstance(data, (str, bytes, bytearray)):
        raise MalformedGeometry(f"Unsupported geometry value {type(value).__name__}")
    return decode_wkb(data)
