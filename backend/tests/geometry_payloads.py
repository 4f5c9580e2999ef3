"""Builders for WKB/EWKB hex payloads used across the test suite."""
import struct

SRID_FLAG = 0x20000000


def _header(type_code: int, order: str, srid: int | None) -> bytes:
    flag = b"\x01" if order == "<" else b"\x00"
    if srid is None:
        return flag + struct.pack(order + "I", type_code)
    return flag + struct.pack(order + "II", type_code | SRID_FLAG, srid)


def _pairs(coords, order: str) -> bytes:
    body = struct.pack(order + "I", len(coords))
    for x, y in coords:
        body += struct.pack(order + "dd", x, y)
    return body


def point_wkb(x: float, y: float, order: str = "<", srid: int | None = None) -> bytes:
    return _header(1, order, srid) + struct.pack(order + "dd", x, y)


def linestring_wkb(coords, order: str = "<", srid: int | None = None) -> bytes:
    return _header(2, order, srid) + _pairs(coords, order)


def polygon_wkb(rings, order: str = "<", srid: int | None = None) -> bytes:
    body = struct.pack(order + "I", len(rings))
    for ring in rings:
        body += _pairs(ring, order)
    return _header(3, order, srid) + body


def collection_wkb(type_code: int, members: list[bytes], order: str = "<", srid: int | None = None) -> bytes:
    """Multi* (4, 5, 6) or GeometryCollection (7) wrapping already-encoded members."""
    return _header(type_code, order, srid) + struct.pack(order + "I", len(members)) + b"".join(members)


def square(x0: float, y0: float, size: float) -> list[tuple[float, float]]:
    return [
        (x0, y0),
        (x0 + size, y0),
        (x0 + size, y0 + size),
        (x0, y0 + size),
        (x0, y0),
    ]


def point_hex(x: float, y: float, srid: int | None = 4326) -> str:
    return point_wkb(x, y, srid=srid).hex()


def polygon_hex(rings, srid: int | None = 4326) -> str:
    return polygon_wkb(rings, srid=srid).hex()
