"""Opaque keyset cursors and page assembly."""
import base64
import binascii
from typing import Any, Sequence

from geoapi.exceptions import InvalidCursor
from geoapi.schemas.pagination import CursorPage, CursorPaginationParams


def encode_cursor(osm_id: str) -> str:
    """Encode an identifier as a URL-safe base64 token."""
    return base64.urlsafe_b64encode(osm_id.encode("utf-8")).decode("ascii")


def decode_cursor(cursor: str) -> str:
    """Decode a token produced by ``encode_cursor``.

    Raises:
        InvalidCursor: The token is not the canonical encoding of an identifier
    """
    try:
        osm_id = base64.b64decode(cursor, altchars=b"-_", validate=True).decode("utf-8")
    except (binascii.Error, ValueError) as e:
        raise InvalidCursor(f"Malformed cursor: {cursor!r}") from e

    if encode_cursor(osm_id) != cursor:
        raise InvalidCursor(f"Malformed cursor: {cursor!r}")
    return osm_id


def cursor_osm_id(params: CursorPaginationParams) -> str | None:
    """Return the keyset position encoded in the params, if any."""
    return decode_cursor(params.cursor) if params.cursor else None


def build_cursor_page(items: Sequence[Any], limit: int) -> CursorPage:
    """
    Turn an over-fetched result into a page.

    The caller fetches ``limit + 1`` rows ordered by the keyset column; the
    extra row only signals that another page exists.
    """
    if limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")

    has_more = len(items) > limit
    page_items = list(items[:limit])
    next_cursor = encode_cursor(page_items[-1].osm_id) if has_more else None

    return CursorPage(items=page_items, next_cursor=next_cursor, has_more=has_more)
