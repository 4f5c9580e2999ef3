"""Error kinds raised by the spatial query layer.

None of these are caught and downgraded inside the layer; the HTTP layer maps
them to responses (see ``geoapi.main``).
"""


class GeoApiError(Exception):
    """Base class for errors surfaced by repositories and codecs."""

    retryable: bool = False


class MalformedGeometry(GeoApiError):
    """A binary geometry payload could not be decoded."""


class InvalidCursor(GeoApiError):
    """A pagination token supplied by the client does not decode."""


class StoreUnavailable(GeoApiError):
    """The spatial store could not be reached or timed out."""

    retryable = True
