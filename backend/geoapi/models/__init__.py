from geoapi.models.base import Base, engine, async_session
from geoapi.models.poi import PoiRecord
from geoapi.models.zone import ZoneRecord

__all__ = [
    "Base",
    "engine",
    "async_session",
    "PoiRecord",
    "ZoneRecord",
]
