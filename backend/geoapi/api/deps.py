from geoapi.models import async_session
from geoapi.services.poi_repository import PoiRepository
from geoapi.services.zone_repository import ZoneRepository


def get_poi_repository() -> PoiRepository:
    return PoiRepository(async_session)


def get_zone_repository() -> ZoneRepository:
    return ZoneRepository(async_session)
