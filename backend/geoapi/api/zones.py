from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from geoapi.api.deps import get_poi_repository, get_zone_repository
from geoapi.config import settings
from geoapi.schemas.pagination import CursorPage, GeoPoint
from geoapi.schemas.poi import Poi, PoiListQuery
from geoapi.schemas.zone import Zone, ZoneList, ZoneListQuery
from geoapi.services.poi_repository import PoiRepository
from geoapi.services.poi_service import list_pois
from geoapi.services.zone_repository import ZoneRepository
from geoapi.services.zone_service import list_zones

router = APIRouter(prefix="/zones", tags=["zones"])


@router.get("", response_model=ZoneList | CursorPage[Zone])
async def get_zones(
    repository: Annotated[ZoneRepository, Depends(get_zone_repository)],
    cursor: str | None = None,
    limit: int = Query(settings.default_page_limit, ge=1, le=settings.max_page_limit),
    zone_type: str | None = Query(None, alias="type"),
    lat: float | None = Query(None, ge=-90, le=90),
    lng: float | None = Query(None, ge=-180, le=180),
):
    """List zones, or every zone containing lat/lng (smallest first) when both are given."""
    containing = GeoPoint(lat=lat, lng=lng) if lat is not None and lng is not None else None

    result = await list_zones(
        repository,
        ZoneListQuery(cursor=cursor, limit=limit, zone_type=zone_type, containing=containing),
    )
    if isinstance(result, list):
        return ZoneList(items=result)
    return result


# Registered before the bare lookup: identifiers such as "relation/123" contain slashes.
@router.get("/{osm_id:path}/pois", response_model=CursorPage[Poi])
async def get_zone_pois(
    osm_id: str,
    zones: Annotated[ZoneRepository, Depends(get_zone_repository)],
    pois: Annotated[PoiRepository, Depends(get_poi_repository)],
    cursor: str | None = None,
    limit: int = Query(settings.default_page_limit, ge=1, le=settings.max_page_limit),
):
    zone = await zones.find_by_id(osm_id)
    if not zone:
        raise HTTPException(status_code=404, detail="Zone not found")

    return await list_pois(pois, PoiListQuery(cursor=cursor, limit=limit, zone_id=osm_id))


@router.get("/{osm_id:path}", response_model=Zone)
async def get_zone(
    osm_id: str,
    repository: Annotated[ZoneRepository, Depends(get_zone_repository)],
):
    zone = await repository.find_by_id(osm_id)
    if not zone:
        raise HTTPException(status_code=404, detail="Zone not found")
    return zone
