from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from geoapi.api.deps import get_poi_repository
from geoapi.config import settings
from geoapi.schemas.pagination import CursorPage, GeoPoint, RadiusQuery
from geoapi.schemas.poi import Poi, PoiListQuery
from geoapi.services.poi_repository import PoiRepository
from geoapi.services.poi_service import list_pois

router = APIRouter(prefix="/pois", tags=["pois"])


@router.get("", response_model=CursorPage[Poi])
async def get_pois(
    repository: Annotated[PoiRepository, Depends(get_poi_repository)],
    cursor: str | None = None,
    limit: int = Query(settings.default_page_limit, ge=1, le=settings.max_page_limit),
    category: str | None = None,
    lat: float | None = Query(None, ge=-90, le=90),
    lng: float | None = Query(None, ge=-180, le=180),
    radius: float | None = Query(None, ge=0, description="Radius in meters around lat/lng"),
):
    """List POIs. With lat/lng: nearest first, restricted to `radius` meters if given."""
    near = GeoPoint(lat=lat, lng=lng) if lat is not None and lng is not None else None
    radius_query = (
        RadiusQuery(center=near, radius_meters=radius)
        if near is not None and radius is not None
        else None
    )

    query = PoiListQuery(
        cursor=cursor,
        limit=limit,
        category=category,
        near=None if radius_query else near,
        radius=radius_query,
    )
    return await list_pois(repository, query)


@router.get("/{osm_id:path}", response_model=Poi)
async def get_poi(
    osm_id: str,
    repository: Annotated[PoiRepository, Depends(get_poi_repository)],
):
    poi = await repository.find_by_id(osm_id)
    if not poi:
        raise HTTPException(status_code=404, detail="POI not found")
    return poi
