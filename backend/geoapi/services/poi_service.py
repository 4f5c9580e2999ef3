"""Dispatch a POI listing request to the matching repository query."""
from geoapi.schemas.pagination import CursorPage, CursorPaginationParams
from geoapi.schemas.poi import PoiListQuery
from geoapi.services.poi_repository import PoiRepository


async def list_pois(repository: PoiRepository, query: PoiListQuery) -> CursorPage:
    """
    List POIs using the most specific filter present.

    Precedence: zone membership, radius, proximity, category, everything.
    """
    params = CursorPaginationParams(cursor=query.cursor, limit=query.limit)

    if query.zone_id:
        return await repository.find_in_zone(query.zone_id, params)
    if query.radius:
        return await repository.find_in_radius(query.radius, params)
    if query.near:
        return await repository.find_near(query.near, params)
    if query.category:
        return await repository.find_by_category(query.category, params)
    return await repository.find_all(params)
