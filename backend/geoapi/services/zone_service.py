"""Dispatch a zone listing request to the matching repository query."""
from geoapi.schemas.pagination import CursorPage, CursorPaginationParams
from geoapi.schemas.zone import Zone, ZoneListQuery
from geoapi.services.zone_repository import ZoneRepository


async def list_zones(
    repository: ZoneRepository, query: ZoneListQuery
) -> CursorPage | list[Zone]:
    """Containing-point lookups are unpaginated and return a plain list."""
    if query.containing:
        return await repository.find_containing(query.containing)

    params = CursorPaginationParams(cursor=query.cursor, limit=query.limit)
    if query.zone_type:
        return await repository.find_by_type(query.zone_type, params)
    return await repository.find_all(params)
