"""Read access to administrative zones."""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from geoapi.models.zone import ZoneRecord
from geoapi.schemas.pagination import CursorPage, CursorPaginationParams, GeoPoint
from geoapi.schemas.zone import Zone
from geoapi.services.geometry import decode_geometry_column
from geoapi.services.repository import ReadRepository
from geoapi.services.spatial_query import contains_point


def record_to_zone(record: ZoneRecord) -> Zone:
    return Zone(
        osm_id=record.osm_id,
        geometry=decode_geometry_column(record.geometry),
        centroid=decode_geometry_column(record.centroid) if record.centroid is not None else None,
        name=record.name,
        malagasy_name=record.malagasy_name,
        iso_code=record.iso_code,
        population=record.population,
        tags=record.tags,
        area=record.area,
        zone_type=record.zone_type,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


class ZoneRepository(ReadRepository[Zone]):
    def __init__(self, sessionmaker: async_sessionmaker[AsyncSession]):
        super().__init__(sessionmaker, record_to_zone)

    async def find_by_id(self, osm_id: str) -> Zone | None:
        return await self._fetch_one(select(ZoneRecord).where(ZoneRecord.osm_id == osm_id))

    async def find_all(self, params: CursorPaginationParams) -> CursorPage:
        return await self._fetch_page(select(ZoneRecord), ZoneRecord.osm_id, params)

    async def find_by_type(self, zone_type: str, params: CursorPaginationParams) -> CursorPage:
        stmt = select(ZoneRecord).where(ZoneRecord.zone_type == zone_type)
        return await self._fetch_page(stmt, ZoneRecord.osm_id, params)

    async def find_containing(self, point: GeoPoint) -> list[Zone]:
        """Zones containing ``point``, smallest area first. Not paginated."""
        stmt = (
            select(ZoneRecord)
            .where(contains_point(ZoneRecord.geometry, point))
            .order_by(ZoneRecord.area.asc().nulls_last(), ZoneRecord.osm_id.asc())
        )
        return await self._fetch(stmt)
