"""Read access to points of interest."""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from geoapi.models.poi import PoiRecord
from geoapi.models.zone import ZoneRecord
from geoapi.schemas.pagination import CursorPage, CursorPaginationParams, GeoPoint, RadiusQuery
from geoapi.schemas.poi import Poi
from geoapi.services.geometry import decode_geometry_column
from geoapi.services.repository import ReadRepository
from geoapi.services.spatial_query import contains, distance_to, within_radius


def record_to_poi(record: PoiRecord) -> Poi:
    return Poi(
        osm_id=record.osm_id,
        geometry=decode_geometry_column(record.geometry),
        category=record.category,
        subcategory=record.subcategory,
        name=record.name,
        address=record.address,
        phone=record.phone,
        opening_hours=record.opening_hours,
        price_range=record.price_range,
        website=record.website,
        tags=record.tags,
        is_24_7=record.is_24_7,
        formatted_address=record.formatted_address,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


class PoiRepository(ReadRepository[Poi]):
    def __init__(self, sessionmaker: async_sessionmaker[AsyncSession]):
        super().__init__(sessionmaker, record_to_poi)

    async def find_by_id(self, osm_id: str) -> Poi | None:
        return await self._fetch_one(select(PoiRecord).where(PoiRecord.osm_id == osm_id))

    async def find_all(self, params: CursorPaginationParams) -> CursorPage:
        return await self._fetch_page(select(PoiRecord), PoiRecord.osm_id, params)

    async def find_by_category(
        self, category: str, params: CursorPaginationParams
    ) -> CursorPage:
        stmt = select(PoiRecord).where(PoiRecord.category == category)
        return await self._fetch_page(stmt, PoiRecord.osm_id, params)

    async def find_near(self, point: GeoPoint, params: CursorPaginationParams) -> CursorPage:
        """All POIs, closest to ``point`` first."""
        return await self._fetch_page(
            select(PoiRecord),
            PoiRecord.osm_id,
            params,
            distance_to(PoiRecord.geometry, point),
        )

    async def find_in_radius(
        self, query: RadiusQuery, params: CursorPaginationParams
    ) -> CursorPage:
        """POIs within ``query.radius_meters`` (geodesic, inclusive), closest first."""
        stmt = select(PoiRecord).where(
            within_radius(PoiRecord.geometry, query.center, query.radius_meters)
        )
        return await self._fetch_page(
            stmt,
            PoiRecord.osm_id,
            params,
            distance_to(PoiRecord.geometry, query.center),
        )

    async def find_in_zone(
        self, zone_osm_id: str, params: CursorPaginationParams
    ) -> CursorPage:
        """POIs contained by a zone. An unknown zone simply yields an empty page."""
        stmt = (
            select(PoiRecord)
            .join(ZoneRecord, contains(ZoneRecord.geometry, PoiRecord.geometry))
            .where(ZoneRecord.osm_id == zone_osm_id)
        )
        return await self._fetch_page(stmt, PoiRecord.osm_id, params)
