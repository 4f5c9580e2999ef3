"""
Tests for ZoneRepository.
"""

import pytest
from sqlalchemy.dialects import postgresql

from geoapi.exceptions import MalformedGeometry
from geoapi.schemas.pagination import CursorPaginationParams, GeoPoint
from geoapi.services.zone_repository import ZoneRepository
from store_fakes import FakeSession, make_zone_record


@pytest.fixture
def repository(zone_session):
    return ZoneRepository(lambda: zone_session)


class TestZoneLookups:
    async def test_find_by_id_decodes_geometry_and_centroid(self, repository):
        zone = await repository.find_by_id("relation/2")

        assert zone.osm_id == "relation/2"
        assert zone.geometry.type == "Polygon"
        assert zone.geometry.coordinates[0][0] == (47.0, -19.5)
        assert zone.centroid.type == "Point"
        assert zone.zone_type == "district"

    async def test_missing_centroid(self):
        session = FakeSession("zones", [make_zone_record("relation/9", centroid=None)])

        zone = await ZoneRepository(lambda: session).find_by_id("relation/9")

        assert zone.centroid is None

    async def test_corrupt_centroid_fails(self):
        session = FakeSession("zones", [make_zone_record("relation/9", centroid="00")])

        with pytest.raises(MalformedGeometry):
            await ZoneRepository(lambda: session).find_by_id("relation/9")

    async def test_find_by_id_absent(self, repository):
        assert await repository.find_by_id("relation/404") is None

    async def test_find_all_pages(self, repository):
        first = await repository.find_all(CursorPaginationParams(limit=2))
        second = await repository.find_all(CursorPaginationParams(cursor=first.next_cursor, limit=2))

        assert [z.osm_id for z in first.items] == ["relation/1", "relation/2"]
        assert first.has_more is True
        assert [z.osm_id for z in second.items] == ["relation/3"]
        assert second.has_more is False

    async def test_find_by_type(self, repository):
        page = await repository.find_by_type("district", CursorPaginationParams(limit=10))

        assert [z.osm_id for z in page.items] == ["relation/2", "relation/3"]
        assert page.next_cursor is None


class TestFindContaining:
    async def test_orders_by_area_and_is_unpaginated(self, repository, zone_session):
        zones = await repository.find_containing(GeoPoint(lat=-18.9, lng=47.5))

        assert isinstance(zones, list)
        stmt = zone_session.statements[-1]
        assert stmt._limit is None

        sql = str(stmt.compile(dialect=postgresql.dialect()))
        assert "ST_Contains(zones.geometry, ST_SetSRID(ST_MakePoint(" in sql
        assert "ORDER BY zones.area ASC NULLS LAST, zones.osm_id ASC" in sql
