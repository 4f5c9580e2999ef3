"""
Tests for the listing use cases that pick a repository query from the filters.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from geoapi.schemas.pagination import CursorPage, CursorPaginationParams, GeoPoint, RadiusQuery
from geoapi.schemas.poi import PoiListQuery
from geoapi.schemas.zone import ZoneListQuery
from geoapi.services.poi_service import list_pois
from geoapi.services.zone_service import list_zones

POINT = GeoPoint(lat=-18.9, lng=47.5)
EMPTY = CursorPage(items=[], next_cursor=None, has_more=False)


@pytest.fixture
def poi_repository():
    repository = MagicMock()
    for name in ("find_all", "find_by_category", "find_near", "find_in_radius", "find_in_zone"):
        setattr(repository, name, AsyncMock(return_value=EMPTY))
    return repository


@pytest.fixture
def zone_repository():
    repository = MagicMock()
    repository.find_all = AsyncMock(return_value=EMPTY)
    repository.find_by_type = AsyncMock(return_value=EMPTY)
    repository.find_containing = AsyncMock(return_value=[])
    return repository


class TestListPois:
    async def test_no_filter_lists_all(self, poi_repository):
        await list_pois(poi_repository, PoiListQuery(limit=20, cursor="YQ=="))

        poi_repository.find_all.assert_awaited_once_with(CursorPaginationParams(cursor="YQ==", limit=20))

    async def test_zone_takes_precedence(self, poi_repository):
        query = PoiListQuery(limit=5, zone_id="relation/1", near=POINT, category="bank")

        await list_pois(poi_repository, query)

        poi_repository.find_in_zone.assert_awaited_once_with("relation/1", CursorPaginationParams(limit=5))
        poi_repository.find_near.assert_not_awaited()

    async def test_radius_before_near(self, poi_repository):
        radius = RadiusQuery(center=POINT, radius_meters=250)

        await list_pois(poi_repository, PoiListQuery(limit=5, radius=radius, near=POINT))

        poi_repository.find_in_radius.assert_awaited_once_with(radius, CursorPaginationParams(limit=5))

    async def test_near_before_category(self, poi_repository):
        await list_pois(poi_repository, PoiListQuery(limit=5, near=POINT, category="bank"))

        poi_repository.find_near.assert_awaited_once_with(POINT, CursorPaginationParams(limit=5))
        poi_repository.find_by_category.assert_not_awaited()

    async def test_category(self, poi_repository):
        await list_pois(poi_repository, PoiListQuery(limit=5, category="bank"))

        poi_repository.find_by_category.assert_awaited_once_with("bank", CursorPaginationParams(limit=5))


class TestListZones:
    async def test_containing_returns_plain_list(self, zone_repository):
        result = await list_zones(zone_repository, ZoneListQuery(limit=5, containing=POINT, zone_type="region"))

        assert result == []
        zone_repository.find_containing.assert_awaited_once_with(POINT)
        zone_repository.find_by_type.assert_not_awaited()

    async def test_type(self, zone_repository):
        await list_zones(zone_repository, ZoneListQuery(limit=5, zone_type="region"))

        zone_repository.find_by_type.assert_awaited_once_with("region", CursorPaginationParams(limit=5))

    async def test_all(self, zone_repository):
        result = await list_zones(zone_repository, ZoneListQuery(limit=5))

        assert result is EMPTY
