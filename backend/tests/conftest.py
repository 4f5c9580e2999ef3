"""
Pytest configuration and shared fixtures.
"""

import pytest

from store_fakes import FakeSession, make_poi_record, make_zone_record


@pytest.fixture
def poi_session() -> FakeSession:
    return FakeSession("pois", [make_poi_record(osm_id) for osm_id in "abcde"])


@pytest.fixture
def zone_session() -> FakeSession:
    return FakeSession(
        "zones",
        [
            make_zone_record("relation/1", zone_type="region"),
            make_zone_record("relation/2", zone_type="district"),
            make_zone_record("relation/3", zone_type="district"),
        ],
    )
