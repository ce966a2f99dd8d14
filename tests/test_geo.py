"""
Region attribution tests.

The box table, checked top to bottom (open intervals):

  Canada         49 < lat < 71,   -141 < lng < -60
  United States  25 < lat < 49,   -125 < lng < -66
  Europe         35 < lat < 71,    -10 < lng < 40
  Africa        -35 < lat < 37,    -18 < lng < 55
  Asia          -50 < lat < 55,     26 < lng < 180
  Australia     -50 < lat < -10,   110 < lng < 180
  South America -60 < lat < 15,    -82 < lng < -35
"""

import pytest

from memory_atlas.geo import REGION_BOXES, UNKNOWN_REGION, GeoAttributor, RegionBox


@pytest.fixture
def geo():
    return GeoAttributor()


class TestRegionOf:
    @pytest.mark.parametrize("lat,lng,region", [
        (45, -100, "United States"),
        (60, -100, "Canada"),
        (51.5, -0.1, "Europe"),
        (30.0, 31.2, "Africa"),
        (35.7, 139.7, "Asia"),
        (-15.8, -47.9, "South America"),
    ])
    def test_known_points(self, geo, lat, lng, region):
        assert geo.region_of(lat, lng) == region

    def test_origin_falls_in_africa(self, geo):
        assert geo.region_of(0, 0) == "Africa"

    def test_sydney_resolves_to_asia_by_priority(self, geo):
        # Inside both the Asia and Australia boxes; Asia is checked first
        assert geo.region_of(-33.9, 151.2) == "Asia"

    def test_open_ocean_is_unknown(self, geo):
        assert geo.region_of(0, -150) == UNKNOWN_REGION

    def test_box_edges_are_excluded(self, geo):
        # On the Canada/US border latitude: neither open box contains it
        assert geo.region_of(49, -100) == UNKNOWN_REGION

    def test_out_of_range_coordinates_are_unknown(self, geo):
        assert geo.region_of(200, 500) == UNKNOWN_REGION
        assert geo.region_of(-95, -190) == UNKNOWN_REGION

    def test_malformed_input_never_raises(self, geo):
        assert geo.region_of(None, None) == UNKNOWN_REGION
        assert geo.region_of("north", 10) == UNKNOWN_REGION
        assert geo.region_of(float("nan"), 10) == UNKNOWN_REGION

    def test_numeric_strings_are_accepted(self, geo):
        assert geo.region_of("45", "-100") == "United States"


class TestBoxTable:
    def test_regions_in_priority_order(self, geo):
        assert geo.regions == [
            "Canada", "United States", "Europe", "Africa",
            "Asia", "Australia", "South America",
        ]

    def test_default_table_is_not_shared(self, geo):
        geo.boxes.append(RegionBox("Pacific", -60, 60, -180, -120))
        assert len(REGION_BOXES) == 7

    def test_custom_boxes(self):
        geo = GeoAttributor(boxes=[RegionBox("Pacific", -60, 60, -180, -120)])
        assert geo.region_of(0, -150) == "Pacific"
        assert geo.region_of(45, -100) == UNKNOWN_REGION
