"""Coarse region attribution from coordinates.

Not a geocoder: a short list of axis-aligned boxes checked in order.  The
boxes overlap (Asia swallows most of Australia, Africa covers 0,0), so the
first match wins.
"""

from typing import List, NamedTuple

UNKNOWN_REGION = "Unknown"


class RegionBox(NamedTuple):
    """Open bounding box; edges themselves are outside."""
    region: str
    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    def contains(self, lat: float, lng: float) -> bool:
        return self.min_lat < lat < self.max_lat and self.min_lng < lng < self.max_lng


# Checked top to bottom
REGION_BOXES: List[RegionBox] = [
    RegionBox("Canada", 49, 71, -141, -60),
    RegionBox("United States", 25, 49, -125, -66),
    RegionBox("Europe", 35, 71, -10, 40),
    RegionBox("Africa", -35, 37, -18, 55),
    RegionBox("Asia", -50, 55, 26, 180),
    RegionBox("Australia", -50, -10, 110, 180),
    RegionBox("South America", -60, 15, -82, -35),
]


class GeoAttributor:
    """Map a latitude/longitude pair to a region label."""

    def __init__(self, boxes: List[RegionBox] = None):
        self.boxes = list(boxes or REGION_BOXES)

    def region_of(self, lat: float, lng: float) -> str:
        try:
            lat, lng = float(lat), float(lng)
        except (TypeError, ValueError):
            return UNKNOWN_REGION
        # NaN fails every comparison and falls through
        for box in self.boxes:
            if box.contains(lat, lng):
                return box.region
        return UNKNOWN_REGION

    @property
    def regions(self) -> List[str]:
        """Region labels in priority order, without duplicates."""
        seen: List[str] = []
        for box in self.boxes:
            if box.region not in seen:
                seen.append(box.region)
        return seen
