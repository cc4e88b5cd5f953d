"""Conversion between WGS84 and the Swiss LV95 projected coordinate system."""

from lv95.constructs.geo_point import GeoPoint
from lv95.constructs.projected_point import ProjectedPoint
from lv95.converters.lv95 import from_wgs84, to_wgs84
from lv95.converters.precise import forward_precise
from lv95.converters.quick import forward_quick, reverse_quick
from lv95.utils.angles import deg_to_rad, dms_to_dd, rad_to_deg
from lv95.utils.crs import LATLON_CRS, LV95_CRS
from lv95.utils.geo import (
    geometry_to_lv95,
    geometry_to_wgs84,
    latlon_to_lv95,
    lv95_to_latlon,
)

__version__ = "1.0.0"

__all__ = [
    "GeoPoint",
    "ProjectedPoint",
    "from_wgs84",
    "to_wgs84",
    "forward_quick",
    "reverse_quick",
    "forward_precise",
    "LATLON_CRS",
    "LV95_CRS",
    "latlon_to_lv95",
    "lv95_to_latlon",
    "geometry_to_lv95",
    "geometry_to_wgs84",
    "deg_to_rad",
    "rad_to_deg",
    "dms_to_dd",
]
