"""Coordinate Reference System (CRS) constants used throughout lv95.

This module defines the standard CRS objects for the two coordinate spaces the package converts between:
- LATLON_CRS: WGS84 geographic coordinates (EPSG:4326)
- LV95_CRS: Swiss CH1903+ / LV95 projected coordinates (EPSG:2056)
"""

from pyproj import CRS

# WGS84 latitude/longitude coordinate system (EPSG:4326)
# Standard GPS coordinates in decimal degrees
# Range: latitude [-90, 90], longitude [-180, 180]
LATLON_CRS = CRS(4326)

# Swiss national projected coordinate system CH1903+ / LV95 (EPSG:2056)
# Bessel 1841 ellipsoid, oblique conformal cylindrical projection centred on Bern
# Coordinates are in meters (easting near 2,600,000, northing near 1,200,000)
LV95_CRS = CRS(2056)
