"""
Quick approximate conversion between WGS84 and LV95.

Both directions are fixed-coefficient cubic polynomials published by swisstopo. They are
independent fits rather than inverses of each other, and are accurate to about a meter
over Switzerland.
"""

from typing import Tuple

import numpy as np

from lv95.constructs.geo_point import GeoPoint
from lv95.constructs.projected_point import ProjectedPoint

# Bern reference point in arc seconds
BERN_LAT_ARCSEC = 169028.66
BERN_LON_ARCSEC = 26782.5

# false origin of the projected grid
FALSE_NORTHING = 1200000.0
FALSE_EASTING = 2600000.0


def latlon_to_xy_quick(lat, lon) -> Tuple:
    """
    Approximate WGS84 latitude/longitude as LV95 northing/easting.

    Args:
        lat: The latitude in decimal degrees (float or array-like)
        lon: The longitude in decimal degrees (float or array-like)

    Returns:
        A tuple of (x, y): the northing and the easting in meters
    """
    # huge inputs overflow to inf instead of warning
    with np.errstate(over="ignore", invalid="ignore"):
        phi = (np.asarray(lat, dtype=float) * 3600 - BERN_LAT_ARCSEC) / 10000
        phi2 = phi * phi
        phi3 = phi2 * phi

        lam = (np.asarray(lon, dtype=float) * 3600 - BERN_LON_ARCSEC) / 10000
        lam2 = lam * lam
        lam3 = lam2 * lam

        x = (
            1200147.07
            + 308807.95 * phi
            + 3745.25 * lam2
            + 76.63 * phi2
            - 194.56 * lam2 * phi
            + 119.79 * phi3
        )

        y = (
            2600072.37
            + 211455.93 * lam
            - 10938.51 * lam * phi
            - 0.36 * lam * phi2
            - 44.54 * lam3
        )

    return x, y


def xy_to_latlon_quick(x, y) -> Tuple:
    """
    Approximate LV95 northing/easting as WGS84 latitude/longitude.

    Args:
        x: The northing in meters (float or array-like)
        y: The easting in meters (float or array-like)

    Returns:
        A tuple of (lat, lon) in decimal degrees
    """
    # huge inputs overflow to inf instead of warning
    with np.errstate(over="ignore", invalid="ignore"):
        x1 = (np.asarray(x, dtype=float) - FALSE_NORTHING) / 1000000
        x2 = x1 * x1
        x3 = x2 * x1

        y1 = (np.asarray(y, dtype=float) - FALSE_EASTING) / 1000000
        y2 = y1 * y1
        y3 = y2 * y1

        # results are in units of 10000 arc seconds
        lat = (
            16.9023892
            + 3.238272 * x1
            - 0.270978 * y2
            - 0.002528 * x2
            - 0.0447 * y2 * x1
            - 0.0140 * x3
        )

        lon = (
            2.6779094
            + 4.728982 * y1
            + 0.791484 * y1 * x1
            + 0.1306 * y1 * x2
            - 0.0436 * y3
        )

        lat = lat * 100 / 36
        lon = lon * 100 / 36

    return lat, lon


def forward_quick(point: GeoPoint) -> ProjectedPoint:
    """
    Convert a WGS84 location to LV95 using the quick approximation.

    Args:
        point: The WGS84 location

    Returns:
        The approximate LV95 coordinates

    Examples:
        >>> xy = forward_quick(GeoPoint(46.94335, 7.45686))
        >>> round(xy.x), round(xy.y)
        (1199141, 2601388)
    """
    x, y = latlon_to_xy_quick(point.latitude, point.longitude)
    return ProjectedPoint(float(x), float(y))


def reverse_quick(point: ProjectedPoint) -> GeoPoint:
    """
    Convert LV95 coordinates to a WGS84 location using the quick approximation.

    This is not an exact inverse of forward_quick; a round trip drifts by about 1e-5 degrees.

    Args:
        point: The LV95 coordinates

    Returns:
        The approximate WGS84 location
    """
    lat, lon = xy_to_latlon_quick(point.x, point.y)
    return GeoPoint(float(lat), float(lon))
