from __future__ import annotations

import logging

from lv95.constructs.geo_point import GeoPoint
from lv95.constructs.projected_point import ProjectedPoint
from lv95.converters.precise import forward_precise
from lv95.converters.quick import forward_quick, reverse_quick

log = logging.getLogger(__name__)


def from_wgs84(
    point: GeoPoint, precise: bool = False, height: float = 0.0
) -> ProjectedPoint:
    """
    Convert a WGS84 location to Swiss LV95 coordinates.

    The default is the fast polynomial approximation. Setting precise to True runs the
    slower ellipsoidal pipeline instead; with it, supplying the height above the ellipsoid
    increases the accuracy further.

    Args:
        point: The WGS84 location
        precise: Use the precise ellipsoidal pipeline. Default is False.
        height: The height above the WGS84 ellipsoid in meters. Ignored unless precise is True.

    Returns:
        The LV95 coordinates

    Examples:
        >>> from lv95 import GeoPoint, from_wgs84
        >>> xy = from_wgs84(GeoPoint(46.66209, 9.57662))
        >>> round(xy.x), round(xy.y)
        (1170102, 2763612)
        >>> # about (1170101.993, 2763611.715)
        >>> from_wgs84(GeoPoint(46.66209, 9.57662), precise=True)
    """
    if precise:
        log.debug(f"converting {point} with the precise method at height {height}")
        return forward_precise(point, height)

    log.debug(f"converting {point} with the quick method")
    return forward_quick(point)


def to_wgs84(point: ProjectedPoint) -> GeoPoint:
    """
    Convert Swiss LV95 coordinates to a WGS84 location.

    Only the quick approximation is available in this direction.

    Args:
        point: The LV95 coordinates

    Returns:
        The approximate WGS84 location
    """
    return reverse_quick(point)
