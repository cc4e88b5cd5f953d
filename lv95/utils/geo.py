import logging
from typing import Tuple

import numpy as np
import shapely
from shapely.geometry.base import BaseGeometry

from lv95.converters.precise import latlon_to_xy_precise
from lv95.converters.quick import latlon_to_xy_quick, xy_to_latlon_quick

log = logging.getLogger(__name__)


def _unwrap(values):
    """Internal use."""
    return values.item() if np.ndim(values) == 0 else values


def latlon_to_lv95(lat, lon, precise: bool = False, height=0.0) -> Tuple:
    """
    Transform WGS84 latitude/longitude to Swiss LV95 northing/easting.

    Inputs may be floats, sequences or numpy arrays and are broadcast against each other
    following numpy rules, which makes this the fast path for converting many points at once.

    Args:
        lat: The latitude in decimal degrees
        lon: The longitude in decimal degrees
        precise: Use the precise ellipsoidal pipeline. Default is False.
        height: The height above the WGS84 ellipsoid in meters. Ignored unless precise is True.

    Returns:
        A tuple of (x, y): the northing and the easting in meters. Floats for scalar
        inputs, numpy arrays otherwise.

    Examples:
        >>> x, y = latlon_to_lv95([46.94335, 46.66209], [7.45686, 9.57662])
        >>> np.round(x)
        array([1199141., 1170102.])
    """
    if precise:
        x, y = latlon_to_xy_precise(lat, lon, height)
    else:
        x, y = latlon_to_xy_quick(lat, lon)

    return _unwrap(x), _unwrap(y)


def lv95_to_latlon(x, y) -> Tuple:
    """
    Transform Swiss LV95 northing/easting to WGS84 latitude/longitude.

    Uses the quick approximation; inputs are broadcast like in latlon_to_lv95.

    Args:
        x: The northing in meters
        y: The easting in meters

    Returns:
        A tuple of (lat, lon) in decimal degrees
    """
    lat, lon = xy_to_latlon_quick(x, y)

    return _unwrap(lat), _unwrap(lon)


def _check_geometry(geom):
    if not isinstance(geom, BaseGeometry):
        raise TypeError(f"expected a shapely geometry but got {type(geom).__name__}")


def geometry_to_lv95(
    geom: BaseGeometry, precise: bool = False, height: float = 0.0
) -> BaseGeometry:
    """
    Transform a Shapely geometry from WGS84 to Swiss LV95.

    The input geometry must be in (longitude, latitude) order. The result is in
    (easting, northing) order, the axis order GIS tools use for EPSG:2056.

    Args:
        geom: Any Shapely geometry in EPSG:4326
        precise: Use the precise ellipsoidal pipeline. Default is False.
        height: The height above the WGS84 ellipsoid in meters, applied to every vertex of a
            2D geometry. For a 3D geometry with precise=True, each vertex z is used as its
            ellipsoidal height instead. z values are carried through unchanged.

    Returns:
        A new geometry of the same type in EPSG:2056

    Raises:
        TypeError: If geom is not a Shapely geometry

    Examples:
        >>> from shapely.geometry import LineString
        >>> line = LineString([(7.45686, 46.94335), (9.57662, 46.66209)])
        >>> geometry_to_lv95(line, precise=True)
    """
    _check_geometry(geom)
    log.debug(f"transforming {geom.geom_type} to LV95")

    def project(coords):
        heights = coords[:, 2] if coords.shape[1] == 3 else height
        x, y = latlon_to_lv95(
            coords[:, 1], coords[:, 0], precise=precise, height=heights
        )
        out = coords.copy()
        out[:, 0] = y
        out[:, 1] = x
        return out

    return shapely.transform(geom, project, include_z=geom.has_z)


def geometry_to_wgs84(geom: BaseGeometry) -> BaseGeometry:
    """
    Transform a Shapely geometry from Swiss LV95 to WGS84 using the quick approximation.

    Args:
        geom: Any Shapely geometry in EPSG:2056, in (easting, northing) order

    Returns:
        A new geometry of the same type in EPSG:4326, in (longitude, latitude) order.
        z values are carried through unchanged.

    Raises:
        TypeError: If geom is not a Shapely geometry
    """
    _check_geometry(geom)
    log.debug(f"transforming {geom.geom_type} to WGS84")

    def unproject(coords):
        lat, lon = lv95_to_latlon(coords[:, 1], coords[:, 0])
        out = coords.copy()
        out[:, 0] = lon
        out[:, 1] = lat
        return out

    return shapely.transform(geom, unproject, include_z=geom.has_z)
