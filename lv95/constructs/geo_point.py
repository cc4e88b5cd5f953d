from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from pyproj import CRS
from shapely.geometry import Point

from lv95.utils.crs import LATLON_CRS

if TYPE_CHECKING:
    from lv95.constructs.projected_point import ProjectedPoint


class GeoPoint(NamedTuple):
    """
    Represents a single WGS84 location in decimal degrees.

    A GeoPoint is an immutable pair of latitude and longitude. Values are not validated:
    a latitude outside [-90, 90] is carried as-is and simply produces meaningless output
    when converted.

    Attributes:
        latitude: The latitude in decimal degrees
        longitude: The longitude in decimal degrees

    Examples:
        >>> from lv95.constructs.geo_point import GeoPoint
        >>> bern = GeoPoint(46.94335, 7.45686)
        >>> p = bern.to_lv95()
        >>> round(p.x), round(p.y)
        (1199141, 2601388)
        >>> bern.to_point().x
        7.45686
    """

    latitude: float
    longitude: float

    def __repr__(self):
        return f"GeoPoint(latitude={self.latitude}, longitude={self.longitude})"

    @property
    def crs(self) -> CRS:
        return LATLON_CRS

    @classmethod
    def from_point(cls, point: Point) -> GeoPoint:
        """
        Create a GeoPoint from a Shapely Point in (longitude, latitude) order.

        Args:
            point: A Shapely Point whose x is the longitude and y the latitude

        Returns:
            A new GeoPoint
        """
        return cls(latitude=point.y, longitude=point.x)

    def to_point(self) -> Point:
        """
        Convert to a Shapely Point with x as the longitude and y as the latitude.

        Returns:
            A Shapely Point in EPSG:4326 axis order as used by GIS tools
        """
        return Point(self.longitude, self.latitude)

    def to_lv95(self, precise: bool = False, height: float = 0.0) -> ProjectedPoint:
        """
        Convert this location to Swiss LV95 coordinates.

        Args:
            precise: Use the precise ellipsoidal pipeline instead of the quick approximation
            height: Height above the ellipsoid in meters, only used when precise is True

        Returns:
            The corresponding ProjectedPoint
        """
        from lv95.converters.lv95 import from_wgs84

        return from_wgs84(self, precise=precise, height=height)
