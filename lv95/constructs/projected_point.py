from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from pyproj import CRS
from shapely.geometry import Point

from lv95.utils.crs import LV95_CRS

if TYPE_CHECKING:
    from lv95.constructs.geo_point import GeoPoint


class ProjectedPoint(NamedTuple):
    """
    Represents a single location in the Swiss LV95 projected coordinate system.

    Following Swiss surveying convention, x is the northing and y is the easting, both in
    meters from the projection's false origin. Over Switzerland x is a seven digit number
    starting with 1 and y a seven digit number starting with 2. Values are not validated.

    Attributes:
        x: The northing in meters (near 1,200,000 at Bern)
        y: The easting in meters (near 2,600,000 at Bern)

    Examples:
        >>> from lv95.constructs.projected_point import ProjectedPoint
        >>> p = ProjectedPoint(1199141, 2601388)
        >>> p.to_wgs84()  # about (46.94335, 7.45686)
        >>> p.to_point().coords[0]
        (2601388.0, 1199141.0)
    """

    x: float
    y: float

    def __repr__(self):
        return f"ProjectedPoint(x={self.x}, y={self.y})"

    @property
    def crs(self) -> CRS:
        return LV95_CRS

    @property
    def northing(self) -> float:
        return self.x

    @property
    def easting(self) -> float:
        return self.y

    @classmethod
    def from_point(cls, point: Point) -> ProjectedPoint:
        """
        Create a ProjectedPoint from a Shapely Point in (easting, northing) order.

        Args:
            point: A Shapely Point whose x is the easting and y the northing

        Returns:
            A new ProjectedPoint
        """
        return cls(x=point.y, y=point.x)

    def to_point(self) -> Point:
        """
        Convert to a Shapely Point in (easting, northing) order.

        Note that this swaps the fields: the Point's x is this object's y (easting).
        That is the axis order GIS tools use for EPSG:2056.

        Returns:
            A Shapely Point with x as the easting and y as the northing
        """
        return Point(self.y, self.x)

    def to_wgs84(self) -> GeoPoint:
        """
        Convert this location to WGS84 using the quick approximation.

        Returns:
            The corresponding GeoPoint
        """
        from lv95.converters.lv95 import to_wgs84

        return to_wgs84(self)
