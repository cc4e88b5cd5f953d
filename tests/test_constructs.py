import inspect
from unittest import TestCase

from shapely.geometry import Point

from lv95.constructs.geo_point import GeoPoint
from lv95.constructs.projected_point import ProjectedPoint
from lv95.utils.crs import LATLON_CRS, LV95_CRS


class TestGeoPoint(TestCase):
    def test_fields(self):
        point = GeoPoint(46.94335, 7.45686)

        self.assertEqual(point.latitude, 46.94335)
        self.assertEqual(point.longitude, 7.45686)
        self.assertEqual(point.crs, LATLON_CRS)

    def test_is_immutable(self):
        point = GeoPoint(46.94335, 7.45686)

        with self.assertRaises(AttributeError):
            point.latitude = 0.0  # type: ignore

    def test_out_of_range_values_are_kept(self):
        point = GeoPoint(123.0, -400.0)

        self.assertEqual(point, GeoPoint(123.0, -400.0))

    def test_point_round_trip(self):
        """A Shapely Point is in (longitude, latitude) order"""
        point = GeoPoint(46.94335, 7.45686)
        geom = point.to_point()

        self.assertEqual((geom.x, geom.y), (7.45686, 46.94335))
        self.assertEqual(GeoPoint.from_point(geom), point)

    def test_to_lv95(self):
        xy = GeoPoint(46.94335, 7.45686).to_lv95()

        self.assertIsInstance(xy, ProjectedPoint)
        self.assertEqual(round(xy.x), 1199141)
        self.assertEqual(round(xy.y), 2601388)

    def test_to_lv95_precise(self):
        xy = GeoPoint(46.66209, 9.57662).to_lv95(precise=True)

        self.assertAlmostEqual(xy.x, 1170101.993, delta=0.001)
        self.assertAlmostEqual(xy.y, 2763611.715, delta=0.001)

    def test_repr(self):
        self.assertEqual(
            repr(GeoPoint(46.5, 7.5)), "GeoPoint(latitude=46.5, longitude=7.5)"
        )


class TestProjectedPoint(TestCase):
    def test_fields(self):
        point = ProjectedPoint(1199141.0, 2601388.0)

        self.assertEqual(point.northing, 1199141.0)
        self.assertEqual(point.easting, 2601388.0)
        self.assertEqual(point.crs, LV95_CRS)

    def test_is_immutable(self):
        point = ProjectedPoint(1199141.0, 2601388.0)

        with self.assertRaises(AttributeError):
            point.x = 0.0  # type: ignore

    def test_point_round_trip(self):
        """A Shapely Point is in (easting, northing) order"""
        point = ProjectedPoint(1199141.0, 2601388.0)
        geom = point.to_point()

        self.assertEqual((geom.x, geom.y), (2601388.0, 1199141.0))
        self.assertEqual(ProjectedPoint.from_point(Point(2601388.0, 1199141.0)), point)

    def test_to_wgs84(self):
        latlng = ProjectedPoint(1199141, 2601388).to_wgs84()

        self.assertIsInstance(latlng, GeoPoint)
        self.assertAlmostEqual(latlng.latitude, 46.94335, delta=0.00001)
        self.assertAlmostEqual(latlng.longitude, 7.45686, delta=0.00001)

    def test_repr(self):
        self.assertEqual(
            repr(ProjectedPoint(1200000.0, 2600000.0)),
            "ProjectedPoint(x=1200000.0, y=2600000.0)",
        )


class TestConversionAnnotations(TestCase):
    def test_conversion_methods_declare_return_types(self):
        self.assertEqual(
            inspect.signature(GeoPoint.to_lv95).return_annotation, "ProjectedPoint"
        )
        self.assertEqual(
            inspect.signature(ProjectedPoint.to_wgs84).return_annotation, "GeoPoint"
        )
