from unittest import TestCase

import numpy as np

from lv95 import (
    GeoPoint,
    ProjectedPoint,
    forward_precise,
    forward_quick,
    from_wgs84,
    reverse_quick,
    to_wgs84,
)


class TestLV95(TestCase):
    def test_from_wgs84_defaults_to_quick(self):
        point = GeoPoint(46.94335, 7.45686)

        self.assertEqual(from_wgs84(point), forward_quick(point))

    def test_from_wgs84_quick_ignores_height(self):
        point = GeoPoint(46.94335, 7.45686)

        self.assertEqual(from_wgs84(point, height=1500.0), forward_quick(point))

    def test_from_wgs84_precise(self):
        xy = from_wgs84(GeoPoint(46.94335, 7.45686), precise=True)

        self.assertAlmostEqual(xy.y, 2601387.782, delta=0.001)
        self.assertAlmostEqual(xy.x, 1199140.488, delta=0.001)

    def test_from_wgs84_precise_passes_height(self):
        point = GeoPoint(46.66209, 9.57662)

        self.assertEqual(
            from_wgs84(point, precise=True, height=1800.0),
            forward_precise(point, 1800.0),
        )

    def test_to_wgs84_uses_quick_reverse(self):
        point = ProjectedPoint(1170102, 2763612)

        latlng = to_wgs84(point)

        self.assertEqual(latlng, reverse_quick(point))
        self.assertAlmostEqual(latlng.latitude, 46.66209, delta=0.00001)
        self.assertAlmostEqual(latlng.longitude, 9.57662, delta=0.00001)

    def test_from_wgs84_logs_selected_method(self):
        with self.assertLogs("lv95.converters.lv95", level="DEBUG") as logs:
            from_wgs84(GeoPoint(46.94335, 7.45686), precise=True, height=550.0)

        self.assertIn("precise", logs.output[0])

    def test_repeated_calls_are_identical(self):
        point = GeoPoint(47.0, 8.0)

        for precise in (False, True):
            first = from_wgs84(point, precise=precise)
            for _ in range(5):
                self.assertEqual(from_wgs84(point, precise=precise), first)

        xy = ProjectedPoint(1250000.0, 2700000.0)
        self.assertEqual(to_wgs84(xy), to_wgs84(xy))

    def test_quick_conversions_are_total(self):
        """Any finite input, even far outside Switzerland, gives finite output without raising"""
        for lat in np.linspace(-1000, 1000, 21):
            for lon in np.linspace(-1000, 1000, 21):
                xy = from_wgs84(GeoPoint(float(lat), float(lon)))
                self.assertTrue(np.isfinite(xy.x) and np.isfinite(xy.y))

                latlng = to_wgs84(ProjectedPoint(float(lat) * 1e4, float(lon) * 1e4))
                self.assertTrue(
                    np.isfinite(latlng.latitude) and np.isfinite(latlng.longitude)
                )
