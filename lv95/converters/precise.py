"""
Precise conversion from WGS84 to LV95.

The location is lifted to geocentric Cartesian coordinates on the WGS84 ellipsoid, shifted
to the Swiss datum, brought back to geographic coordinates on the Bessel 1841 ellipsoid,
mapped onto the Gaussian conformal sphere and finally projected with the oblique Mercator
projection centred on Bern. Formulas follow swisstopo's "Formulas and constants for the
calculation of the Swiss conformal cylindrical projection and for the transformation
between coordinate systems".

Every stage is written with numpy ufuncs, so scalars and arrays go through the same code.
"""

from typing import NamedTuple, Tuple

import numpy as np

from lv95.constructs.geo_point import GeoPoint
from lv95.constructs.projected_point import ProjectedPoint
from lv95.converters.quick import FALSE_EASTING, FALSE_NORTHING
from lv95.utils.angles import deg_to_rad, dms_to_dd

# WGS84 ellipsoid
WGS84_A = 6378137.000  # semi-major axis
WGS84_E2 = 0.006694379990197  # squared first eccentricity

# Bessel 1841 ellipsoid
BESSEL_A = 6377397.155  # semi-major axis
BESSEL_F = 1 / 299.15281285  # flattening
BESSEL_E2 = 0.006674372230614  # squared first eccentricity
BESSEL_E = float(np.sqrt(BESSEL_E2))

# WGS84 -> CH1903+ geocentric translation in meters
DATUM_SHIFT = (674.374, 15.056, 405.346)

# projection origin in Bern
PHI_0 = float(deg_to_rad(dms_to_dd(46.0, 57.0, 8.66)))
LAMBDA_0 = float(deg_to_rad(dms_to_dd(7.0, 26.0, 22.5)))


class Cartesian3D(NamedTuple):
    """Geocentric Cartesian coordinates in meters, only used between pipeline stages."""

    x: np.ndarray
    y: np.ndarray
    z: np.ndarray


class SphereParameters(NamedTuple):
    """
    Parameters of the Gaussian conformal sphere touching the Bessel ellipsoid at Bern.

    Attributes:
        radius: The sphere radius R in meters
        alpha: The exponent relating ellipsoidal to spherical longitude
        b0: The latitude of the origin on the sphere, in radians
        k: The integration constant of the isometric latitude mapping
    """

    radius: float
    alpha: float
    b0: float
    k: float


def sphere_parameters(phi0: float = PHI_0) -> SphereParameters:
    sin_phi0 = np.sin(phi0)
    cos_phi0 = np.cos(phi0)

    radius = BESSEL_A * np.sqrt(1 - BESSEL_E2) / (1 - BESSEL_E2 * sin_phi0 * sin_phi0)
    alpha = np.sqrt(1 + BESSEL_E2 * cos_phi0**4 / (1 - BESSEL_E2))

    b0 = np.arcsin(sin_phi0 / alpha)
    k = (
        np.log(np.tan(np.pi / 4 + b0 / 2))
        - alpha * np.log(np.tan(np.pi / 4 + phi0 / 2))
        + alpha
        * BESSEL_E
        * np.log((1 + BESSEL_E * sin_phi0) / (1 - BESSEL_E * sin_phi0))
        / 2
    )

    return SphereParameters(float(radius), float(alpha), float(b0), float(k))


# fixed by the constants above
BERN_SPHERE = sphere_parameters()


def geographic_to_cartesian(phi, lam, height) -> Cartesian3D:
    """
    Convert WGS84 geographic coordinates (radians) and ellipsoidal height to geocentric Cartesian.
    """
    sin_phi = np.sin(phi)
    cos_phi = np.cos(phi)

    nu = WGS84_A / np.sqrt(1 - WGS84_E2 * sin_phi**2)
    x = (nu + height) * cos_phi * np.cos(lam)
    y = (nu + height) * cos_phi * np.sin(lam)
    z = (nu * (1 - WGS84_E2) + height) * sin_phi

    return Cartesian3D(x, y, z)


def shift_datum(xyz: Cartesian3D) -> Cartesian3D:
    """Translate WGS84 geocentric coordinates to the CH1903+ datum."""
    dx, dy, dz = DATUM_SHIFT
    return Cartesian3D(xyz.x - dx, xyz.y - dy, xyz.z - dz)


def cartesian_to_bessel(xyz: Cartesian3D) -> Tuple:
    """
    Recover Bessel 1841 geographic coordinates from geocentric Cartesian ones.

    Uses Bowring's closed form: one evaluation with the auxiliary angle q instead of iterating.

    Returns:
        A tuple of (phi, lambda) in radians
    """
    lam = np.arctan(xyz.y / xyz.x)

    epsilon = BESSEL_E2 / (1 - BESSEL_E2)
    b = BESSEL_A * (1 - BESSEL_F)
    p = np.sqrt(xyz.x * xyz.x + xyz.y * xyz.y)
    q = np.arctan(xyz.z * BESSEL_A / (p * b))
    phi = np.arctan(
        (xyz.z + epsilon * b * np.sin(q) ** 3)
        / (p - BESSEL_E2 * BESSEL_A * np.cos(q) ** 3)
    )

    return phi, lam


def bessel_to_sphere(phi, lam, sphere: SphereParameters = BERN_SPHERE) -> Tuple:
    """
    Map Bessel ellipsoid coordinates onto the conformal sphere.

    Returns:
        A tuple of (b, l): spherical latitude and longitude relative to Bern, in radians
    """
    sin_phi = np.sin(phi)
    s = (
        sphere.alpha * np.log(np.tan(np.pi / 4 + phi / 2))
        - sphere.alpha
        * BESSEL_E
        * np.log((1 + BESSEL_E * sin_phi) / (1 - BESSEL_E * sin_phi))
        / 2
        + sphere.k
    )

    b = 2 * (np.arctan(np.exp(s)) - np.pi / 4)
    lam_s = sphere.alpha * (lam - LAMBDA_0)

    return b, lam_s


def sphere_to_plane(b, lam_s, sphere: SphereParameters = BERN_SPHERE) -> Tuple:
    """
    Rotate the sphere so its pole sits at Bern and apply the Mercator projection.

    Returns:
        A tuple of (X, Y) in meters relative to Bern, without the false origin
    """
    sin_b0 = np.sin(sphere.b0)
    cos_b0 = np.cos(sphere.b0)

    lam_r = np.arctan(np.sin(lam_s) / (sin_b0 * np.tan(b) + cos_b0 * np.cos(lam_s)))
    b_r = np.arcsin(cos_b0 * np.sin(b) - sin_b0 * np.cos(b) * np.cos(lam_s))

    y = sphere.radius * lam_r
    x = sphere.radius * np.log((1 + np.sin(b_r)) / (1 - np.sin(b_r))) / 2

    return x, y


def latlon_to_xy_precise(lat, lon, height=0.0) -> Tuple:
    """
    Convert WGS84 latitude/longitude to LV95 northing/easting with the full ellipsoidal method.

    Args:
        lat: The latitude in decimal degrees (float or array-like)
        lon: The longitude in decimal degrees (float or array-like)
        height: The height above the WGS84 ellipsoid in meters (float or array-like)

    Returns:
        A tuple of (x, y): the northing and the easting in meters
    """
    # degenerate inputs (poles, lon = +-90) become inf/nan instead of warnings
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        xyz = geographic_to_cartesian(
            deg_to_rad(lat), deg_to_rad(lon), np.asarray(height, dtype=float)
        )
        phi, lam = cartesian_to_bessel(shift_datum(xyz))
        b, lam_s = bessel_to_sphere(phi, lam)
        x, y = sphere_to_plane(b, lam_s)

    return x + FALSE_NORTHING, y + FALSE_EASTING


def forward_precise(point: GeoPoint, height: float = 0.0) -> ProjectedPoint:
    """
    Convert a WGS84 location to LV95 using the precise ellipsoidal pipeline.

    Slower than forward_quick but accurate to the centimeter; supplying the height above
    the ellipsoid improves the result further.

    Args:
        point: The WGS84 location
        height: The height above the WGS84 ellipsoid in meters

    Returns:
        The LV95 coordinates

    Examples:
        >>> forward_precise(GeoPoint(46.94335, 7.45686))  # about (1199140.488, 2601387.782)
    """
    x, y = latlon_to_xy_precise(point.latitude, point.longitude, height)
    return ProjectedPoint(float(x), float(y))
