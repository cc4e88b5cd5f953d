"""Angle unit helpers shared by the converters.

All helpers are built on numpy ufuncs so they accept plain floats as well as arrays.
"""

import numpy as np


def deg_to_rad(degrees):
    """
    Convert an angle from decimal degrees to radians.

    Args:
        degrees: The angle in decimal degrees (float or array-like)

    Returns:
        The angle in radians
    """
    return np.pi * np.asarray(degrees, dtype=float) / 180


def rad_to_deg(radians):
    """Convert an angle from radians to decimal degrees."""
    return 180 * np.asarray(radians, dtype=float) / np.pi


def dms_to_dd(degrees: float, minutes: float, seconds: float) -> float:
    """
    Convert an angle given as degrees, minutes and seconds to decimal degrees.

    Args:
        degrees: The whole degrees
        minutes: The arc minutes
        seconds: The arc seconds

    Returns:
        The angle in decimal degrees

    Examples:
        >>> dms_to_dd(7.0, 26.0, 22.5)
        7.439583333333333
    """
    return degrees + minutes / 60 + seconds / 3600
