"""
Unit Registry for Geodetic Parameters.

Datum shift parameters are published in mixed units: rotations in
arc-seconds, scale in parts per million, and projection origins in
degrees. This module uses the `pint` library to turn those into the
radians and plain ratios the transforms compute with.

Example Usage
-------------
>>> from common.units import Q_, arcseconds_to_radians
>>> Q_(1, 'arcsecond').to('radian')
<Quantity(4.8481368e-06, 'radian')>
>>> arcseconds_to_radians(-0.8421)
-4.082616...e-06
"""

from pint import UnitRegistry as PintUnitRegistry

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity

# Conversion factors, resolved once at import
RADIANS_PER_ARCSECOND: float = Q_(1.0, "arcsecond").to("radian").magnitude
RADIANS_PER_DEGREE: float = Q_(1.0, "degree").to("radian").magnitude
RATIO_PER_PPM: float = Q_(1.0, "ppm").to("dimensionless").magnitude


def arcseconds_to_radians(value: float) -> float:
    """Convert an angle in arc-seconds to radians."""
    return value * RADIANS_PER_ARCSECOND


def degrees_to_radians(value: float) -> float:
    """Convert an angle in degrees to radians."""
    return value * RADIANS_PER_DEGREE


def ppm_to_scale_factor(value: float) -> float:
    """Convert a scale change in parts per million to a multiplier.

    Parameters
    ----------
    value : float
        Scale change in ppm (e.g. 20.4894).

    Returns
    -------
    float
        The multiplier ``1 + value / 1e6``.
    """
    return 1.0 + value * RATIO_PER_PPM
