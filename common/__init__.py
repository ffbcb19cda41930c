"""
Common utilities and infrastructure for the national grid conversion library.

This package provides foundational components used across all modules:
- Geodetic constants with units and sources
- Unit registry for arc-second, degree and ppm conversions
- Coordinate value types
- Logging and error types
"""

from common.constants import Constant, GeodeticConstants
from common.units import (
    ureg,
    Q_,
    arcseconds_to_radians,
    degrees_to_radians,
    ppm_to_scale_factor,
)
from common.types import (
    LatLon,
    Cartesian,
    EastingNorthing,
)
from common.errors import ConvergenceError
from common.logging_config import get_logger

__all__ = [
    "Constant",
    "GeodeticConstants",
    "ureg",
    "Q_",
    "arcseconds_to_radians",
    "degrees_to_radians",
    "ppm_to_scale_factor",
    "LatLon",
    "Cartesian",
    "EastingNorthing",
    "ConvergenceError",
    "get_logger",
]
