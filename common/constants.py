"""
Geodetic Constants for National Grid Coordinate Conversion.

This module provides the numeric constants used by the coordinate
transforms together with their units and sources. Reference ellipsoids,
datum shifts and grid definitions live in `geospatial.reference_data`;
this module only holds the scalar tunables.

References
----------
- Ordnance Survey (2020). A guide to coordinate systems in Great Britain.
- Bowring, B.R. (1976). Transformation from spatial to geographical
  coordinates. Survey Review, 23(181), 323-327.
"""

from dataclasses import dataclass
from typing import Final, Union


@dataclass(frozen=True)
class Constant:
    """A numeric tunable with its unit and provenance.

    Attributes
    ----------
    value : int or float
        The value of the constant.
    unit : str
        The unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: Union[int, float]
    unit: str
    source: str
    description: str


class GeodeticConstants:
    """Registry of constants used throughout the coordinate transforms.

    Iterative Solver
    ----------------
    The cartesian to latitude/longitude conversion iterates until the
    latitude estimate moves by less than a distance on the ground, which
    is turned into an angle by dividing by the semi-major axis.

    Grid Geometry
    -------------
    National grids are built from 100 km squares lettered on a 5x5
    pattern that leaves out the letter I.
    """

    # =========================================================================
    # Cartesian -> Lat/Lon Iteration
    # =========================================================================

    CARTESIAN_PRECISION: Final[Constant] = Constant(
        value=4.0,
        unit="m",
        source="Veness, latlong-gridref (movable-type.co.uk)",
        description="Ground distance below which the latitude iteration stops"
    )

    MAX_ITERATIONS: Final[Constant] = Constant(
        value=100,
        unit="dimensionless",
        source="Bowring (1976); converges in 2-3 steps near the surface",
        description="Iteration cap before declaring non-convergence"
    )

    POLAR_AXIS_THRESHOLD: Final[Constant] = Constant(
        value=1e-10,
        unit="m",
        source="Numerical guard",
        description="Distance from the polar axis treated as lying on it"
    )

    # =========================================================================
    # Grid Lettering
    # =========================================================================

    GRID_SQUARE_SIZE: Final[Constant] = Constant(
        value=100_000.0,
        unit="m",
        source="OS guide, Section 7",
        description="Side length of a lettered grid square"
    )

    LETTER_GRID_SIZE: Final[Constant] = Constant(
        value=5,
        unit="dimensionless",
        source="OS guide, Section 7",
        description="Squares per side of each 5x5 lettering block"
    )

    # =========================================================================
    # Grid Reference Formatting
    # =========================================================================

    MAX_REFERENCE_DIGITS: Final[Constant] = Constant(
        value=10,
        unit="dimensionless",
        source="OS guide, Section 7",
        description="Figures in a full (1 m) grid reference after the letters"
    )
