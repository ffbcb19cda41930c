"""
Coordinate Value Types with Physical Units.

This module defines the immutable value types passed between the
coordinate transforms. Each transform consumes one of these and
produces a fresh instance of another; none are mutated after
construction.

Design Rationale
----------------
Using typed dataclasses instead of bare tuples keeps the unit of each
field next to its name:
1. Angles are always RADIANS inside the library
2. Distances and heights are always METERS
3. Degrees only appear at the edges, through `from_degrees`/`to_degrees`
"""

from dataclasses import dataclass
from typing import Tuple
import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class LatLon:
    """A geodetic position on a reference ellipsoid.

    Attributes
    ----------
    latitude : float
        Geodetic latitude in RADIANS (not degrees).
    longitude : float
        Geodetic longitude in RADIANS (not degrees).
    height : float, optional
        Height above the ellipsoid in METERS. Default is 0.

    Notes
    -----
    - Latitude is positive north, negative south.
    - Longitude is positive east, negative west.
    - The latitude range [-π/2, π/2] is the caller's responsibility and
      is not checked here.

    Examples
    --------
    >>> point = LatLon.from_degrees(52.657570, 1.717922)
    >>> lat_deg, lon_deg = point.to_degrees()
    """
    latitude: float  # radians
    longitude: float  # radians
    height: float = 0.0  # meters above ellipsoid

    def to_degrees(self) -> Tuple[float, float]:
        """Convert to degrees for display.

        Returns
        -------
        Tuple[float, float]
            (latitude_degrees, longitude_degrees)
        """
        return float(np.degrees(self.latitude)), float(np.degrees(self.longitude))

    @classmethod
    def from_degrees(cls, lat_deg: float, lon_deg: float, height_m: float = 0.0) -> 'LatLon':
        """Create a position from degrees (convenience constructor).

        Parameters
        ----------
        lat_deg : float
            Latitude in degrees.
        lon_deg : float
            Longitude in degrees.
        height_m : float, optional
            Ellipsoidal height in meters.

        Returns
        -------
        LatLon
            Position with internally stored radians.
        """
        return cls(
            latitude=float(np.radians(lat_deg)),
            longitude=float(np.radians(lon_deg)),
            height=height_m
        )


@dataclass(frozen=True)
class Cartesian:
    """A geocentric cartesian position.

    Attributes
    ----------
    x : float
        Distance along the axis through the prime meridian at the equator (METERS).
    y : float
        Distance along the axis through 90°E at the equator (METERS).
    z : float
        Distance along the polar axis, positive north (METERS).
    """
    x: float
    y: float
    z: float

    def as_array(self) -> NDArray[np.float64]:
        """Return the position as a length-3 array."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)


@dataclass(frozen=True)
class EastingNorthing:
    """A position on a projected (planar) grid.

    Attributes
    ----------
    easting : float
        Distance east of the grid's false origin in METERS.
    northing : float
        Distance north of the grid's false origin in METERS.
    height : float, optional
        Height carried through from the geodetic position (METERS).
    """
    easting: float
    northing: float
    height: float = 0.0
