"""
Coordinate Models for Ellipsoidal Earth Geometry.

This module converts between geodetic coordinates (latitude, longitude,
ellipsoidal height) and geocentric cartesian coordinates on a caller
supplied reference ellipsoid. Together with the Helmert transform in
`geospatial.datum_transforms` it moves positions from one datum to
another.

Scientific Context
------------------
Domain: Geodesy, datum transformation
Model: Biaxial reference ellipsoid given by its semi-axes

Different datums place differently shaped ellipsoids in different
positions. Latitude and longitude cannot be shifted between datums
directly; the position is taken to cartesian space on the source
ellipsoid, shifted there, and brought back on the target ellipsoid.

References
----------
- Ordnance Survey (2020). A guide to coordinate systems in Great Britain.
  Annexes B.1 and B.2.
- Bowring, B.R. (1976). Transformation from spatial to geographical
  coordinates. Survey Review, 23(181), 323-327.
"""

from dataclasses import dataclass
import numpy as np

from common.constants import GeodeticConstants
from common.errors import ConvergenceError
from common.logging_config import get_logger
from common.types import Cartesian, LatLon

logger = get_logger(__name__)


@dataclass(frozen=True)
class Ellipsoid:
    """Parameters defining a reference ellipsoid.

    Attributes
    ----------
    a : float
        Semi-major axis (equatorial radius) in meters.
    b : float
        Semi-minor axis (polar radius) in meters.
    name : str
        Identifier for the ellipsoid.

    Derived Parameters
    ------------------
    e2 : float
        First eccentricity squared: e² = (a² - b²) / a²
    n : float
        Third flattening: n = (a - b) / (a + b)
    """
    a: float
    b: float
    name: str = ""

    def __post_init__(self):
        """Validate axis lengths."""
        if not self.a >= self.b > 0:
            raise ValueError(
                f"Ellipsoid {self.name or '<unnamed>'} needs a >= b > 0, "
                f"got a={self.a}, b={self.b}"
            )

    @property
    def e2(self) -> float:
        """First eccentricity squared."""
        return (self.a * self.a - self.b * self.b) / (self.a * self.a)

    @property
    def n(self) -> float:
        """Third flattening."""
        return (self.a - self.b) / (self.a + self.b)


def radius_of_curvature_prime_vertical(
    latitude_rad: float,
    ellipsoid: Ellipsoid
) -> float:
    """Compute the radius of curvature in the prime vertical.

    Parameters
    ----------
    latitude_rad : float
        Geodetic latitude in radians.
    ellipsoid : Ellipsoid
        Reference ellipsoid.

    Returns
    -------
    float
        Radius of curvature ν in meters.

    Notes
    -----
    ν = a / (1 - e² sin²φ)^(1/2)
    """
    sin_lat = np.sin(latitude_rad)
    return ellipsoid.a / np.sqrt(1.0 - ellipsoid.e2 * sin_lat * sin_lat)


def radius_of_curvature_meridian(
    latitude_rad: float,
    ellipsoid: Ellipsoid
) -> float:
    """Compute the radius of curvature in the meridian plane.

    Parameters
    ----------
    latitude_rad : float
        Geodetic latitude in radians.
    ellipsoid : Ellipsoid
        Reference ellipsoid.

    Returns
    -------
    float
        Radius of curvature ρ in meters.

    Notes
    -----
    ρ = a(1 - e²) / (1 - e² sin²φ)^(3/2)
    """
    sin_lat = np.sin(latitude_rad)
    denominator = (1.0 - ellipsoid.e2 * sin_lat * sin_lat) ** 1.5
    return ellipsoid.a * (1.0 - ellipsoid.e2) / denominator


def lat_lon_to_cartesian(point: LatLon, ellipsoid: Ellipsoid) -> Cartesian:
    """Convert geodetic coordinates to geocentric cartesian coordinates.

    Parameters
    ----------
    point : LatLon
        Geodetic position (radians, meters).
    ellipsoid : Ellipsoid
        Ellipsoid the position is expressed on.

    Returns
    -------
    Cartesian
        (x, y, z) in meters.

    Notes
    -----
    x = (ν + h) cosφ cosλ
    y = (ν + h) cosφ sinλ
    z = ((1 - e²)ν + h) sinφ
    """
    sin_lat = np.sin(point.latitude)
    cos_lat = np.cos(point.latitude)
    sin_lon = np.sin(point.longitude)
    cos_lon = np.cos(point.longitude)

    e2 = ellipsoid.e2
    nu = radius_of_curvature_prime_vertical(point.latitude, ellipsoid)

    x = (nu + point.height) * cos_lat * cos_lon
    y = (nu + point.height) * cos_lat * sin_lon
    z = ((1.0 - e2) * nu + point.height) * sin_lat

    return Cartesian(x=float(x), y=float(y), z=float(z))


def cartesian_to_lat_lon(
    point: Cartesian,
    ellipsoid: Ellipsoid,
    precision_m: float = GeodeticConstants.CARTESIAN_PRECISION.value,
    max_iterations: int = GeodeticConstants.MAX_ITERATIONS.value
) -> LatLon:
    """Convert geocentric cartesian coordinates to geodetic coordinates.

    Uses Bowring-style fixed-point iteration on the latitude.

    Parameters
    ----------
    point : Cartesian
        Geocentric position in meters.
    ellipsoid : Ellipsoid
        Ellipsoid to express the result on.
    precision_m : float
        Stop once the latitude moves by less than this distance on the
        ground (converted to radians by dividing by the semi-major axis).
    max_iterations : int
        Iteration cap.

    Returns
    -------
    LatLon
        Geodetic position (radians, meters).

    Raises
    ------
    ValueError
        If `max_iterations` is less than 1 or `precision_m` is not positive.
    ConvergenceError
        If the latitude has not settled after `max_iterations` steps.

    Notes
    -----
    Points on or near the polar axis are resolved directly, as the
    latitude there is ±90° and the height formula p/cosφ is undefined.
    """
    if max_iterations < 1:
        raise ValueError(f"max_iterations must be at least 1, got {max_iterations}")
    if precision_m <= 0:
        raise ValueError(f"precision_m must be positive, got {precision_m}")

    precision = precision_m / ellipsoid.a
    e2 = ellipsoid.e2

    longitude = np.arctan2(point.y, point.x)

    # Distance from the polar axis
    p = np.sqrt(point.x * point.x + point.y * point.y)

    if p < GeodeticConstants.POLAR_AXIS_THRESHOLD.value:
        latitude = np.pi / 2 if point.z >= 0 else -np.pi / 2
        height = np.abs(point.z) - ellipsoid.b
        return LatLon(latitude=float(latitude), longitude=float(longitude), height=float(height))

    phi = np.arctan2(point.z, p * (1.0 - e2))
    phi_prev = 2.0 * np.pi

    iterations = 0
    while np.abs(phi - phi_prev) > precision:
        if iterations >= max_iterations:
            residual = float(np.abs(phi - phi_prev))
            logger.error(
                f"Latitude did not converge after {iterations} iterations "
                f"(residual {residual:.3e} rad, tolerance {precision:.3e} rad)"
            )
            raise ConvergenceError(
                f"cartesian_to_lat_lon did not converge for {point} "
                f"within {max_iterations} iterations",
                iterations=iterations,
                residual=residual,
            )
        nu = radius_of_curvature_prime_vertical(phi, ellipsoid)
        phi_prev = phi
        phi = np.arctan2(point.z + e2 * nu * np.sin(phi), p)
        iterations += 1

    logger.debug(f"Latitude converged in {iterations} iterations")

    nu = radius_of_curvature_prime_vertical(phi, ellipsoid)
    height = p / np.cos(phi) - nu

    return LatLon(latitude=float(phi), longitude=float(longitude), height=float(height))
