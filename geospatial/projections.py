"""
Transverse Mercator Projection for National Grids.

This module projects geodetic latitude/longitude onto the plane of a
national grid using the Redfearn series expansion of the transverse
Mercator projection, as published by the Ordnance Survey.

Scientific Context
------------------
Domain: Cartography, mathematical geodesy
Model: Conformal transverse Mercator, series expansion to sixth order
in the longitude difference

Why a Series Expansion
----------------------
1. National grids are narrow in longitude, so a series in Δλ truncated
   at Δλ⁶ reproduces the exact projection to about a millimetre.
2. The published national-grid coordinates are defined by this series,
   so matching it term for term matches official grid references.

Known Limitation
----------------
There is no zone-validity check. Far from the central meridian the
truncated series degrades; the result stays finite but its error grows
quickly beyond a few degrees of longitude.

References
----------
- Ordnance Survey (2020). A guide to coordinate systems in Great Britain.
  Annex C.
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395.
"""

from dataclasses import dataclass
import numpy as np

from common.types import EastingNorthing, LatLon
from common.units import degrees_to_radians
from geospatial.coordinate_models import Ellipsoid


@dataclass(frozen=True)
class TransverseMercatorProjection:
    """Definition of a transverse Mercator grid.

    Parameters
    ----------
    lat0 : float
        Latitude of the true origin in DEGREES.
    lon0 : float
        Longitude of the true origin (central meridian) in DEGREES.
    e0 : float
        Easting of the true origin in meters (false easting).
    n0 : float
        Northing of the true origin in meters (false northing).
    f0 : float
        Scale factor on the central meridian.
    ellipsoid : Ellipsoid
        Ellipsoid the input latitude/longitude are expressed on.
    name : str
        Identifier for the projection.
    """
    lat0: float
    lon0: float
    e0: float
    n0: float
    f0: float
    ellipsoid: Ellipsoid
    name: str = ""

    def __post_init__(self):
        """Validate the scale factor."""
        if not self.f0 > 0:
            raise ValueError(f"Scale factor must be positive, got f0={self.f0}")

    @property
    def proj4_string(self) -> str:
        """PROJ.4 definition string."""
        return (
            f"+proj=tmerc +lat_0={self.lat0} +lon_0={self.lon0} "
            f"+k={self.f0} +x_0={self.e0} +y_0={self.n0} "
            f"+a={self.ellipsoid.a} +b={self.ellipsoid.b} +units=m +no_defs"
        )


def _meridional_arc(
    lat: float,
    lat0: float,
    ellipsoid: Ellipsoid,
    f0: float
) -> float:
    """Scaled meridian distance from latitude `lat0` to `lat` in meters."""
    n = ellipsoid.n
    n2 = n * n
    n3 = n2 * n

    Ma = (1.0 + n + (5.0 / 4.0) * n2 + (5.0 / 4.0) * n3) * (lat - lat0)
    Mb = (3.0 * n + 3.0 * n2 + (21.0 / 8.0) * n3) * np.sin(lat - lat0) * np.cos(lat + lat0)
    Mc = ((15.0 / 8.0) * n2 + (15.0 / 8.0) * n3) * np.sin(2.0 * (lat - lat0)) * np.cos(2.0 * (lat + lat0))
    Md = (35.0 / 24.0) * n3 * np.sin(3.0 * (lat - lat0)) * np.cos(3.0 * (lat + lat0))

    return ellipsoid.b * f0 * (Ma - Mb + Mc - Md)


def lat_lon_to_eastings_northings(
    point: LatLon,
    projection: TransverseMercatorProjection
) -> EastingNorthing:
    """Project a geodetic position onto a transverse Mercator grid.

    Parameters
    ----------
    point : LatLon
        Position on the projection's ellipsoid (radians, meters).
    projection : TransverseMercatorProjection
        Grid definition.

    Returns
    -------
    EastingNorthing
        Grid coordinates in meters. Height passes through unchanged.

    Notes
    -----
    N = I + II·Δλ² + III·Δλ⁴ + IIIA·Δλ⁶
    E = E0 + IV·Δλ + V·Δλ³ + VI·Δλ⁵

    where Δλ is the longitude difference from the central meridian and
    the terms follow the Ordnance Survey naming.
    """
    lat0 = degrees_to_radians(projection.lat0)
    lon0 = degrees_to_radians(projection.lon0)
    f0 = projection.f0
    a = projection.ellipsoid.a
    e2 = 1.0 - (projection.ellipsoid.b ** 2) / (a * a)

    lat = point.latitude
    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)

    # Transverse radius of curvature
    nu = a * f0 / np.sqrt(1.0 - e2 * sin_lat * sin_lat)
    # Meridional radius of curvature
    rho = a * f0 * (1.0 - e2) / (1.0 - e2 * sin_lat * sin_lat) ** 1.5
    eta2 = nu / rho - 1.0

    M = _meridional_arc(lat, lat0, projection.ellipsoid, f0)

    cos3_lat = cos_lat ** 3
    cos5_lat = cos_lat ** 5
    tan2_lat = np.tan(lat) ** 2
    tan4_lat = tan2_lat * tan2_lat

    I = M + projection.n0
    II = (nu / 2.0) * sin_lat * cos_lat
    III = (nu / 24.0) * sin_lat * cos3_lat * (5.0 - tan2_lat + 9.0 * eta2)
    IIIA = (nu / 720.0) * sin_lat * cos5_lat * (61.0 - 58.0 * tan2_lat + tan4_lat)
    IV = nu * cos_lat
    V = (nu / 6.0) * cos3_lat * (nu / rho - tan2_lat)
    VI = (nu / 120.0) * cos5_lat * (
        5.0 - 18.0 * tan2_lat + tan4_lat + 14.0 * eta2 - 58.0 * tan2_lat * eta2
    )

    d_lon = point.longitude - lon0

    northing = I + II * d_lon ** 2 + III * d_lon ** 4 + IIIA * d_lon ** 6
    easting = projection.e0 + IV * d_lon + V * d_lon ** 3 + VI * d_lon ** 5

    return EastingNorthing(
        easting=float(easting),
        northing=float(northing),
        height=point.height
    )
