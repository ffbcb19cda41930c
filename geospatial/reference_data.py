"""
Published Datum, Projection and Grid Parameters.

Reference ellipsoids, Helmert parameter sets, transverse Mercator grid
definitions and grid letterings for Great Britain and Ireland.

References
----------
- Ordnance Survey (2020). A guide to coordinate systems in Great Britain.
  Annex A (ellipsoids, projections) and Section 6.6 (WGS84 -> OSGB36).
- Ordnance Survey Ireland. The Irish Grid (TM75 parameters).
- NIMA TR8350.2, Third Edition, 2000 (WGS84).
"""

from geospatial.coordinate_models import Ellipsoid
from geospatial.datum_transforms import Helmert
from geospatial.grid_reference import Grid
from geospatial.projections import TransverseMercatorProjection

# =========================================================================
# Ellipsoids
# =========================================================================

AIRY_1830 = Ellipsoid(a=6_377_563.396, b=6_356_256.909, name="Airy 1830")

AIRY_1830_MODIFIED = Ellipsoid(a=6_377_340.189, b=6_356_034.447, name="Airy 1830 modified")

WGS84 = Ellipsoid(a=6_378_137.0, b=6_356_752.314245, name="WGS84")

GRS80 = Ellipsoid(a=6_378_137.0, b=6_356_752.314140, name="GRS80")

# =========================================================================
# Datum Shifts
# Accurate to about 5 m over Great Britain
# =========================================================================

WGS84_TO_OSGB36 = Helmert(
    tx=-446.448, ty=125.157, tz=-542.060,
    rx=-0.1502, ry=-0.2470, rz=-0.8421,
    s=20.4894,
    name="WGS84 -> OSGB36"
)

OSGB36_TO_WGS84 = Helmert(
    tx=446.448, ty=-125.157, tz=542.060,
    rx=0.1502, ry=0.2470, rz=0.8421,
    s=-20.4894,
    name="OSGB36 -> WGS84"
)

# =========================================================================
# Projections
# =========================================================================

NATIONAL_GRID_PROJECTION = TransverseMercatorProjection(
    lat0=49.0,
    lon0=-2.0,
    e0=400_000.0,
    n0=-100_000.0,
    f0=0.9996012717,
    ellipsoid=AIRY_1830,
    name="British National Grid"
)

IRISH_GRID_PROJECTION = TransverseMercatorProjection(
    lat0=53.5,
    lon0=-8.0,
    e0=200_000.0,
    n0=250_000.0,
    f0=1.000035,
    ellipsoid=AIRY_1830_MODIFIED,
    name="Irish Grid"
)

# =========================================================================
# Grid Letterings
# =========================================================================

# Squares SV (south-west of the Scillies) to HP (Shetland)
NATIONAL_GRID = Grid(
    width=7,
    height=13,
    num_digits=2,
    bottom_left_first_char="S",
    name="British National Grid"
)

IRISH_GRID = Grid(
    width=5,
    height=5,
    num_digits=1,
    bottom_left_first_char="V",
    name="Irish Grid"
)
