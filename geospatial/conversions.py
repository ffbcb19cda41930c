"""
Composed conversions between datums, grids and grid references.

Each function chains the single-step transforms for a common case; the
single steps remain available for anything else.
"""

from typing import Optional

from common.types import LatLon
from geospatial.coordinate_models import (
    Ellipsoid,
    cartesian_to_lat_lon,
    lat_lon_to_cartesian,
)
from geospatial.datum_transforms import Helmert, helmert_transform
from geospatial.grid_reference import Grid, GridRef, eastings_northings_to_grid_ref
from geospatial.projections import TransverseMercatorProjection, lat_lon_to_eastings_northings
from geospatial.reference_data import (
    AIRY_1830,
    NATIONAL_GRID,
    NATIONAL_GRID_PROJECTION,
    OSGB36_TO_WGS84,
    WGS84,
    WGS84_TO_OSGB36,
)


def convert_datum(
    point: LatLon,
    source: Ellipsoid,
    helmert: Helmert,
    target: Ellipsoid
) -> LatLon:
    """Move a geodetic position from one datum to another.

    Parameters
    ----------
    point : LatLon
        Position on the `source` ellipsoid.
    source : Ellipsoid
        Ellipsoid of the source datum.
    helmert : Helmert
        Shift from the source datum to the target datum.
    target : Ellipsoid
        Ellipsoid of the target datum.

    Returns
    -------
    LatLon
        Position on the `target` ellipsoid.
    """
    cartesian = lat_lon_to_cartesian(point, source)
    shifted = helmert_transform(cartesian, helmert)
    return cartesian_to_lat_lon(shifted, target)


def wgs84_to_osgb36(point: LatLon) -> LatLon:
    """Convert a WGS84 position to OSGB36 (Airy 1830)."""
    return convert_datum(point, WGS84, WGS84_TO_OSGB36, AIRY_1830)


def osgb36_to_wgs84(point: LatLon) -> LatLon:
    """Convert an OSGB36 (Airy 1830) position to WGS84."""
    return convert_datum(point, AIRY_1830, OSGB36_TO_WGS84, WGS84)


def lat_lon_to_grid_ref(
    point: LatLon,
    projection: TransverseMercatorProjection,
    grid: Grid
) -> Optional[GridRef]:
    """Project a position and encode it as a grid reference.

    `point` must already be on the projection's ellipsoid. Returns None
    when the projected position falls outside the grid.
    """
    return eastings_northings_to_grid_ref(
        lat_lon_to_eastings_northings(point, projection),
        grid
    )


def wgs84_to_national_grid_ref(point: LatLon) -> Optional[GridRef]:
    """Convert a WGS84 position (e.g. from GPS) to a British National Grid reference."""
    return lat_lon_to_grid_ref(
        wgs84_to_osgb36(point),
        NATIONAL_GRID_PROJECTION,
        NATIONAL_GRID
    )
