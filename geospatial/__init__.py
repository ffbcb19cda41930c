"""
Geospatial Module for National Grid Coordinate Conversion.

This module provides:
- Ellipsoid <-> geocentric cartesian conversion
- Helmert datum transformation
- Transverse Mercator projection (Redfearn series)
- Alphanumeric grid reference encoding
- Published parameters for the British and Irish grids

A typical GPS fix travels WGS84 lat/lon -> cartesian -> Helmert ->
cartesian -> OSGB36 lat/lon -> easting/northing -> grid reference,
which `wgs84_to_national_grid_ref` does in one call.
"""

from geospatial.coordinate_models import (
    Ellipsoid,
    lat_lon_to_cartesian,
    cartesian_to_lat_lon,
    radius_of_curvature_meridian,
    radius_of_curvature_prime_vertical,
)

from geospatial.datum_transforms import (
    Helmert,
    helmert_transform,
)

from geospatial.projections import (
    TransverseMercatorProjection,
    lat_lon_to_eastings_northings,
)

from geospatial.grid_reference import (
    Grid,
    GridRef,
    eastings_northings_to_grid_ref,
    letter_to_index,
    index_to_letter,
)

from geospatial.reference_data import (
    AIRY_1830,
    AIRY_1830_MODIFIED,
    WGS84,
    GRS80,
    WGS84_TO_OSGB36,
    OSGB36_TO_WGS84,
    NATIONAL_GRID_PROJECTION,
    IRISH_GRID_PROJECTION,
    NATIONAL_GRID,
    IRISH_GRID,
)

from geospatial.conversions import (
    convert_datum,
    wgs84_to_osgb36,
    osgb36_to_wgs84,
    lat_lon_to_grid_ref,
    wgs84_to_national_grid_ref,
)

__all__ = [
    # Coordinate models
    "Ellipsoid",
    "lat_lon_to_cartesian",
    "cartesian_to_lat_lon",
    "radius_of_curvature_meridian",
    "radius_of_curvature_prime_vertical",
    # Datum transforms
    "Helmert",
    "helmert_transform",
    # Projections
    "TransverseMercatorProjection",
    "lat_lon_to_eastings_northings",
    # Grid references
    "Grid",
    "GridRef",
    "eastings_northings_to_grid_ref",
    "letter_to_index",
    "index_to_letter",
    # Reference data
    "AIRY_1830",
    "AIRY_1830_MODIFIED",
    "WGS84",
    "GRS80",
    "WGS84_TO_OSGB36",
    "OSGB36_TO_WGS84",
    "NATIONAL_GRID_PROJECTION",
    "IRISH_GRID_PROJECTION",
    "NATIONAL_GRID",
    "IRISH_GRID",
    # Composed conversions
    "convert_datum",
    "wgs84_to_osgb36",
    "osgb36_to_wgs84",
    "lat_lon_to_grid_ref",
    "wgs84_to_national_grid_ref",
]
