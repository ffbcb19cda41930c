"""Tests for the transverse Mercator projection.

This test module verifies:
1. The Ordnance Survey worked example (Annex C)
2. Behaviour at the true origin
3. Northing monotonicity along a meridian
4. Agreement with PROJ's transverse Mercator
"""

import numpy as np
import pytest
from pyproj import CRS, Transformer

from common.types import LatLon
from geospatial.projections import TransverseMercatorProjection, lat_lon_to_eastings_northings
from geospatial.reference_data import (
    AIRY_1830,
    IRISH_GRID_PROJECTION,
    NATIONAL_GRID_PROJECTION,
)


class TestNationalGridProjection:
    """Test the projection with British National Grid parameters."""

    def test_worked_example(self, worked_example_lat_lon, worked_example_eastings_northings):
        """Test the published 651409.903 E, 313177.270 N example."""
        result = lat_lon_to_eastings_northings(worked_example_lat_lon, NATIONAL_GRID_PROJECTION)

        assert result.easting == pytest.approx(worked_example_eastings_northings.easting, abs=0.01)
        assert result.northing == pytest.approx(worked_example_eastings_northings.northing, abs=0.01)

    def test_height_passes_through(self, worked_example_lat_lon):
        """Test that the ellipsoidal height is carried over unchanged."""
        result = lat_lon_to_eastings_northings(worked_example_lat_lon, NATIONAL_GRID_PROJECTION)

        assert result.height == worked_example_lat_lon.height

    def test_true_origin(self):
        """Test that the true origin maps to (E0, N0)."""
        origin = LatLon.from_degrees(49.0, -2.0)
        result = lat_lon_to_eastings_northings(origin, NATIONAL_GRID_PROJECTION)

        assert result.easting == pytest.approx(400_000.0, abs=1e-6)
        assert result.northing == pytest.approx(-100_000.0, abs=1e-6)

    def test_east_west_symmetry(self):
        """Test that equal offsets either side of the meridian mirror the easting."""
        east = lat_lon_to_eastings_northings(LatLon.from_degrees(54.0, 0.5), NATIONAL_GRID_PROJECTION)
        west = lat_lon_to_eastings_northings(LatLon.from_degrees(54.0, -4.5), NATIONAL_GRID_PROJECTION)

        assert east.easting - 400_000.0 == pytest.approx(400_000.0 - west.easting, abs=1e-6)
        assert east.northing == pytest.approx(west.northing, abs=1e-6)

    @pytest.mark.parametrize("lon_deg", [-6.0, -2.0, 1.5])
    def test_northing_increases_with_latitude(self, lon_deg):
        """Test that northing rises monotonically going north."""
        northings = [
            lat_lon_to_eastings_northings(
                LatLon.from_degrees(lat_deg, lon_deg), NATIONAL_GRID_PROJECTION
            ).northing
            for lat_deg in np.arange(40.0, 62.0, 0.25)
        ]

        assert np.all(np.diff(northings) > 0)

    @pytest.mark.parametrize(
        "lat_deg,lon_deg",
        [
            (50.0, -5.0),
            (51.5074, -0.1278),
            (55.9533, -3.1883),
            (57.5, -4.2),
            (52.657570306, 1.717921583),
            (60.15, -1.15),
        ],
    )
    def test_agrees_with_proj(self, lat_deg, lon_deg):
        """Test agreement with PROJ's tmerc on the same definition."""
        geographic = CRS.from_proj4(
            f"+proj=longlat +a={AIRY_1830.a} +b={AIRY_1830.b} +no_defs"
        )
        projected = CRS.from_proj4(NATIONAL_GRID_PROJECTION.proj4_string)
        transformer = Transformer.from_crs(geographic, projected, always_xy=True)
        expected_e, expected_n = transformer.transform(lon_deg, lat_deg)

        result = lat_lon_to_eastings_northings(
            LatLon.from_degrees(lat_deg, lon_deg), NATIONAL_GRID_PROJECTION
        )

        assert result.easting == pytest.approx(expected_e, abs=0.01)
        assert result.northing == pytest.approx(expected_n, abs=0.01)


class TestProjectionDefinition:
    """Test projection parameter handling."""

    def test_irish_grid_true_origin(self):
        """Test the Irish grid origin maps to its false origin offsets."""
        result = lat_lon_to_eastings_northings(LatLon.from_degrees(53.5, -8.0), IRISH_GRID_PROJECTION)

        assert result.easting == pytest.approx(200_000.0, abs=1e-6)
        assert result.northing == pytest.approx(250_000.0, abs=1e-6)

    @pytest.mark.parametrize("f0", [0.0, -0.9996])
    def test_non_positive_scale_rejected(self, f0):
        """Test that f0 <= 0 raises."""
        with pytest.raises(ValueError):
            TransverseMercatorProjection(
                lat0=49.0, lon0=-2.0, e0=400_000.0, n0=-100_000.0, f0=f0, ellipsoid=AIRY_1830
            )

    def test_proj4_string(self):
        """Test the PROJ.4 definition carries every parameter."""
        proj4 = NATIONAL_GRID_PROJECTION.proj4_string

        assert proj4.startswith("+proj=tmerc")
        assert "+lat_0=49.0" in proj4
        assert "+lon_0=-2.0" in proj4
        assert "+k=0.9996012717" in proj4
        assert "+x_0=400000.0" in proj4
        assert "+y_0=-100000.0" in proj4
        assert f"+a={AIRY_1830.a}" in proj4
