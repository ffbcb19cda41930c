"""Tests for shared constants, units and value types."""

import dataclasses

import numpy as np
import pytest

from common.constants import Constant, GeodeticConstants
from common.types import Cartesian, EastingNorthing, LatLon
from common.units import (
    Q_,
    arcseconds_to_radians,
    degrees_to_radians,
    ppm_to_scale_factor,
)


class TestUnits:
    """Test the pint-backed conversions."""

    def test_arcseconds(self):
        """Test 3600 arc-seconds is one degree."""
        assert arcseconds_to_radians(3600.0) == pytest.approx(np.radians(1.0))

    def test_degrees(self):
        """Test 180 degrees is pi radians."""
        assert degrees_to_radians(180.0) == pytest.approx(np.pi)

    def test_ppm(self):
        """Test the scale multiplier is 1 + s/1e6."""
        assert ppm_to_scale_factor(20.4894) == pytest.approx(1.0000204894)
        assert ppm_to_scale_factor(0.0) == 1.0

    def test_quantity_alias(self):
        """Test the registry converts arc-seconds like the helper."""
        assert Q_(-0.8421, "arcsecond").to("radian").magnitude == pytest.approx(
            arcseconds_to_radians(-0.8421)
        )


class TestConstants:
    """Test the constants registry."""

    @pytest.mark.parametrize(
        "name",
        [
            "CARTESIAN_PRECISION",
            "MAX_ITERATIONS",
            "POLAR_AXIS_THRESHOLD",
            "GRID_SQUARE_SIZE",
            "LETTER_GRID_SIZE",
            "MAX_REFERENCE_DIGITS",
        ],
    )
    def test_tunables_share_one_form(self, name):
        """Test every tunable is a Constant with a unit and a source."""
        constant = getattr(GeodeticConstants, name)

        assert isinstance(constant, Constant)
        assert constant.unit
        assert constant.source
        assert [f.name for f in dataclasses.fields(constant)] == [
            "value", "unit", "source", "description"
        ]

    def test_counts_are_integers(self):
        """Test counts are usable directly as ints, without casting."""
        assert GeodeticConstants.MAX_ITERATIONS.value == 100
        assert isinstance(GeodeticConstants.MAX_ITERATIONS.value, int)
        assert GeodeticConstants.MAX_REFERENCE_DIGITS.value == 10
        assert isinstance(GeodeticConstants.MAX_REFERENCE_DIGITS.value, int)
        assert isinstance(GeodeticConstants.LETTER_GRID_SIZE.value, int)

    def test_grid_square_size(self):
        """Test grid squares are 100 km."""
        assert GeodeticConstants.GRID_SQUARE_SIZE.value == 100_000.0
        assert GeodeticConstants.GRID_SQUARE_SIZE.unit == "m"


class TestTypes:
    """Test the coordinate value types."""

    def test_lat_lon_degrees_round_trip(self):
        """Test from_degrees and to_degrees agree."""
        point = LatLon.from_degrees(52.5, -1.25, 10.0)

        assert point.to_degrees() == pytest.approx((52.5, -1.25))
        assert point.height == 10.0

    def test_lat_lon_not_range_checked(self):
        """Test out-of-range latitudes are left to the caller."""
        assert LatLon(latitude=4.0, longitude=0.0).latitude == 4.0

    def test_values_are_immutable(self):
        """Test that value types cannot be modified."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            Cartesian(1.0, 2.0, 3.0).x = 5.0
        with pytest.raises(dataclasses.FrozenInstanceError):
            EastingNorthing(1.0, 2.0).easting = 5.0

    def test_cartesian_as_array(self):
        """Test the array view of a cartesian point."""
        np.testing.assert_array_equal(Cartesian(1.0, 2.0, 3.0).as_array(), [1.0, 2.0, 3.0])

    def test_default_heights(self):
        """Test heights default to zero."""
        assert LatLon(0.1, 0.2).height == 0.0
        assert EastingNorthing(1.0, 2.0).height == 0.0
