"""Pytest configuration and fixtures.

Shared reference points taken from the Ordnance Survey guide
"A guide to coordinate systems in Great Britain" (Annexes B and C).
"""

import numpy as np
import pytest

from common.types import EastingNorthing, LatLon

# 52°39'27.2531"N 1°43'4.5177"E on Airy 1830 (OSGB36)
WORKED_EXAMPLE_LAT_DEG = 52.0 + 39.0 / 60.0 + 27.2531 / 3600.0
WORKED_EXAMPLE_LON_DEG = 1.0 + 43.0 / 60.0 + 4.5177 / 3600.0
WORKED_EXAMPLE_HEIGHT = 24.7

WORKED_EXAMPLE_EASTING = 651409.903
WORKED_EXAMPLE_NORTHING = 313177.270


@pytest.fixture
def worked_example_lat_lon():
    """OSGB36 position of the published worked example."""
    return LatLon.from_degrees(
        WORKED_EXAMPLE_LAT_DEG, WORKED_EXAMPLE_LON_DEG, WORKED_EXAMPLE_HEIGHT
    )


@pytest.fixture
def worked_example_eastings_northings():
    """National Grid coordinates of the published worked example."""
    return EastingNorthing(
        easting=WORKED_EXAMPLE_EASTING,
        northing=WORKED_EXAMPLE_NORTHING,
        height=WORKED_EXAMPLE_HEIGHT,
    )


@pytest.fixture
def rng():
    """Seeded random generator for property checks."""
    return np.random.default_rng(20241019)
