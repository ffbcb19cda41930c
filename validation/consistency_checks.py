"""
Consistency Checks for Coordinate Conversions.

This module verifies that conversion outputs agree with each other and
with the rules of the grid lettering.

Check Categories
----------------
1. Round trips (lat/lon -> cartesian -> lat/lon recovers the input)
2. Datum reversal (forward then reverse Helmert returns near the start)
3. Grid reference form (code length, letters used)
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Any
import numpy as np

from common.constants import GeodeticConstants
from common.logging_config import get_logger
from common.types import Cartesian, LatLon
from geospatial.coordinate_models import (
    Ellipsoid,
    cartesian_to_lat_lon,
    lat_lon_to_cartesian,
)
from geospatial.datum_transforms import Helmert, helmert_transform
from geospatial.grid_reference import SKIPPED_LETTER, Grid, GridRef


@dataclass
class ValidationResult:
    """Result of a validation check.

    Attributes
    ----------
    test_name : str
        Name of the check.
    passed : bool
        Whether the check passed.
    message : str
        Description of result.
    details : dict
        Additional details.
    """
    test_name: str
    passed: bool
    message: str
    details: Dict[str, Any]


class ConsistencyChecker:
    """Checker for internal consistency of coordinate conversions."""

    def __init__(
        self,
        strict_mode: bool = False,
        log_violations: bool = True
    ):
        """Initialize consistency checker.

        Parameters
        ----------
        strict_mode : bool
            If True, raise ValueError on a failed check.
        log_violations : bool
            Whether to log failed checks.
        """
        self.strict_mode = strict_mode
        self.log_violations = log_violations
        self._logger = get_logger("ConsistencyChecker")

    def check_all(
        self,
        point: LatLon,
        ellipsoid: Ellipsoid,
        grid_ref: Optional[GridRef] = None,
        grid: Optional[Grid] = None,
        forward: Optional[Helmert] = None,
        reverse: Optional[Helmert] = None
    ) -> List[ValidationResult]:
        """Run every check that applies to the given inputs.

        Parameters
        ----------
        point : LatLon
            Position on `ellipsoid`.
        ellipsoid : Ellipsoid
            Reference ellipsoid.
        grid_ref : GridRef, optional
            Grid reference to check against `grid`.
        grid : Grid, optional
            Grid lettering for `grid_ref`.
        forward : Helmert, optional
            Datum shift away from `ellipsoid`'s datum.
        reverse : Helmert, optional
            Published shift back. The reversal check runs on `point`'s
            cartesian position when both shifts are given.

        Returns
        -------
        List[ValidationResult]
            Results of all checks.
        """
        results = [self.check_round_trip(point, ellipsoid)]

        if forward is not None and reverse is not None:
            results.append(self.check_helmert_reversal(
                lat_lon_to_cartesian(point, ellipsoid), forward, reverse
            ))

        if grid_ref is not None and grid is not None:
            results.append(self.check_grid_reference(grid_ref, grid))

        return results

    def check_round_trip(
        self,
        point: LatLon,
        ellipsoid: Ellipsoid,
        angle_tolerance: float = 1e-7,
        height_tolerance: float = 0.5
    ) -> ValidationResult:
        """Check that lat/lon -> cartesian -> lat/lon recovers the input.

        Tolerances are in radians and meters.
        """
        recovered = cartesian_to_lat_lon(lat_lon_to_cartesian(point, ellipsoid), ellipsoid)

        d_lat = abs(recovered.latitude - point.latitude)
        # Compare longitudes on the circle
        d_lon = abs(np.arctan2(
            np.sin(recovered.longitude - point.longitude),
            np.cos(recovered.longitude - point.longitude)
        ))
        d_h = abs(recovered.height - point.height)

        passed = d_lat <= angle_tolerance and d_lon <= angle_tolerance and d_h <= height_tolerance

        return self._report(ValidationResult(
            test_name="cartesian_round_trip",
            passed=bool(passed),
            message=f"Round trip on {ellipsoid.name or '<unnamed>'}: "
                    f"dlat={d_lat:.2e} rad, dlon={d_lon:.2e} rad, dh={d_h:.3f} m",
            details={
                'latitude_error_rad': float(d_lat),
                'longitude_error_rad': float(d_lon),
                'height_error_m': float(d_h),
                'angle_tolerance_rad': angle_tolerance,
                'height_tolerance_m': height_tolerance,
            }
        ))

    def check_helmert_reversal(
        self,
        point: Cartesian,
        forward: Helmert,
        reverse: Helmert,
        tolerance: float = 0.05
    ) -> ValidationResult:
        """Check that a forward then reverse datum shift lands near the start.

        The linearised transform is not exactly invertible, so `tolerance`
        (meters) must allow for the few centimetres it leaves behind.
        """
        back = helmert_transform(helmert_transform(point, forward), reverse)
        distance = float(np.linalg.norm(back.as_array() - point.as_array()))

        return self._report(ValidationResult(
            test_name="helmert_reversal",
            passed=distance <= tolerance,
            message=f"{forward.name or 'forward'} then {reverse.name or 'reverse'}: "
                    f"{distance:.4f} m from start",
            details={
                'distance_m': distance,
                'tolerance_m': tolerance,
            }
        ))

    def check_grid_reference(
        self,
        grid_ref: GridRef,
        grid: Grid
    ) -> ValidationResult:
        """Check that a grid reference is well formed for its grid."""
        square = GeodeticConstants.GRID_SQUARE_SIZE.value
        problems = []

        if len(grid_ref.code) != grid.num_digits:
            problems.append(f"code has {len(grid_ref.code)} letters, expected {grid.num_digits}")
        if SKIPPED_LETTER in grid_ref.code:
            problems.append(f"code contains {SKIPPED_LETTER!r}")
        if not grid_ref.code.isalpha() or not grid_ref.code.isupper():
            problems.append("code is not upper-case letters")
        if not 0 <= grid_ref.easting < square:
            problems.append(f"easting {grid_ref.easting} outside its square")
        if not 0 <= grid_ref.northing < square:
            problems.append(f"northing {grid_ref.northing} outside its square")

        return self._report(ValidationResult(
            test_name="grid_reference_form",
            passed=not problems,
            message="; ".join(problems) if problems else f"{grid_ref.code} is well formed",
            details={
                'code': grid_ref.code,
                'problems': problems,
            }
        ))

    def _report(self, result: ValidationResult) -> ValidationResult:
        """Log and, in strict mode, raise on a failed check."""
        if not result.passed:
            if self.log_violations:
                self._logger.warning(f"CHECK FAILED | {result.test_name} | {result.message}")
            if self.strict_mode:
                raise ValueError(f"{result.test_name} failed: {result.message}")
        return result
