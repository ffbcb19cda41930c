"""
Validation Framework for National Grid Coordinate Conversion.

This module provides consistency checks over the conversions.
"""

from validation.consistency_checks import (
    ConsistencyChecker,
    ValidationResult,
)

__all__ = [
    "ConsistencyChecker",
    "ValidationResult",
]
