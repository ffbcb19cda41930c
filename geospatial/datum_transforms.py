"""
Helmert Datum Transformation.

This module applies the seven-parameter (Helmert) similarity transform
that shifts geocentric cartesian coordinates from one datum to another.

Scientific Context
------------------
Domain: Geodesy, datum transformation
Model: Small-angle seven-parameter similarity transform

The rotations between national and global datums are a few arc-seconds,
so sin(r) ≈ r and cos(r) ≈ 1 and the rotation matrix is linearised. The
transform is then not exactly invertible; the reverse direction is
published as its own parameter set with every sign flipped, which is
accurate to a few centimetres.

References
----------
- Ordnance Survey (2020). A guide to coordinate systems in Great Britain.
  Section 6.2 and Annex B.
"""

from dataclasses import dataclass

from common.types import Cartesian
from common.units import arcseconds_to_radians, ppm_to_scale_factor


@dataclass(frozen=True)
class Helmert:
    """Parameters of a seven-parameter Helmert transform.

    Attributes
    ----------
    tx, ty, tz : float
        Translations in meters.
    rx, ry, rz : float
        Rotations about each axis in ARC-SECONDS.
    s : float
        Scale change in parts per million.
    name : str
        Identifier for the transform (e.g. "WGS84 -> OSGB36").
    """
    tx: float
    ty: float
    tz: float
    rx: float
    ry: float
    rz: float
    s: float
    name: str = ""


def helmert_transform(point: Cartesian, params: Helmert) -> Cartesian:
    """Apply a Helmert transform to a cartesian position.

    Parameters
    ----------
    point : Cartesian
        Position on the source datum (meters).
    params : Helmert
        Transform parameters.

    Returns
    -------
    Cartesian
        Position on the target datum (meters).

    Notes
    -----
    x' = tx + x·s1 − y·rz + z·ry
    y' = ty + x·rz + y·s1 − z·rx
    z' = tz − x·ry + y·rx + z·s1

    with rotations in radians and s1 = 1 + s/10⁶.
    """
    rx = arcseconds_to_radians(params.rx)
    ry = arcseconds_to_radians(params.ry)
    rz = arcseconds_to_radians(params.rz)
    s1 = ppm_to_scale_factor(params.s)

    x, y, z = point.x, point.y, point.z

    return Cartesian(
        x=params.tx + x * s1 - y * rz + z * ry,
        y=params.ty + x * rz + y * s1 - z * rx,
        z=params.tz - x * ry + y * rx + z * s1,
    )
