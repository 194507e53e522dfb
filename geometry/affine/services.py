"""Affine Bounded Context - Domain Services.

Pure matrix algebra on six-tuples of coefficients. No state lives here; the
AffineTransform value object delegates its arithmetic to these functions.

All six-tuples use the layout (m11, m12, m21, m22, tx, ty) of the 3x3 matrix

    [ m11 m21 0 ]
    [ m12 m22 0 ]
    [ tx  ty  1 ]

whose third column is fixed to (0, 0, 1).
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence

from geometry.affine.errors import CoefficientShapeError, PointShapeError
from shared.constants import COEFFICIENT_COUNT

Coefficients = tuple[float, float, float, float, float, float]


# ---------------------------------------------------------------------------
# Matrix Product
# ---------------------------------------------------------------------------
def matrix_multiply(a: Sequence[float], b: Sequence[float]) -> Coefficients:
    """Multiply two 3x3 matrices that share the fixed (0, 0, 1) third column.

    Row-vector convention: a point is transformed by ``a`` first, then by
    ``b``. When concatenating, ``a`` is the current state and ``b`` the newest
    transformation.

    Args:
        a: Six coefficients applied first
        b: Six coefficients applied second

    Returns:
        The six coefficients of the product

    Raises:
        CoefficientShapeError: If either argument does not hold six values
    """
    if len(a) != COEFFICIENT_COUNT:
        raise CoefficientShapeError(len(a))
    if len(b) != COEFFICIENT_COUNT:
        raise CoefficientShapeError(len(b))

    a11, a12, a21, a22, a31, a32 = a
    b11, b12, b21, b22, b31, b32 = b

    return (
        a11 * b11 + a12 * b21,
        a11 * b12 + a12 * b22,
        a21 * b11 + a22 * b21,
        a21 * b12 + a22 * b22,
        a31 * b11 + a32 * b21 + b31,
        a31 * b12 + a32 * b22 + b32,
    )


# ---------------------------------------------------------------------------
# Elementary Transformations
# ---------------------------------------------------------------------------
def scale_coefficients(sx: float, sy: float) -> Coefficients:
    """Coefficients of an axis-aligned scale about the origin."""
    return (sx, 0.0, 0.0, sy, 0.0, 0.0)


def translation_coefficients(dx: float, dy: float) -> Coefficients:
    """Coefficients of a pure offset."""
    return (1.0, 0.0, 0.0, 1.0, dx, dy)


def rotation_coefficients(degrees: float) -> Coefficients:
    """Coefficients of a rotation about the origin.

    Positive angles rotate counterclockwise in a y-up coordinate system
    (clockwise when y points down, as in pixel coordinates).
    """
    rad = math.radians(degrees)
    cos_a = math.cos(rad)
    sin_a = math.sin(rad)
    return (cos_a, sin_a, -sin_a, cos_a, 0.0, 0.0)


# ---------------------------------------------------------------------------
# Point Helpers
# ---------------------------------------------------------------------------
def iter_pairs(coordinates: Sequence[float]) -> Iterator[tuple[float, float]]:
    """Yield consecutive (x, y) pairs from a flat coordinate sequence.

    Raises:
        PointShapeError: If the sequence has an odd number of values
    """
    count = len(coordinates)
    if count % 2:
        raise PointShapeError(
            f"Expected an even number of coordinates, got {count}", count=count
        )
    for i in range(0, count, 2):
        yield coordinates[i], coordinates[i + 1]


def apply_to_point(c: Sequence[float], x: float, y: float) -> tuple[float, float]:
    """Map a single point through the coefficients ``c``."""
    m11, m12, m21, m22, tx, ty = c
    return (m11 * x + m21 * y + tx, m12 * x + m22 * y + ty)
