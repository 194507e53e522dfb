"""numpy adapter for AffineTransform.

Exposes the 3x3 matrix as an ndarray and transforms (N, 2) point arrays in one
vectorised step. Uses the same row-vector convention as the domain:

    [x' y' 1] = [x y 1] @ M
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike, NDArray

from geometry.affine.errors import PointShapeError, TransformConfigurationError
from geometry.affine.value_objects import AffineTransform
from shared.constants import FIXED_COLUMN

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)


def to_matrix(transform: AffineTransform) -> NDArray[np.float64]:
    """Return the full 3x3 matrix as a new float64 array."""
    return np.array(transform.matrix(), dtype=np.float64).reshape(3, 3)


def from_matrix(matrix: ArrayLike) -> AffineTransform:
    """Build an AffineTransform from a 3x3 matrix.

    Args:
        matrix: 3x3 array whose third column is (0, 0, 1)

    Raises:
        TransformConfigurationError: If the shape is wrong or the third column
            is not (0, 0, 1)
    """
    m = np.asarray(matrix, dtype=np.float64)
    if m.shape != (3, 3):
        raise TransformConfigurationError(f"Expected a 3x3 matrix, got {m.shape}")
    # Exact comparison: anything else is a projective, not affine, matrix
    if tuple(m[:, 2]) != FIXED_COLUMN:
        raise TransformConfigurationError(
            f"Third column must be {FIXED_COLUMN}, got {tuple(m[:, 2])}"
        )
    return AffineTransform.from_coefficients(
        float(m[0, 0]),
        float(m[0, 1]),
        float(m[1, 0]),
        float(m[1, 1]),
        float(m[2, 0]),
        float(m[2, 1]),
    )


def transform_array(
    transform: AffineTransform, points: ArrayLike
) -> NDArray[np.float64]:
    """Transform an (N, 2) array of points.

    Args:
        transform: The transform to apply
        points: Array-like of shape (N, 2); N may be 0

    Returns:
        New (N, 2) float64 array; the input is never modified

    Raises:
        PointShapeError: If points is not of shape (N, 2)
    """
    arr = np.asarray(points, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise PointShapeError(f"Expected an (N, 2) array, got shape {arr.shape}")

    m = to_matrix(transform)
    logger.debug("Transforming %d point(s) with %r", arr.shape[0], transform)
    return arr @ m[:2, :2] + m[2, :2]
