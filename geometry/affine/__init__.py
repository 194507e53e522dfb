"""Affine Bounded Context.

Responsible for 2D affine transformations:
- Value Objects: AffineTransform
- Services: matrix_multiply, scale/translation/rotation coefficients
"""

from geometry.affine.errors import (
    AffineTransformError,
    CoefficientShapeError,
    NotATransformError,
    PointShapeError,
    TransformConfigurationError,
    UnknownCoefficientError,
)
from geometry.affine.services import matrix_multiply
from geometry.affine.value_objects import AffineTransform

__all__ = [
    "AffineTransform",
    "AffineTransformError",
    "CoefficientShapeError",
    "NotATransformError",
    "PointShapeError",
    "TransformConfigurationError",
    "UnknownCoefficientError",
    "matrix_multiply",
]
