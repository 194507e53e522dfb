"""Adapter between AffineTransform and the ``affine`` package.

``affine.Affine`` uses the column-vector convention

    | a  b  c |   | x |
    | d  e  f | * | y |
    | 0  0  1 |   | 1 |

while AffineTransform uses row vectors, so the linear part is transposed:

    a = m11, b = m21, c = tx
    d = m12, e = m22, f = ty
"""

from __future__ import annotations

import logging
import math

from affine import Affine

from geometry.affine.errors import NotATransformError, TransformConfigurationError
from geometry.affine.value_objects import AffineTransform

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)


def to_affine(transform: AffineTransform) -> Affine:
    """Convert to an ``affine.Affine`` that maps points identically.

    Raises:
        NotATransformError: If transform is not an AffineTransform
    """
    if not isinstance(transform, AffineTransform):
        raise NotATransformError(transform)
    m11, m12, m21, m22, tx, ty = transform.coefficients()
    return Affine(m11, m21, tx, m12, m22, ty)


def from_affine(value: Affine) -> AffineTransform:
    """Convert an ``affine.Affine`` into a new AffineTransform.

    Raises:
        NotATransformError: If value is not an ``affine.Affine``
        TransformConfigurationError: If any coefficient is NaN or infinite
    """
    if not isinstance(value, Affine):
        raise NotATransformError(value, expected="affine.Affine")

    a, b, c, d, e, f = value.a, value.b, value.c, value.d, value.e, value.f
    if any(math.isnan(v) or math.isinf(v) for v in (a, b, c, d, e, f)):
        raise TransformConfigurationError("Invalid (NaN/Inf) transform values")

    logger.debug("Converting %r to AffineTransform", value)
    return AffineTransform(m11=a, m12=d, m21=b, m22=e, tx=c, ty=f)
