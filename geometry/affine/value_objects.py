"""Affine Bounded Context - Value Objects.

AffineTransform maps 2D coordinates to other 2D coordinates. The field set is
fixed by Pydantic at class definition: unknown names are rejected at
construction time and no attribute can be added afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from geometry.affine.errors import (
    NotATransformError,
    PointShapeError,
    TransformConfigurationError,
    UnknownCoefficientError,
)
from geometry.affine.services import (
    Coefficients,
    apply_to_point,
    iter_pairs,
    matrix_multiply,
    rotation_coefficients,
    scale_coefficients,
    translation_coefficients,
)
from shared.constants import COEFFICIENT_NAMES, FIXED_COLUMN

# Module-level logger (reused across all instances)
logger = logging.getLogger(__name__)


class AffineTransform(BaseModel):
    """2D affine transformation (mutable Value Object).

    Represents the 3x3 matrix

        [ m11 m21 0 ]
        [ m12 m22 0 ]
        [ tx  ty  1 ]

    with a fixed third column. A new instance is the identity transform unless
    coefficients are overridden by keyword:

        >>> t = AffineTransform(tx=10, ty=15)

    Builders (scale, rotate, translate, concatenate) compose a new
    transformation on top of the current state, mutate the instance in place
    and return it, so calls can be chained:

        >>> AffineTransform().translate(10, 0).rotate(90).transform(0, 0)

    rotates the translated origin, giving approximately (0.0, 10.0).

    Thread safety: no internal locking. Concurrent read-only use is safe;
    mutating a shared instance needs external synchronization.
    """

    m11: float = 1.0
    m12: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    model_config = ConfigDict(extra="forbid")

    def __init__(self, **overrides: float) -> None:
        """Create a transform, identity unless coefficients are overridden.

        Args:
            **overrides: Any subset of m11, m12, m21, m22, tx, ty

        Raises:
            UnknownCoefficientError: If a name is not one of the six coefficients
            TransformConfigurationError: If a value is not a number
        """
        unknown = set(overrides).difference(COEFFICIENT_NAMES)
        if unknown:
            raise UnknownCoefficientError(unknown)
        try:
            super().__init__(**overrides)
        except ValidationError as exc:
            raise TransformConfigurationError(
                f"Invalid coefficient value: {exc}"
            ) from exc

    def __setattr__(self, name: str, value: Any) -> None:
        # Pydantic lets underscore names through; the field set stays closed
        if name not in COEFFICIENT_NAMES:
            raise ValueError(f'"{type(self).__name__}" object has no field "{name}"')
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        raise ValueError(
            f'"{type(self).__name__}" object does not allow removing field "{name}"'
        )

    # ---------------------------------------------------------------------
    # Factories
    # ---------------------------------------------------------------------
    @classmethod
    def identity(cls) -> "AffineTransform":
        return cls()

    @classmethod
    def from_coefficients(
        cls,
        m11: float,
        m12: float,
        m21: float,
        m22: float,
        tx: float,
        ty: float,
    ) -> "AffineTransform":
        """Build a transform from the six coefficients in positional order."""
        return cls(m11=m11, m12=m12, m21=m21, m22=m22, tx=tx, ty=ty)

    # ---------------------------------------------------------------------
    # Matrix State
    # ---------------------------------------------------------------------
    def coefficients(self) -> Coefficients:
        """Return (m11, m12, m21, m22, tx, ty)."""
        return (self.m11, self.m12, self.m21, self.m22, self.tx, self.ty)

    def set_coefficients(
        self,
        m11: float,
        m12: float,
        m21: float,
        m22: float,
        tx: float,
        ty: float,
    ) -> "AffineTransform":
        """Overwrite all six coefficients. Returns self."""
        self.m11 = m11
        self.m12 = m12
        self.m21 = m21
        self.m22 = m22
        self.tx = tx
        self.ty = ty
        return self

    def matrix(self) -> tuple[float, ...]:
        """Return the full 3x3 matrix as nine values in row-major order.

        The fixed third column is interleaved:
        (m11, m12, 0, m21, m22, 0, tx, ty, 1).
        """
        c0, c1, c2 = FIXED_COLUMN
        return (
            self.m11, self.m12, c0,
            self.m21, self.m22, c1,
            self.tx, self.ty, c2,
        )  # fmt: skip

    def concatenate_coefficients(
        self,
        m11: float,
        m12: float,
        m21: float,
        m22: float,
        tx: float,
        ty: float,
    ) -> "AffineTransform":
        """Compose the given coefficients on top of the current state."""
        product = matrix_multiply(self.coefficients(), (m11, m12, m21, m22, tx, ty))
        return self.set_coefficients(*product)

    # ---------------------------------------------------------------------
    # Builders
    # ---------------------------------------------------------------------
    def scale(self, sx: float, sy: float | None = None) -> "AffineTransform":
        """Add a scale about the origin; ``sy`` defaults to ``sx``."""
        if sy is None:
            sy = sx
        return self.concatenate_coefficients(*scale_coefficients(sx, sy))

    def translate(self, dx: float, dy: float) -> "AffineTransform":
        return self.concatenate_coefficients(*translation_coefficients(dx, dy))

    def rotate(self, degrees: float) -> "AffineTransform":
        """Add a rotation about the origin.

        With no other transformation active, positive angles rotate
        counterclockwise in a y-up coordinate system.
        """
        return self.concatenate_coefficients(*rotation_coefficients(degrees))

    def concatenate(
        self, transform: "AffineTransform", *more: "AffineTransform"
    ) -> "AffineTransform":
        """Combine one or more transforms with this one, left to right.

        Every argument is checked before any is applied, so a rejected call
        leaves this instance unchanged.

        Raises:
            NotATransformError: If any argument is not an AffineTransform
        """
        others = (transform, *more)
        for other in others:
            if not isinstance(other, AffineTransform):
                raise NotATransformError(other)

        logger.debug("Concatenating %d transform(s) onto %r", len(others), self)
        for other in others:
            self.concatenate_coefficients(*other.coefficients())
        return self

    # ---------------------------------------------------------------------
    # Point Transformation
    # ---------------------------------------------------------------------
    def transform(self, *coordinates: float) -> tuple[float, ...]:
        """Transform a flat sequence of x/y coordinates.

        Args:
            *coordinates: x1, y1, x2, y2, ...

        Returns:
            The transformed coordinates in the same order and shape

        Raises:
            PointShapeError: If an odd number of values is given
        """
        c = self.coefficients()
        result: list[float] = []
        for x, y in iter_pairs(coordinates):
            result.extend(apply_to_point(c, x, y))
        return tuple(result)

    def transform_points(
        self, points: Iterable[Sequence[float]]
    ) -> list[tuple[float, float]]:
        """Transform an iterable of (x, y) pairs.

        Raises:
            PointShapeError: If any point does not hold exactly two values
        """
        c = self.coefficients()
        result = []
        for index, point in enumerate(points):
            if len(point) != 2:
                raise PointShapeError(
                    f"Point {index} must have 2 values, got {len(point)}",
                    count=len(point),
                )
            result.append(apply_to_point(c, point[0], point[1]))
        return result
