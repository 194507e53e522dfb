"""Affine Bounded Context - Error Hierarchy.

Custom exceptions for affine transform operations. Each error also derives
from the builtin exception a caller would expect (ValueError, TypeError) so
generic handlers keep working.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class AffineTransformError(Exception):
    """Base error for affine transform operations."""


# ---------------------------------------------------------------------------
# Construction Errors
# ---------------------------------------------------------------------------
class TransformConfigurationError(AffineTransformError, ValueError):
    """Construction arguments do not describe a valid transform."""


class UnknownCoefficientError(TransformConfigurationError):
    """Constructor received names outside the fixed coefficient set.

    Attributes:
        names: The offending names, sorted
    """

    def __init__(self, names: Iterable[str]) -> None:
        self.names = tuple(sorted(names))
        super().__init__(f"Unknown coefficient name(s): {', '.join(self.names)}")


# ---------------------------------------------------------------------------
# Argument Errors
# ---------------------------------------------------------------------------
class NotATransformError(AffineTransformError, TypeError):
    """Argument is not a transform of the expected type.

    Attributes:
        value: The rejected argument
    """

    def __init__(self, value: Any, expected: str = "AffineTransform") -> None:
        self.value = value
        super().__init__(
            f"Expecting argument of type {expected}, got {type(value).__name__}"
        )


class PointShapeError(AffineTransformError, ValueError):
    """Coordinates cannot be split into (x, y) pairs.

    Attributes:
        count: Number of values received, or None for array inputs
    """

    def __init__(self, message: str, count: int | None = None) -> None:
        self.count = count
        super().__init__(message)


class CoefficientShapeError(AffineTransformError, ValueError):
    """Coefficient tuple does not hold exactly six values.

    Attributes:
        count: Number of values received
    """

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Expected 6 coefficients, got {count}")
