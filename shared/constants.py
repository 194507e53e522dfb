"""Single source of truth for affine coefficient layout.

This module defines the coefficient names and identity values used by:
- geometry/affine/value_objects.py (field set and defaults)
- geometry/affine/services.py (tuple length checks)
- tests (expected identity and comparison tolerance)

Location: shared/ (not geometry/) so tests can import it without pulling in
pydantic models.
"""

from __future__ import annotations

# Order matters: every six-tuple in the library uses this layout.
# Matches the first two columns of the 3x3 matrix, read row by row:
#   [ m11 m21 0 ]
#   [ m12 m22 0 ]
#   [ tx  ty  1 ]
COEFFICIENT_NAMES: tuple[str, ...] = ("m11", "m12", "m21", "m22", "tx", "ty")

COEFFICIENT_COUNT: int = len(COEFFICIENT_NAMES)

IDENTITY_COEFFICIENTS: tuple[float, ...] = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

# Fixed third column of the conceptual 3x3 matrix, one value per row
FIXED_COLUMN: tuple[float, float, float] = (0.0, 0.0, 1.0)

# Absolute tolerance for comparing results that pass through sin/cos
DEFAULT_TOLERANCE: float = 1e-9
