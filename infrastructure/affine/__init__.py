"""Infrastructure adapters for the affine bounded context.

Converts AffineTransform to and from numpy arrays and ``affine.Affine``.
"""

from .affine_adapter import from_affine, to_affine
from .numpy_adapter import from_matrix, to_matrix, transform_array

__all__ = ["from_affine", "from_matrix", "to_affine", "to_matrix", "transform_array"]
