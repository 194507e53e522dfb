"""Planar Geometry Domain Layer.

This package contains the core geometry logic organized by bounded contexts:
- affine: 2D affine transformations (translate, rotate, scale, compose)
"""

# Imports alphabetized per project style (isort)
from geometry import affine

__all__ = ["affine"]
