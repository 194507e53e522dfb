"""Root pytest configuration for all tests.

Provides transform fixtures shared across bounded-context and adapter tests.
The project root is put on sys.path by ``pythonpath`` in pyproject.toml, so
tests import ``geometry.*`` and ``infrastructure.*`` directly.
"""

from __future__ import annotations

import pytest

from geometry.affine.value_objects import AffineTransform


@pytest.fixture
def identity() -> AffineTransform:
    """Fresh identity transform."""
    return AffineTransform()


@pytest.fixture
def skewed() -> AffineTransform:
    """Transform with every coefficient non-trivial (no symmetry to hide bugs)."""
    return AffineTransform(m11=2.0, m12=0.5, m21=-1.5, m22=3.0, tx=7.0, ty=-4.0)
