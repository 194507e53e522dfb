"""Tests for AffineTransform builders, concatenation and point transformation.

Worked values assume a y-up coordinate system, where positive rotation angles
turn counterclockwise.
"""

from __future__ import annotations

import logging

import pytest

from geometry.affine.errors import NotATransformError, PointShapeError
from geometry.affine.value_objects import AffineTransform
from shared.constants import DEFAULT_TOLERANCE


# ===========================================================================
# TC-001: Identity
# ===========================================================================
@pytest.mark.parametrize("point", [(0.0, 0.0), (1.5, -2.5), (-1e6, 3e-6)])
def test_identity_maps_point_to_itself(identity, point):
    assert identity.transform(*point) == point


# ===========================================================================
# TC-002: Translation
# ===========================================================================
def test_translate_offsets_origin():
    assert AffineTransform().translate(5, -3).transform(0, 0) == (5, -3)


# ===========================================================================
# TC-003: Scale
# ===========================================================================
def test_scale_independent_axes():
    assert AffineTransform().scale(2, 3).transform(1, 1) == (2, 3)


def test_unit_scale_is_noop(skewed):
    before = skewed.coefficients()

    skewed.scale(1, 1)

    assert skewed.coefficients() == before


def test_scale_single_factor_is_uniform():
    assert AffineTransform().scale(4).transform(1, -2) == (4, -8)


def test_negative_scale_mirrors():
    assert AffineTransform().scale(-1, 1).transform(3, 2) == (-3, 2)


def test_zero_scale_collapses():
    assert AffineTransform().scale(0, 0).transform(3, 2) == (0, 0)


# ===========================================================================
# TC-004: Rotation
# ===========================================================================
def test_rotate_90_is_counterclockwise():
    x, y = AffineTransform().rotate(90).transform(1, 0)

    assert x == pytest.approx(0.0, abs=DEFAULT_TOLERANCE)
    assert y == pytest.approx(1.0, abs=DEFAULT_TOLERANCE)


def test_rotate_negative_is_clockwise():
    x, y = AffineTransform().rotate(-90).transform(1, 0)

    assert (x, y) == pytest.approx((0.0, -1.0), abs=DEFAULT_TOLERANCE)


# ===========================================================================
# TC-005: Composition Order
# ===========================================================================
def test_translate_then_rotate_rotates_translated_point():
    """(0, 0) moves to (10, 0), then turns about the origin to (0, 10)."""
    result = AffineTransform().translate(10, 0).rotate(90).transform(0, 0)

    assert result == pytest.approx((0.0, 10.0), abs=DEFAULT_TOLERANCE)


def test_rotate_then_translate_differs():
    translated_first = AffineTransform().translate(10, 0).rotate(90).transform(0, 0)
    rotated_first = AffineTransform().rotate(90).translate(10, 0).transform(0, 0)

    assert rotated_first == pytest.approx((10.0, 0.0), abs=DEFAULT_TOLERANCE)
    assert translated_first != pytest.approx(rotated_first, abs=DEFAULT_TOLERANCE)


def test_composition_matches_stepwise_mapping(skewed):
    """Adding a step maps every point through the old state, then the step."""
    point = (3.0, -2.0)
    x, y = skewed.transform(*point)
    expected = AffineTransform().rotate(30).transform(x, y)

    skewed.rotate(30)

    assert skewed.transform(*point) == pytest.approx(expected, abs=DEFAULT_TOLERANCE)


# ===========================================================================
# TC-006: Concatenation
# ===========================================================================
def test_concatenate_matches_builder_sequence():
    built = AffineTransform().scale(2, 2).rotate(45)
    combined = AffineTransform().concatenate(
        AffineTransform().scale(2, 2), AffineTransform().rotate(45)
    )

    assert combined.coefficients() == pytest.approx(
        built.coefficients(), abs=DEFAULT_TOLERANCE
    )


def test_concatenate_many_equals_successive_calls(skewed):
    first = AffineTransform().translate(1, 2)
    second = AffineTransform().scale(3, -1)

    at_once = AffineTransform().concatenate(skewed, first, second)
    one_by_one = (
        AffineTransform().concatenate(skewed).concatenate(first).concatenate(second)
    )

    assert at_once.coefficients() == one_by_one.coefficients()


def test_concatenate_does_not_modify_argument(skewed):
    before = skewed.coefficients()

    AffineTransform().rotate(10).concatenate(skewed)

    assert skewed.coefficients() == before


def test_concatenate_with_self_squares_transform():
    t = AffineTransform().translate(2, 3)

    t.concatenate(t)

    assert t.transform(0, 0) == (4, 6)


def test_concatenate_coefficients_is_builder_primitive():
    via_primitive = AffineTransform().concatenate_coefficients(1, 0, 0, 1, 5, -3)
    via_builder = AffineTransform().translate(5, -3)

    assert via_primitive.coefficients() == via_builder.coefficients()


# ===========================================================================
# TC-007: Multi-point Batch
# ===========================================================================
def test_identity_batch_unchanged(identity):
    assert identity.transform(0, 0, 1, 0, 0, 1) == (0, 0, 1, 0, 0, 1)


def test_batch_preserves_order_and_count(skewed):
    result = skewed.transform(1, 1, 2, -1)

    assert result == (7.5, -0.5, 12.5, -6.0)


def test_transform_empty_input(skewed):
    assert skewed.transform() == ()


def test_transform_odd_length_raises(skewed):
    with pytest.raises(PointShapeError) as exc_info:
        skewed.transform(1, 2, 3)

    assert exc_info.value.count == 3


def test_transform_points_matches_flat_transform(skewed):
    assert skewed.transform_points([(1, 1), (2, -1)]) == [(7.5, -0.5), (12.5, -6.0)]


def test_transform_points_accepts_generators(skewed):
    points = ((float(i), 0.0) for i in range(3))

    assert len(skewed.transform_points(points)) == 3


def test_transform_points_rejects_malformed_point(skewed):
    with pytest.raises(PointShapeError, match="Point 1"):
        skewed.transform_points([(1, 1), (1, 2, 3)])


# ===========================================================================
# TC-008: Chaining
# ===========================================================================
def test_builders_return_same_instance(identity):
    assert identity.scale(2, 2) is identity
    assert identity.translate(1, 1) is identity
    assert identity.rotate(15) is identity
    assert identity.concatenate(AffineTransform()) is identity
    assert identity.set_coefficients(1, 0, 0, 1, 0, 0) is identity


def test_chained_result_mutates_original(identity):
    chained = identity.translate(1, 0)
    chained.translate(0, 1)

    assert identity.transform(0, 0) == (1, 1)


# ===========================================================================
# TC-010: Invalid Concatenate Argument
# ===========================================================================
@pytest.mark.parametrize("bad", [None, 42, "rotate", (1, 0, 0, 1, 0, 0)])
def test_concatenate_rejects_non_transform(skewed, bad):
    before = skewed.coefficients()

    with pytest.raises(NotATransformError) as exc_info:
        skewed.concatenate(bad)

    assert exc_info.value.value is bad
    assert isinstance(exc_info.value, TypeError)
    assert skewed.coefficients() == before


def test_concatenate_checks_all_arguments_before_applying(skewed):
    before = skewed.coefficients()

    with pytest.raises(NotATransformError):
        skewed.concatenate(AffineTransform().scale(2), None)

    assert skewed.coefficients() == before


def test_instance_usable_after_rejected_concatenate(identity):
    with pytest.raises(NotATransformError):
        identity.concatenate(None)

    assert identity.translate(1, 2).transform(0, 0) == (1, 2)


# ===========================================================================
# Logging
# ===========================================================================
def test_concatenate_logs_debug(identity, caplog):
    caplog.set_level(logging.DEBUG, logger="geometry.affine.value_objects")

    identity.concatenate(AffineTransform(), AffineTransform())

    assert "Concatenating 2 transform(s)" in caplog.text
