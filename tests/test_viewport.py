"""Tests for the design-space to viewport transform."""

import pytest

from posetransfer.models import DESIGN_HEIGHT, DESIGN_WIDTH, ViewportTransform


def test_recompute_fits_width_limited_surface():
    t = ViewportTransform.recompute(512, 1000)
    assert t.scale == pytest.approx(512 / DESIGN_WIDTH * 0.9)
    assert t.offset_x == pytest.approx((512 - DESIGN_WIDTH * t.scale) / 2)
    assert t.offset_y == pytest.approx((1000 - DESIGN_HEIGHT * t.scale) / 2)


def test_recompute_fits_height_limited_surface():
    t = ViewportTransform.recompute(1000, 280)
    assert t.scale == pytest.approx(0.9)
    assert t.offset_y == pytest.approx(14.0)


def test_design_space_is_centred():
    t = ViewportTransform.recompute(800, 600)
    left, top = t.to_screen((0, 0))
    right, bottom = t.to_screen((DESIGN_WIDTH, DESIGN_HEIGHT))
    assert left == pytest.approx(800 - right)
    assert top == pytest.approx(600 - bottom)
    # Uniform scale keeps the design aspect ratio.
    assert (right - left) / (bottom - top) == pytest.approx(DESIGN_WIDTH / DESIGN_HEIGHT)


@pytest.mark.parametrize("size", [(256, 280), (300, 150), (1920, 1080), (37, 901)])
def test_to_design_inverts_to_screen(size):
    t = ViewportTransform.recompute(*size)
    for point in [(0.0, 0.0), (128.0, 40.0), (255.5, 279.25), (-10.0, 300.0)]:
        back = t.to_design(t.to_screen(point))
        assert back == pytest.approx(point)


def test_identity_transform():
    t = ViewportTransform()
    assert t.to_screen((3, 4)) == (3, 4)


@pytest.mark.parametrize("size", [(0, 100), (100, 0), (-5, 10)])
def test_recompute_rejects_empty_surface(size):
    with pytest.raises(ValueError):
        ViewportTransform.recompute(*size)
