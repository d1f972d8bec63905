"""
Tests for scale fitting and trim re-centring.
"""
import numpy as np
import pytest

from core.data_structures import CanvasConfig, FrameInfo, Point, Rect, Size
from core.geometry import (
    compute_display_transform,
    compute_scale_factor,
    compute_trim_offset,
    scale_factor_for_frames,
)


CENTER = Point(400, 300)


def frame(source=(64, 64), trim=None, rotated=False):
    return FrameInfo(
        filename="f.png",
        frame=Rect(0, 0, 10, 10),
        source_size=Size(*source),
        sprite_source_size=Rect(*trim) if trim else None,
        rotated=rotated,
    )


class TestScaleFactor:
    """compute_scale_factor fits the largest source into the padded canvas."""

    def test_exact_fit_is_one(self):
        assert compute_scale_factor(Size(760, 560)) == pytest.approx(1.0)

    def test_doubling_halves_scale(self):
        assert compute_scale_factor(Size(1520, 1120)) == pytest.approx(0.5)

    def test_never_upscales(self):
        assert compute_scale_factor(Size(10, 10)) == 1.0

    def test_limited_by_tighter_axis(self):
        # width allows 760/1520 = 0.5, height allows 560/280 = 2 -> 0.5
        assert compute_scale_factor(Size(1520, 280)) == pytest.approx(0.5)
        assert compute_scale_factor(Size(380, 1120)) == pytest.approx(0.5)

    def test_empty_size(self):
        assert compute_scale_factor(Size(0, 0)) == 1.0

    def test_custom_canvas(self):
        assert compute_scale_factor(Size(200, 200), 240, 240, 40) == pytest.approx(1.0)

    def test_shared_across_frames(self):
        frames = [frame((1520, 100)), frame((100, 560))]
        assert scale_factor_for_frames(frames) == pytest.approx(0.5)
        small = CanvasConfig(width=400, height=300, padding=40)
        assert scale_factor_for_frames(frames, small) == pytest.approx(360 / 1520)


class TestTrimOffset:
    """Trimmed frames stay anchored at the logical centre."""

    def test_untrimmed_frame_sits_at_centre(self):
        transform = compute_display_transform(frame(), 0.5, CENTER)
        assert transform.position == CENTER
        assert transform.scale == 0.5

    def test_full_size_trim_has_no_offset(self):
        assert compute_trim_offset(frame((64, 64), (0, 0, 64, 64))) == Point(0, 0)

    def test_offset_formula(self):
        # centre of trim box: (10 + 20/2, 4 + 30/2) = (20, 19); logical centre (32, 32)
        offset = compute_trim_offset(frame((64, 64), (10, 4, 20, 30)))
        assert offset == Point(-12, -13)

    def test_offset_is_scaled(self):
        transform = compute_display_transform(frame((64, 64), (40, 40, 20, 20)), 0.5, CENTER)
        # offset (18, 18) * 0.5
        assert transform.position.x == pytest.approx(409)
        assert transform.position.y == pytest.approx(309)

    def test_rotated_frame_is_not_corrected(self):
        plain = compute_display_transform(frame((64, 64), (10, 4, 20, 30)), 1.0, CENTER)
        rotated = compute_display_transform(frame((64, 64), (10, 4, 20, 30), rotated=True), 1.0, CENTER)
        assert plain == rotated

    def test_default_canvas_centre(self):
        transform = compute_display_transform(frame(), 1.0)
        assert transform.position == CENTER


class TestDisplayMatrix:
    """DisplayTransform.to_matrix composes translation and scale."""

    def test_matrix_maps_origin_to_position(self):
        transform = compute_display_transform(frame((64, 64), (40, 40, 20, 20)), 0.5, CENTER)
        matrix = transform.to_matrix()
        corner = matrix @ np.array([10, -10, 0, 1], dtype=np.float32)
        assert corner[0] == pytest.approx(409 + 5)
        assert corner[1] == pytest.approx(309 - 5)
