# file: test_zoom.py

import logging
import math

import pytest
from hypothesis import example, given
from hypothesis import strategies as st

from viewport._testutils import st_scale, st_scroll
from viewport.camera import CameraState
from viewport.zoom import ZoomController


@given(st_scale(), st_scroll(), st_scroll())
@example(1.0, 1.0, -1.0)
def test_zoom_is_multiplicative(scale0, d1, d2):
    zoom = ZoomController()
    stepwise = CameraState(scale=scale0)
    zoom.update(stepwise, d1)
    zoom.update(stepwise, d2)

    expected = scale0 * (1 - 0.02 * d1) * (1 - 0.02 * d2)
    assert stepwise.scale == pytest.approx(expected, rel=1e-12)

    combined = CameraState(scale=scale0)
    combined.scale *= (1 - 0.02 * d1) * (1 - 0.02 * d2)
    assert stepwise.scale == pytest.approx(combined.scale, rel=1e-12)


@given(st_scale(), st.floats(min_value=0.01, max_value=10.0))
def test_zoom_sign(scale0, magnitude):
    zoom = ZoomController()

    cam = CameraState(scale=scale0)
    zoom.update(cam, magnitude)
    assert cam.scale < scale0

    cam = CameraState(scale=scale0)
    zoom.update(cam, -magnitude)
    assert cam.scale > scale0


def test_zoom_zero_delta_is_noop():
    zoom = ZoomController()
    cam = CameraState(scale=3.0)
    zoom.update(cam, 0.0)
    zoom.update(cam, float("nan"))
    assert cam.scale == 3.0


def test_zoom_one_notch_in_and_out():
    zoom = ZoomController()
    cam = CameraState()
    zoom.update(cam, 1.0)
    assert cam.scale == pytest.approx(0.98)
    zoom.update(cam, -1.0)
    assert cam.scale == pytest.approx(0.98 * 1.02)


def test_zoom_sensitivity():
    cam = CameraState()
    ZoomController(sensitivity=0.1).update(cam, 2.0)
    assert cam.scale == pytest.approx(0.8)


class TestZoomClamp:
    def test_zoom_clamps_to_min_scale(self):
        zoom = ZoomController(min_scale=0.5, max_scale=2.0)
        cam = CameraState()
        for _ in range(200):
            zoom.update(cam, 5.0)
        assert cam.scale == 0.5

    def test_zoom_clamps_to_max_scale(self):
        zoom = ZoomController(min_scale=0.5, max_scale=2.0)
        cam = CameraState()
        for _ in range(200):
            zoom.update(cam, -5.0)
        assert cam.scale == 2.0

    @pytest.mark.parametrize("delta", [50.0, 51.0, 1e9, float("inf")])
    def test_zoom_never_goes_non_positive(self, delta):
        zoom = ZoomController()
        cam = CameraState()
        zoom.update(cam, delta)
        assert cam.scale == zoom.min_scale
        assert cam.scale > 0

    def test_zoom_huge_negative_delta_clamps_to_max(self):
        zoom = ZoomController()
        cam = CameraState()
        zoom.update(cam, float("-inf"))
        assert cam.scale == zoom.max_scale
        assert math.isfinite(cam.scale)

    @given(st.lists(st.floats(min_value=-100.0, max_value=100.0), max_size=64))
    def test_zoom_stays_in_range(self, deltas):
        zoom = ZoomController(min_scale=0.1, max_scale=10.0)
        cam = CameraState()
        for d in deltas:
            zoom.update(cam, d)
            assert 0.1 <= cam.scale <= 10.0

    def test_zoom_clamp_is_logged(self, caplog: pytest.LogCaptureFixture):
        zoom = ZoomController(min_scale=0.5, max_scale=2.0)
        cam = CameraState(scale=0.5)
        with caplog.at_level(logging.DEBUG, logger="viewport.zoom"):
            zoom.update(cam, 1.0)
        assert "clamped" in caplog.text

    @pytest.mark.parametrize("lo, hi", [(0.0, 1.0), (-1.0, 1.0), (2.0, 1.0)])
    def test_zoom_rejects_invalid_range(self, lo, hi):
        with pytest.raises(ValueError):
            ZoomController(min_scale=lo, max_scale=hi)
