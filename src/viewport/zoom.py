# file: zoom.py

"""Mouse-wheel zoom, clamped to a configurable scale range."""

import logging
import math

import viewport.prelude as pre
from viewport.camera import CameraState


logger = logging.getLogger(__name__)


class ZoomController:
    """Multiplicative mouse-wheel zoom.

    A wheel delta of ``d`` scales the camera by ``1 - d * sensitivity``, so each
    notch changes the visible extent by a fixed percentage at any zoom level.
    Positive deltas (wheel forward) zoom in by decreasing the scale.
    """

    def __init__(
        self,
        sensitivity: float = pre.SCROLL_SENSITIVITY,
        min_scale: float = pre.MIN_SCALE,
        max_scale: float = pre.MAX_SCALE,
    ) -> None:
        if not (0 < min_scale <= max_scale):
            raise ValueError(f"want 0 < min_scale <= max_scale. got {min_scale}, {max_scale}")
        self.sensitivity = sensitivity
        self.min_scale = min_scale
        self.max_scale = max_scale

    def update(self, camera: CameraState, scroll_y: float) -> None:
        if not scroll_y or math.isnan(scroll_y):
            return

        delta_zoom = -scroll_y * self.sensitivity
        multiplicative_zoom = 1.0 + delta_zoom
        scale = camera.scale * multiplicative_zoom

        if not math.isfinite(scale) or scale <= 0:
            scale = self.min_scale if multiplicative_zoom <= 1.0 else self.max_scale
            logger.debug(f"degenerate zoom factor {multiplicative_zoom} clamped to {scale}")
        elif not (self.min_scale <= scale <= self.max_scale):
            clamped = pre.clamp(scale, self.min_scale, self.max_scale)
            logger.debug(f"scale {scale} clamped to {clamped}")
            scale = clamped

        camera.scale = float(scale)
