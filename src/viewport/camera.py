# file: camera.py

"""Camera state and the screen-to-world mappings built on it."""

from typing import Final

import numpy as np
import numpy.typing as npt
import pygame as pg

import viewport.prelude as pre


__all__ = [
    "CameraState",
    "screen_to_world_delta",
]


vec2 = pg.Vector2
vec3 = pg.Vector3


def screen_to_world_delta(screen_delta: pre.Coordinate2, scale: float) -> tuple[float, float]:
    """Convert a screen-space delta in pixels to a world-space delta.

    Scale-only mapping: the camera is never rotated and its orthographic scale
    is the only non-identity factor, so a pixel spans exactly ``scale`` world
    units on both axes. Axis directions are left to the caller.

    Examples::

        >>> screen_to_world_delta((50, 20), 1.0)
        (50.0, 20.0)
        >>> screen_to_world_delta((4, -2), 0.5)
        (2.0, -1.0)
    """
    dx, dy = screen_delta
    return (float(dx) * scale, float(dy) * scale)


class CameraState:
    """World-space translation and zoom of the orthographic camera.

    Mutated in place by the navigation controllers; read once per frame by the
    renderer through `view_matrix`.
    """

    def __init__(
        self,
        translation: tuple[float, float, float] = (0.0, 0.0, 0.0),
        scale: float = pre.DEFAULT_SCALE,
    ) -> None:
        self.translation = vec3(translation)
        self.scale = float(scale)

        self._initial: Final = (tuple(self.translation), self.scale)

    def __repr__(self) -> str:
        return f"CameraState(translation={tuple(self.translation)}, scale={self.scale})"

    def get(self) -> "CameraState":
        return self

    def reset(self) -> None:
        """Restore the translation and scale the camera was created with."""
        translation, scale = self._initial
        self.translation = vec3(translation)
        self.scale = scale

    def view_matrix(self, viewport_size: pre.Coordinate2) -> npt.NDArray[np.float64]:
        """Return the 3x3 affine transform from world to viewport pixels.

        Viewport origin is top-left with y growing downward, world y grows
        upward, and the camera translation sits at the viewport center::

            sx = cx + (wx - tx) / scale
            sy = cy - (wy - ty) / scale
        """
        cx, cy = viewport_size[0] * 0.5, viewport_size[1] * 0.5
        inv = 1.0 / self.scale
        tx, ty = self.translation.x, self.translation.y
        return np.array(
            [
                [inv, 0.0, cx - tx * inv],
                [0.0, -inv, cy + ty * inv],
                [0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )

    def world_to_viewport(self, world_pos: pre.Coordinate2, viewport_size: pre.Coordinate2) -> pg.Vector2:
        p = self.view_matrix(viewport_size) @ np.array([world_pos[0], world_pos[1], 1.0])
        return vec2(float(p[0]), float(p[1]))

    def viewport_to_world(self, viewport_pos: pre.Coordinate2, viewport_size: pre.Coordinate2) -> pg.Vector2:
        """Inverse of `world_to_viewport`. The viewport center maps to the camera translation."""
        inv = np.linalg.inv(self.view_matrix(viewport_size))
        p = inv @ np.array([viewport_pos[0], viewport_pos[1], 1.0])
        return vec2(float(p[0]), float(p[1]))

    def world_rect_to_viewport(
        self, center: pre.Coordinate2, size: pre.Coordinate2, viewport_size: pre.Coordinate2
    ) -> list[pg.Vector2]:
        """Project the corners of an axis-aligned world rect, clockwise from top-left."""
        hw, hh = size[0] * 0.5, size[1] * 0.5
        cx, cy = center[0], center[1]
        corners = np.array(
            [
                [cx - hw, cy + hh, 1.0],
                [cx + hw, cy + hh, 1.0],
                [cx + hw, cy - hh, 1.0],
                [cx - hw, cy - hh, 1.0],
            ]
        )
        projected = corners @ self.view_matrix(viewport_size).T
        return [vec2(float(x), float(y)) for x, y, _ in projected]
