# file: keypan.py

"""Arrow-key panning in fixed world-unit steps."""

from enum import IntEnum, unique
from typing import Final, Iterable

import pygame as pg

import viewport.prelude as pre
from viewport.camera import CameraState


@unique
class ArrowKey(IntEnum):
    LEFT = pg.K_LEFT
    RIGHT = pg.K_RIGHT
    UP = pg.K_UP
    DOWN = pg.K_DOWN


ARROW_KEY_DIRECTIONS: Final[dict[int, tuple[int, int]]] = {
    ArrowKey.LEFT: (-1, 0),
    ArrowKey.RIGHT: (1, 0),
    ArrowKey.UP: (0, 1),  # world y grows upward
    ArrowKey.DOWN: (0, -1),
}


class KeyPanController:
    """Move the camera a fixed world distance per held arrow key per tick.

    Held keys stack, so Left+Up pans diagonally by one step on each axis.

    Examples::

        >>> cam = CameraState()
        >>> KeyPanController(pan_step=20.0).update(cam, {pg.K_LEFT, pg.K_UP, pg.K_a})
        >>> cam.translation
        <Vector3(-20, 20, 0)>
    """

    def __init__(self, pan_step: float = pre.PAN_STEP) -> None:
        self.pan_step = pan_step

    def update(self, camera: CameraState, keys: Iterable[int]) -> None:
        for key in keys:
            if (direction := ARROW_KEY_DIRECTIONS.get(key)) is None:
                continue
            camera.translation.x += direction[0] * self.pan_step
            camera.translation.y += direction[1] * self.pan_step
