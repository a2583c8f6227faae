# file: drag.py

"""Drag-to-pan state machine."""

import logging
from dataclasses import dataclass
from enum import Enum, auto, unique
from typing import Optional

import pygame as pg

import viewport.prelude as pre
from viewport.camera import CameraState, screen_to_world_delta


logger = logging.getLogger(__name__)


@unique
class DragState(Enum):
    IDLE = auto()
    DRAGGING = auto()


@dataclass
class DragSession:
    """Pointer memory of an in-progress pan gesture.

    Examples::

        >>> DragSession(pg.Vector2(100, 100))
        DragSession(last_cursor_pos=<Vector2(100, 100)>)
    """

    last_cursor_pos: pg.Vector2  # screen space, pixels


class DragController:
    """Pan the camera by dragging the scene with the pointer.

    The presence of a `DragSession` is the state: ``None`` is idle, anything
    else is dragging. Call `update` once per tick with the tick's button edges,
    button level and cursor position (``None`` when outside the viewport).

    Screen y grows downward while world y grows upward, so the x component of
    the mapped delta is subtracted from the translation and the y component is
    added. Either way the point under the cursor stays under the cursor.
    """

    def __init__(self) -> None:
        self.session: Optional[DragSession] = None

    @property
    def state(self) -> DragState:
        return DragState.IDLE if self.session is None else DragState.DRAGGING

    def update(
        self,
        camera: CameraState,
        cursor_pos: Optional[pre.Coordinate2],
        pressed: bool,
        held: bool,
        released: bool,
    ) -> None:
        if pressed:
            self.start(cursor_pos)
        if held:
            self.drag(camera, cursor_pos)
        if released:
            self.end()

    def start(self, cursor_pos: Optional[pre.Coordinate2]) -> None:
        if cursor_pos is None:
            return
        self.session = DragSession(pg.Vector2(cursor_pos))
        logger.debug(f"drag started at {tuple(self.session.last_cursor_pos)}")

    def drag(self, camera: CameraState, cursor_pos: Optional[pre.Coordinate2]) -> None:
        if self.session is None or cursor_pos is None:
            return

        cursor = pg.Vector2(cursor_pos)
        screen_delta = cursor - self.session.last_cursor_pos
        world_dx, world_dy = screen_to_world_delta(screen_delta, camera.scale)

        camera.translation.x -= world_dx
        camera.translation.y += world_dy

        self.session.last_cursor_pos = cursor

    def end(self) -> None:
        if self.session is None:
            return
        logger.debug(f"drag ended at {tuple(self.session.last_cursor_pos)}")
        self.session = None
