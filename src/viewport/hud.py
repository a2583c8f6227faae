# file: hud.py

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import pygame as pg

import viewport.prelude as pre


if TYPE_CHECKING:
    from viewer import Viewer


def draw_text(
    surface: pg.SurfaceType,
    x: int,
    y: int,
    font: pg.font.Font,
    color: pre.ColorValue,
    text: str,
    antialias: bool = True,
) -> pg.Rect:
    textsurf = font.render(text, antialias, color)
    textrect = textsurf.get_rect()
    textrect.topleft = (x, y)
    return surface.blit(textsurf, textrect)


def hud_lines(viewer: Viewer, mouse_pos: Optional[pg.Vector2] = None) -> list[str]:
    keyfillchar = " "
    keywidth = 10

    camera = viewer.camera
    session = viewer.navigator.drag.session
    items: tuple[tuple[str, str], ...] = (
        ("CAM_POS", f"{camera.translation.x:.1f}, {camera.translation.y:.1f}"),
        ("CAM_SCALE", f"{camera.scale:.4f}"),
        ("CLOCK_FPS", f"{viewer.clock.get_fps():2.0f}"),
        ("DRAG", viewer.navigator.drag.state.name),
        ("DRAG_LAST", "-" if session is None else f"{session.last_cursor_pos.x:.0f}, {session.last_cursor_pos.y:.0f}"),
        ("MOUSE_POS", "-" if mouse_pos is None else f"{mouse_pos.x:.0f}, {mouse_pos.y:.0f}"),
    )
    return [f"{key.ljust(keywidth, keyfillchar)}{val}" for key, val in items]


def render_debug_hud(viewer: Viewer, surface: pg.SurfaceType, mouse_pos: Optional[pg.Vector2] = None) -> None:
    lineheight = viewer.font_hud.get_linesize()
    rowstart, colstart = 16, 16
    for index, text in enumerate(hud_lines(viewer, mouse_pos)):
        draw_text(surface, rowstart, colstart + index * lineheight, viewer.font_hud, pre.COLOR.HUD, text)
