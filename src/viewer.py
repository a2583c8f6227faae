# file: viewer.py

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final, NoReturn, Optional

import pygame as pg

import viewport.prelude as pre
from viewport.camera import CameraState
from viewport.hud import render_debug_hud
from viewport.input import InputSample, InputSampler, held_keys_from_pressed
from viewport.navigation import Navigator


logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# MODULE FUNCTION DEFINITIONS
# ------------------------------------------------------------------------------


def quit_exit(context: str = "") -> NoReturn:
    if context:
        logger.info(context)

    pg.quit()
    sys.exit()


def get_user_config(filepath: Path) -> pre.UserConfig:
    config: Optional[dict[str, str]] = pre.UserConfig.read_user_config(filepath=filepath)

    if not config:
        logger.error(f"error while reading configuration file at {repr(filepath)}")
        return pre.UserConfig.from_dict({})

    return pre.UserConfig.from_dict(config)


# ------------------------------------------------------------------------------
# VIEWER
# ------------------------------------------------------------------------------


class Viewer:
    """Window, scene and main loop around the navigation core.

    pygame owns the window and the input devices; each tick the viewer turns
    them into an `InputSample` and hands it to the `Navigator`.
    """

    def __init__(self, config: Optional[pre.UserConfig] = None) -> None:
        pg.init()

        self.config: Final[pre.UserConfig] = config if config is not None else get_user_config(pre.CONFIG_PATH)
        size = (self.config.window_width, self.config.window_height)

        if self.config.vsync:
            # pygame only honors vsync for SCALED or OPENGL displays
            self.screen = pg.display.set_mode(size, pg.SCALED, vsync=1)
        else:
            self.screen = pg.display.set_mode(size)
        pg.display.set_caption(pre.CAPTION)

        self.font_hud = pg.font.SysFont(name="monospace", size=14, bold=True)
        self.clock = pg.time.Clock()

        self.camera = CameraState()
        self.navigator = Navigator.from_config(self.config)
        self.sampler = InputSampler()
        self.last_sample = InputSample.idle()

        self.running = True
        self.show_hud = pre.DEBUG_VIEWER_HUD

    def run(self) -> NoReturn:
        while self.running:
            self.update(pg.event.get())
            self.render()
            pg.display.flip()
            self.clock.tick(self.config.fps_cap)
        quit_exit("Exiting...")

    def handle_event(self, event: pg.event.Event) -> None:
        if event.type == pg.QUIT:
            self.running = False
        elif event.type == pg.KEYDOWN:
            if event.key == pg.K_ESCAPE:
                self.running = False
            elif event.key == pg.K_HOME:
                self.camera.reset()
            elif event.key == pg.K_F3:
                self.show_hud = not self.show_hud

    def poll_input(self, events: list[pg.event.Event]) -> InputSample:
        cursor_pos = pg.mouse.get_pos() if pg.mouse.get_focused() else None
        return self.sampler.sample(
            events,
            cursor_pos=cursor_pos,
            held_keys=held_keys_from_pressed(pg.key.get_pressed()),
            button_held=pg.mouse.get_pressed()[pre.PAN_BUTTON - 1],
        )

    def update(self, events: list[pg.event.Event], sample: Optional[InputSample] = None) -> None:
        """Advance one tick. `sample` overrides the polled devices when given."""
        for event in events:
            self.handle_event(event)

        if sample is None:
            sample = self.poll_input(events)
        self.navigator.tick(self.camera, sample)
        self.last_sample = sample

    def render(self) -> None:
        self.screen.fill(pre.COLOR.BACKGROUND)

        corners = self.camera.world_rect_to_viewport((0.0, 0.0), pre.SCENE_RECT_SIZE, self.screen.get_size())
        pg.draw.polygon(self.screen, pre.COLOR.SCENE, corners)

        if self.show_hud:
            render_debug_hud(self, self.screen, self.last_sample.cursor_pos)


if __name__ == "__main__":
    pre.setup_logging()
    Viewer().run()
