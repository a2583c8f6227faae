# file: dougcad/src/viewport/prelude.py

"""This module contains the flags, types, constants and configuration shared
by the viewer and the navigation controllers.
"""


import logging
import math
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Optional, Sequence, Tuple, TypeAlias

import pygame as pg


################################################################################
### DFLAGS
################################################################################

DDEBUG: Final[bool] = "--debug" in sys.argv

# flags for debugging, etc
DEBUG_VIEWER_CPROFILE = False
DEBUG_VIEWER_HUD = False or DDEBUG
DEBUG_VIEWER_LOGGING = False or DDEBUG


################################################################################
### TYPES
################################################################################

Number: TypeAlias = int | float

ColorValue: TypeAlias = pg.Color | Tuple[int, int, int] | Tuple[int, int, int, int] | Sequence[int]

# Ported from pygame source file: _common.py
Coordinate2: TypeAlias = Tuple[Number, Number] | Sequence[Number] | pg.Vector2


################################################################################
### UTILS
################################################################################


def clamp(value: int | float, lo: int | float, hi: int | float) -> int | float:
    """
    Examples::

        >>> (clamp(15, 3, 11), clamp(5, 3, 11), clamp(-15, 3, 11))
        (11, 5, 3)

        >>> (clamp(float("-inf"), 3, 11), clamp(float("inf"), 3, 11))
        (3, 11)
    """
    return min(max(value, lo), hi)


def setup_logging(debug: bool = DEBUG_VIEWER_LOGGING) -> None:
    """Configure the root logger.

    Warnings and above by default, everything with ``--debug``.
    """
    logging.basicConfig(
        level=(logging.DEBUG if debug else logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


#############
# CONSTANTS #

FPS_CAP = 60
"""Frames per seconds.

FPS of 60 == 16 milliseconds per frame
"""

SCROLL_SENSITIVITY = 0.02
"""Fraction of the current scale gained or lost per unit of wheel delta."""

PAN_STEP = 20.0  # world units per tick per held arrow key

DEFAULT_SCALE = 1.0
MIN_SCALE = 0.01
MAX_SCALE = 100.0

PAN_BUTTON = 1  # pygame left mouse button

SCREEN_WIDTH, SCREEN_HEIGHT = (1920, 1080)
DIMENSIONS = (SCREEN_WIDTH, SCREEN_HEIGHT)

CAPTION = "Doug CAD"

SCENE_RECT_SIZE = (300.0, 300.0)  # world units, centered on the origin

SRC_PATH = Path("src")

# aliases for file paths
CONFIG_PATH = SRC_PATH / "config"

# colors:
BLACK = (0, 0, 0)
BLUE = (0, 0, 255)


@dataclass
class COLOR:
    BACKGROUND = BLACK
    SCENE = BLUE
    HUD = (127, 255, 127)


################################################################################
### CONFIG
################################################################################


@dataclass
class UserConfig:
    """Configuration options for the viewer application.

    Usage::

        ```python
        def get_user_config(filepath: Path) -> UserConfig:
            config: Optional[dict[str, str]] = UserConfig.read_user_config(filepath=filepath)
            if not config:
                return UserConfig.from_dict({})
            return UserConfig.from_dict(config)
        ```
    """

    fps_cap: int
    max_scale: float
    min_scale: float
    pan_step: float
    scroll_sensitivity: float
    vsync: bool
    window_height: int
    window_width: int

    def __post_init__(self) -> None:
        if not (0 < self.min_scale <= self.max_scale) or not math.isfinite(self.max_scale):
            raise ValueError(f"want 0 < min_scale <= max_scale. got {self.min_scale}, {self.max_scale}")

    @classmethod
    def from_dict(cls, config_dict: dict[str, str]) -> "UserConfig":
        """Create a UserConfig instance from a dictionary.

        Handles converting string values to appropriate data types and setting
        defaults for missing keys.

        Args:
            config_dict: dict[str, str]

        Returns:
            UserConfig

        Raises:
            ValueError if a value cannot be converted or the scale range is invalid

        Examples::

            >>> UserConfig.from_dict({"min_scale": "0.5"}).min_scale
            0.5
            >>> UserConfig.from_dict({}).vsync
            True
        """
        return cls(
            fps_cap=int(config_dict.get('fps_cap', str(FPS_CAP))),
            max_scale=float(config_dict.get('max_scale', str(MAX_SCALE))),
            min_scale=float(config_dict.get('min_scale', str(MIN_SCALE))),
            pan_step=float(config_dict.get('pan_step', str(PAN_STEP))),
            scroll_sensitivity=float(config_dict.get('scroll_sensitivity', str(SCROLL_SENSITIVITY))),
            vsync=config_dict.get('vsync', 'true').lower() == 'true',
            window_height=int(config_dict.get('window_height', str(SCREEN_HEIGHT))),
            window_width=int(config_dict.get('window_width', str(SCREEN_WIDTH))),
        )

    @staticmethod
    def read_user_config(filepath: Path) -> Optional[dict[str, str]]:
        """Read configuration file and return a dictionary.

        Skips comments, empty lines, and returns None if file doesn't exist.

        Raises:
            ValueError if a line holds a key without a value
        """
        logger = logging.getLogger(__name__)
        if not filepath.is_file():
            logger.error(f"error while locating file at {repr(filepath)}")
            return None

        logger.debug(f"reading configuration file at {repr(filepath)}")
        config: dict[str, str] = {}
        with open(filepath, "r") as f:
            for lineno, line in enumerate(f, start=1):
                if not (l := line.strip()) or l.startswith("#"):
                    continue
                match l.split(maxsplit=1):
                    case [k, v]:
                        config[k] = v
                    case _:
                        raise ValueError(f"{filepath}:{lineno}: want 'key value'. got {repr(l)}")
        return config


if __name__ == "__main__":
    import doctest

    doctest.testmod()
