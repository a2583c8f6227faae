# file: input.py

"""Per-tick input decoding.

The navigation controllers never poll pygame. Once per tick the host folds the
tick's event queue and polled device state into one `InputSample`, and that
sample is all the controllers get to see.
"""

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Sequence

import pygame as pg

import viewport.prelude as pre
from viewport.keypan import ArrowKey


@dataclass(frozen=True)
class InputSample:
    """Decoded input for one tick.

    Examples::

        >>> InputSample.idle()
        InputSample(cursor_pos=None, button_pressed=False, button_released=False, button_held=False, scroll_y=0.0, keys=frozenset())
    """

    cursor_pos: Optional[pg.Vector2] = None  # None while outside the viewport
    button_pressed: bool = False  # down edge
    button_released: bool = False  # up edge
    button_held: bool = False  # level
    scroll_y: float = 0.0
    keys: frozenset[int] = field(default_factory=frozenset)

    @classmethod
    def idle(cls) -> "InputSample":
        return cls()


class InputSampler:
    """Fold pygame events and polled state into an `InputSample`.

    Edges come from the button events of the tick. The held level is whatever
    the host polled, except that a press seen this tick always counts as held,
    so a click shorter than one tick still starts and ends a drag.

    A release is only reported when the tick's last button event is an up
    edge. Releasing and pressing again within one tick reads as a fresh press,
    so the gesture keeps going instead of ending under a held button.
    """

    def __init__(self, button: int = pre.PAN_BUTTON) -> None:
        self.button = button

    def sample(
        self,
        events: Sequence[pg.event.Event],
        cursor_pos: Optional[pre.Coordinate2],
        held_keys: Iterable[int],
        button_held: bool,
    ) -> InputSample:
        pressed = released = False
        scroll_y = 0.0

        for event in events:
            match event.type:
                case pg.MOUSEBUTTONDOWN if event.button == self.button:
                    pressed = True
                    released = False
                case pg.MOUSEBUTTONUP if event.button == self.button:
                    released = True
                case pg.MOUSEWHEEL:
                    dy = float(event.y)
                    scroll_y += -dy if getattr(event, "flipped", False) else dy
                case _:
                    pass

        arrow_keys = frozenset(ArrowKey)
        return InputSample(
            cursor_pos=(None if cursor_pos is None else pg.Vector2(cursor_pos)),
            button_pressed=pressed,
            button_released=released,
            button_held=(button_held or pressed),
            scroll_y=scroll_y,
            keys=frozenset(int(k) for k in held_keys if k in arrow_keys),
        )


def held_keys_from_pressed(pressed: "pg.key.ScancodeWrapper | Mapping[int, bool]") -> set[int]:
    """Return the arrow keys marked as down in a `pygame.key.get_pressed()` result."""
    return {int(key) for key in ArrowKey if pressed[key]}
