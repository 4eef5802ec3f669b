"""Polled keyboard input.

The update step never talks to pygame directly. Each frame the engine turns
``pygame.key.get_pressed()`` into an ``InputState`` snapshot of the seven
logical keys the game cares about.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, Sequence

import pygame


@dataclass(frozen=True)
class InputState:
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    speed_up: bool = False
    speed_down: bool = False
    restart: bool = False


KEY_BINDINGS: Dict[str, int] = {
    "up": pygame.K_UP,
    "down": pygame.K_DOWN,
    "left": pygame.K_LEFT,
    "right": pygame.K_RIGHT,
    "speed_up": pygame.K_s,
    "speed_down": pygame.K_d,
    "restart": pygame.K_SPACE,
}


def read_input(
    pressed: Sequence[bool], bindings: Dict[str, int] = KEY_BINDINGS
) -> InputState:
    """Map a pressed-keys sequence (as from pygame.key.get_pressed) to InputState."""
    values = {}
    for f in fields(InputState):
        key = bindings.get(f.name)
        values[f.name] = bool(pressed[key]) if key is not None else False
    return InputState(**values)


def poll_input() -> InputState:  # pragma: no cover - needs a display
    return read_input(pygame.key.get_pressed())
