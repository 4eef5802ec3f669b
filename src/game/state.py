"""Game state values.

Everything in here is immutable. A frame's update returns a new ``Game``
instead of editing the current one, so the frame loop owns the only
reference that changes.

The mode is a tagged union: only ``Playing`` carries a player and an
obstacle, so there's no way to read a stale player while the game over
screen is up.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Tuple, Union

from config import WIDTH, HEIGHT, START_SPEED


class Mode(enum.Enum):
    PLAYING = enum.auto()
    GAME_OVER = enum.auto()
    RESTARTING = enum.auto()


@dataclass(frozen=True)
class Sprite:
    """A loaded texture together with its pixel size."""

    texture: int
    width: int
    height: int


@dataclass(frozen=True)
class Resources:
    """Assets loaded once at startup and shared by every game instance."""

    background: Sprite
    player: Sprite
    obstacle: Sprite
    # pygame.font.Font; left untyped so the state stays importable headless
    font: Any = field(default=None, compare=False)


@dataclass(frozen=True)
class Player:
    x: float
    y: float
    speed: float
    angle: float  # radians
    sprite: Sprite


@dataclass(frozen=True)
class Obstacle:
    x: float
    y: float
    sprite: Sprite


@dataclass(frozen=True)
class Playing:
    player: Player
    obstacle: Obstacle
    mode: Mode = field(default=Mode.PLAYING, init=False)


@dataclass(frozen=True)
class GameOver:
    mode: Mode = field(default=Mode.GAME_OVER, init=False)


@dataclass(frozen=True)
class Restarting:
    mode: Mode = field(default=Mode.RESTARTING, init=False)


ModeState = Union[Playing, GameOver, Restarting]


@dataclass(frozen=True)
class Game:
    state: ModeState
    resources: Resources
    width: int = WIDTH
    height: int = HEIGHT

    @property
    def mode(self) -> Mode:
        return self.state.mode

    @property
    def background(self) -> Sprite:
        return self.resources.background

    def layout(self, outside_width: int = 0, outside_height: int = 0) -> Tuple[int, int]:
        """Logical canvas size; independent of the real window size."""
        return self.width, self.height


def new_game(resources: Resources, width: int = WIDTH, height: int = HEIGHT) -> Game:
    """Build a fresh game in the Playing mode."""
    blank = Game(state=Restarting(), resources=resources, width=width, height=height)
    # The layout pair is unpacked as (h, w), so x comes from the width and
    # y from the height even though the names read the other way around.
    h, w = blank.layout(0, 0)
    player = Player(
        x=float(h // 2),
        y=float(w // 2),
        speed=START_SPEED,
        angle=0.0,
        sprite=resources.player,
    )
    obstacle = Obstacle(
        x=float(h // 4),
        y=float(w // 4),
        sprite=resources.obstacle,
    )
    return Game(
        state=Playing(player=player, obstacle=obstacle),
        resources=resources,
        width=width,
        height=height,
    )
