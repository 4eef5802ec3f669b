"""Game package: re-export the state types and the update step.

Callers can import from ``game`` directly, e.g.:

    from game import Game, new_game, update
"""

from .state import (
    Mode,
    Sprite,
    Resources,
    Player,
    Obstacle,
    Playing,
    GameOver,
    Restarting,
    Game,
    new_game,
)
from .collision import hit
from .controller import control_speed, move_player
from .update import update

__all__ = [
    "Mode",
    "Sprite",
    "Resources",
    "Player",
    "Obstacle",
    "Playing",
    "GameOver",
    "Restarting",
    "Game",
    "new_game",
    "hit",
    "control_speed",
    "move_player",
    "update",
]
