"""Turns a Game into draw calls.

This is a pure projection: it reads the game and issues ``draw_image`` and
``draw_text`` calls on a canvas, in a fixed order (background, player,
obstacle). It never changes the game.
"""

from __future__ import annotations

from config import GAME_OVER_COLOR, GAME_OVER_TEXT
from core.drawable import Canvas
from core.geom import GeoM
from game.state import Game, GameOver, Playing


class GameRenderer:
    def __init__(self, canvas: Canvas) -> None:
        self.canvas = canvas

    def draw(self, game: Game) -> None:
        state = game.state
        if isinstance(state, GameOver):
            self.canvas.draw_text(
                GAME_OVER_TEXT, game.width // 2, game.height // 2, GAME_OVER_COLOR
            )
            return

        self.canvas.draw_image(game.background, GeoM().translate(0, 0))

        # Restarting lasts one frame and has nothing on the field yet
        if not isinstance(state, Playing):
            return

        player = state.player
        geom = GeoM().rotate(player.angle).translate(player.x, player.y)
        self.canvas.draw_image(player.sprite, geom)

        obstacle = state.obstacle
        self.canvas.draw_image(obstacle.sprite, GeoM().translate(obstacle.x, obstacle.y))
