"""Per-frame game update.

``update(game, inputs)`` returns the game for the next frame. The frame
loop is expected to replace its reference with the result; restarting is
just returning a brand new Game.
"""

from __future__ import annotations

from dataclasses import replace

from core.input import InputState
from game.collision import hit
from game.controller import control_speed, move_player
from game.state import Game, GameOver, Playing, Restarting, new_game


def update_playing(game: Game, state: Playing, inputs: InputState) -> Game:
    player = control_speed(state.player, inputs)
    player = move_player(player, inputs, game.background)

    if hit(player, state.obstacle):
        print(f"[Game] Hit obstacle at ({player.x:g}, {player.y:g}), game over")
        return replace(game, state=GameOver())

    if player is state.player:
        return game
    return replace(game, state=replace(state, player=player))


def update_game_over(game: Game, inputs: InputState) -> Game:
    if inputs.restart:
        return replace(game, state=Restarting())
    return game


def update(game: Game, inputs: InputState) -> Game:
    state = game.state
    if isinstance(state, Playing):
        return update_playing(game, state, inputs)
    if isinstance(state, GameOver):
        return update_game_over(game, inputs)
    if isinstance(state, Restarting):
        print("[Game] New game")
        return new_game(game.resources, game.width, game.height)
    raise TypeError(f"Unknown game state: {state!r}")
