from __future__ import annotations

import math
from dataclasses import replace

import pytest

from conftest import with_player
from render.game_renderer import GameRenderer
from game.state import GameOver, Restarting


class RecordingCanvas:
    def __init__(self) -> None:
        self.calls = []

    def draw_image(self, sprite, geom) -> None:
        self.calls.append(("image", sprite, geom))

    def draw_text(self, text, x, y, color) -> None:
        self.calls.append(("text", text, x, y, color))


def render(game):
    canvas = RecordingCanvas()
    GameRenderer(canvas).draw(game)
    return canvas.calls


def test_playing_draws_background_player_obstacle_in_order(game, resources) -> None:
    calls = render(game)
    assert [c[1] for c in calls] == [resources.background, resources.player, resources.obstacle]
    assert all(c[0] == "image" for c in calls)


def test_positions_come_from_state(game) -> None:
    game = with_player(game, x=50, y=60, angle=math.pi)
    _, player_call, obstacle_call = render(game)

    assert render(game)[0][2].apply(0, 0) == (0, 0)
    assert player_call[2].apply(0, 0) == pytest.approx((50, 60))
    # rotated half a turn about the sprite's top-left corner
    assert player_call[2].apply(32, 0) == pytest.approx((18, 60))
    assert obstacle_call[2].apply(0, 0) == (160, 120)


def test_game_over_draws_only_the_text(game) -> None:
    calls = render(replace(game, state=GameOver()))
    assert calls == [("text", "Game Over!", 320, 240, (255, 0, 0, 255))]


def test_restarting_draws_only_the_background(game, resources) -> None:
    calls = render(replace(game, state=Restarting()))
    assert [c[1] for c in calls] == [resources.background]


def test_render_does_not_touch_the_game(game) -> None:
    before = game
    render(game)
    assert game == before
    assert game.state.player is before.state.player
