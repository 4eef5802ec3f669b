"""Test configuration and fixtures for the game logic tests.

None of these fixtures need a window or a GL context: sprites are plain
size records with fake texture IDs.
"""

import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

SRC = Path(__file__).resolve().parent.parent / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from game.state import Obstacle, Player, Playing, Resources, Sprite, new_game  # noqa: E402


@pytest.fixture
def resources():
    """Sprite sizes matching the bundled assets."""
    return Resources(
        background=Sprite(texture=1, width=640, height=480),
        player=Sprite(texture=2, width=32, height=32),
        obstacle=Sprite(texture=3, width=48, height=48),
    )


@pytest.fixture
def game(resources):
    """Provide a fresh game in the Playing mode."""
    return new_game(resources)


def with_player(game, **changes):
    """Helper to put the player somewhere specific."""
    from dataclasses import replace

    state = game.state
    assert isinstance(state, Playing)
    return replace(game, state=replace(state, player=replace(state.player, **changes)))


def make_player(x, y, *, speed=12.0, width=32, height=32):
    return Player(x=x, y=y, speed=speed, angle=0.0, sprite=Sprite(2, width, height))


def make_obstacle(x, y, *, width=20, height=20):
    return Obstacle(x=x, y=y, sprite=Sprite(3, width, height))


def gl_modules_or_skip():
    """Import the GL-backed loader modules, skipping if PyOpenGL can't load."""
    try:
        import textures.texture_utils as texture_utils
        import textures.texture_manager as texture_manager
        import ui.text_renderer as text_renderer
    except Exception as e:  # PyOpenGL raises different errors per platform
        pytest.skip(f"OpenGL unavailable: {e}")
    return texture_utils, texture_manager, text_renderer
