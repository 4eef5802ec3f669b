"""Core engine loop & orchestration.

Separates concerns:
- Engine: sets up window, GL state, asset loading and the main loop.
- game.update: pure per-frame state step; returns the next Game.
- GameRenderer: draws a Game onto the sprite canvas.

The engine is the only place that holds the current Game, and it swaps it
for whatever update() returns each frame.
"""

from __future__ import annotations

import pygame

from config import (
    WIDTH,
    HEIGHT,
    FPS,
    VSYNC,
    FULLSCREEN,
    RESIZABLE,
    WINDOW_TITLE,
)
from core.input import poll_input
from game import Game, new_game, update
from render.game_renderer import GameRenderer
from render.sprite_renderer import SpriteRenderer
from textures.texture_manager import load_game_resources
from ui.text_renderer import TextRenderer


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(self):
        pygame.init()
        pygame.display.set_caption(WINDOW_TITLE)
        flags = pygame.DOUBLEBUF | pygame.OPENGL
        if FULLSCREEN:
            flags |= pygame.FULLSCREEN
        elif RESIZABLE:
            flags |= pygame.RESIZABLE
        try:
            # vsync: 1 to enable, 0 to disable
            pygame.display.set_mode((WIDTH, HEIGHT), flags, vsync=(1 if VSYNC else 0))
        except (TypeError, pygame.error):
            # vsync was requested but unavailable on this system/driver
            pygame.display.set_mode((WIDTH, HEIGHT), flags)
        self.clock = pygame.time.Clock()

        # Raises AssetLoadError; nothing below runs without all assets
        resources = load_game_resources()
        print("[Engine] Assets loaded")

        self.game: Game = new_game(resources, WIDTH, HEIGHT)
        width, height = self.game.layout(*pygame.display.get_window_size())
        self.canvas = SpriteRenderer(width, height, TextRenderer(resources.font))
        self.canvas.resize(*pygame.display.get_window_size())
        self.renderer = GameRenderer(self.canvas)

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            if event.type == pygame.VIDEORESIZE:
                self.canvas.resize(event.w, event.h)
        return True

    # ------------------------------------------------------------------
    def update(self):
        self.game = update(self.game, poll_input())

    # ------------------------------------------------------------------
    def render(self):  # pragma: no cover - visual
        self.canvas.begin()
        self.renderer.draw(self.game)
        self.canvas.end()
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self):  # pragma: no cover - visual
        print("[Engine] Starting frame loop")
        running = True
        while running:
            self.clock.tick(FPS)
            running = self.handle_events()
            if not running:
                break
            self.update()
            self.render()
        pygame.quit()
