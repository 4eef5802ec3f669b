from __future__ import annotations

import pygame

from core.input import KEY_BINDINGS, InputState, read_input


class Pressed:
    """Stand-in for pygame.key.get_pressed() backed by a set of key codes."""

    def __init__(self, *keys: int) -> None:
        self.keys = set(keys)

    def __getitem__(self, key: int) -> bool:
        return key in self.keys


def test_nothing_pressed() -> None:
    assert read_input(Pressed()) == InputState()


def test_default_bindings() -> None:
    state = read_input(Pressed(pygame.K_UP, pygame.K_RIGHT, pygame.K_s))
    assert state == InputState(up=True, right=True, speed_up=True)

    state = read_input(Pressed(pygame.K_DOWN, pygame.K_LEFT, pygame.K_d, pygame.K_SPACE))
    assert state == InputState(down=True, left=True, speed_down=True, restart=True)


def test_unbound_keys_are_ignored() -> None:
    assert read_input(Pressed(pygame.K_q, pygame.K_RETURN)) == InputState()


def test_custom_bindings() -> None:
    bindings = dict(KEY_BINDINGS, restart=pygame.K_r)
    assert read_input(Pressed(pygame.K_r), bindings).restart is True
    assert read_input(Pressed(pygame.K_SPACE), bindings).restart is False


def test_missing_binding_reads_as_released() -> None:
    bindings = {k: v for k, v in KEY_BINDINGS.items() if k != "up"}
    assert read_input(Pressed(pygame.K_UP), bindings).up is False
