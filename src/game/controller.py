"""Player controller: speed adjustment and movement from polled input.

Both functions take the current Player and return a new one; they never
mutate the argument.
"""

from __future__ import annotations

import math
from dataclasses import replace

from config import MIN_SPEED, MAX_SPEED, SPEED_STEP
from core.input import InputState
from game.state import Player, Sprite

HEADING_UP = 0.0
HEADING_DOWN = math.pi
HEADING_LEFT = 270 * math.pi / 180
HEADING_RIGHT = 90 * math.pi / 180


def clamp_speed(speed: float) -> float:
    if speed > MAX_SPEED:
        return MAX_SPEED
    if speed < MIN_SPEED:
        return MIN_SPEED
    return speed


def control_speed(player: Player, inputs: InputState) -> Player:
    speed = player.speed
    if inputs.speed_up:
        speed += SPEED_STEP
    if inputs.speed_down:
        speed -= SPEED_STEP
    speed = clamp_speed(speed)

    if speed == player.speed:
        return player
    print(f"Speed: {speed:g}")
    return replace(player, speed=speed)


def past_right_edge(player: Player, background: Sprite) -> bool:
    return player.x + player.sprite.width > background.width


def move_player(player: Player, inputs: InputState, background: Sprite) -> Player:
    """Apply the four directional keys in the order up, down, left, right.

    Keys are not exclusive; every held key moves the player and the last
    one checked sets the heading. Once the sprite pokes past the right edge
    of the background no key moves it at all. The vertical axis is not
    bounded.
    """
    if past_right_edge(player, background):
        return player

    x, y, angle = player.x, player.y, player.angle
    if inputs.up:
        y -= player.speed
        angle = HEADING_UP
    if inputs.down:
        y += player.speed
        angle = HEADING_DOWN
    if inputs.left:
        x -= player.speed
        angle = HEADING_LEFT
    if inputs.right:
        x += player.speed
        angle = HEADING_RIGHT

    if (x, y, angle) == (player.x, player.y, player.angle):
        return player
    return replace(player, x=x, y=y, angle=angle)
