"""Player/obstacle collision test.

The player is treated as a single point (its top-left corner) and the
obstacle as the axis-aligned rectangle covered by its sprite. Touching an
edge doesn't count.
"""

from __future__ import annotations

from game.state import Obstacle, Player


def point_in_rect(px: float, py: float, x: float, y: float, w: float, h: float) -> bool:
    """Strict point-in-rectangle test; points on the border are outside."""
    return x < px < x + w and y < py < y + h


def hit(player: Player, obstacle: Obstacle) -> bool:
    return point_in_rect(
        player.x,
        player.y,
        obstacle.x,
        obstacle.y,
        obstacle.sprite.width,
        obstacle.sprite.height,
    )
