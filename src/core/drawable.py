from typing import Protocol, Tuple

from core.geom import GeoM
from game.state import Sprite


class Canvas(Protocol):
    def draw_image(self, sprite: Sprite, geom: GeoM) -> None: ...  # noqa: D401

    def draw_text(
        self, text: str, x: float, y: float, color: Tuple[int, int, int, int]
    ) -> None: ...  # noqa: D401
