"""2D affine transform used when drawing images.

``GeoM`` is a 3x3 homogeneous matrix. Operations compose in call order:
``GeoM().rotate(a).translate(x, y)`` rotates around the origin first and
then moves the result, which is how the player sprite is placed.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Tuple

import numpy as np


class GeoM:
    def __init__(self, matrix: np.ndarray | None = None) -> None:
        self.matrix = np.identity(3, dtype=np.float64) if matrix is None else matrix

    def _then(self, m: np.ndarray) -> "GeoM":
        return GeoM(m @ self.matrix)

    def translate(self, tx: float, ty: float) -> "GeoM":
        m = np.identity(3, dtype=np.float64)
        m[0, 2] = tx
        m[1, 2] = ty
        return self._then(m)

    def rotate(self, theta: float) -> "GeoM":
        """Rotate by ``theta`` radians, clockwise on a y-down screen."""
        c = math.cos(theta)
        s = math.sin(theta)
        m = np.array(
            [
                [c, -s, 0.0],
                [s, c, 0.0],
                [0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )
        return self._then(m)

    def apply(self, x: float, y: float) -> Tuple[float, float]:
        px, py, _ = self.matrix @ np.array([x, y, 1.0], dtype=np.float64)
        return float(px), float(py)

    def apply_all(self, points: Iterable[Tuple[float, float]]) -> List[Tuple[float, float]]:
        pts = np.array([[x, y, 1.0] for x, y in points], dtype=np.float64)
        if pts.size == 0:
            return []
        out = pts @ self.matrix.T
        return [(float(x), float(y)) for x, y, _ in out]

    def quad(self, width: float, height: float) -> List[Tuple[float, float]]:
        """Corners of a ``width`` x ``height`` image, clockwise from top-left."""
        return self.apply_all([(0.0, 0.0), (width, 0.0), (width, height), (0.0, height)])

    def __repr__(self) -> str:
        return f"GeoM({self.matrix[:2].tolist()})"
