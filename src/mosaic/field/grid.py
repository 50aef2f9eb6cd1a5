from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

import numpy as np

# Size of each tile including the "grout" around it.
TILE_PITCH = 24
TILE_GAP = 1


@dataclass(frozen=True)
class TileGrid:
    tile_count_x: int
    tile_count_y: int
    pitch: int = TILE_PITCH

    @classmethod
    def from_surface(
        cls, width: float, height: float, pitch: int = TILE_PITCH
    ) -> TileGrid:
        """Return the grid that covers a ``width`` x ``height`` surface."""

        return cls(
            tile_count_x=max(math.ceil(width / pitch), 0),
            tile_count_y=max(math.ceil(height / pitch), 0),
            pitch=pitch,
        )

    @property
    def is_empty(self) -> bool:
        return self.tile_count_x == 0 or self.tile_count_y == 0

    @property
    def tile_count(self) -> int:
        return self.tile_count_x * self.tile_count_y

    @property
    def tile_size(self) -> int:
        return self.pitch - 2 * TILE_GAP

    def cells(self) -> Iterator[tuple[int, int]]:
        for x_index in range(self.tile_count_x):
            for y_index in range(self.tile_count_y):
                yield x_index, y_index

    def tile_origin(self, x_index: int, y_index: int) -> tuple[int, int]:
        return x_index * self.pitch + TILE_GAP, y_index * self.pitch + TILE_GAP

    def normalized_position(self, x_index: int, y_index: int) -> tuple[float, float]:
        return x_index / self.tile_count_x, y_index / self.tile_count_y

    def normalized_axes(self) -> tuple[np.ndarray, np.ndarray]:
        """Return ``(x, y)`` position arrays shaped ``(tile_count_x, tile_count_y)``."""

        if self.is_empty:
            empty = np.zeros((self.tile_count_x, self.tile_count_y), dtype=np.float64)
            return empty, empty.copy()
        xs = np.arange(self.tile_count_x, dtype=np.float64) / self.tile_count_x
        ys = np.arange(self.tile_count_y, dtype=np.float64) / self.tile_count_y
        x, y = np.meshgrid(xs, ys, indexing="ij")
        return x, y
