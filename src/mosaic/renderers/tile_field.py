from __future__ import annotations

import time

import numpy as np

from mosaic import VisualMode
from mosaic.field.generator import compute_color_field
from mosaic.field.grid import TileGrid
from mosaic.renderers.context import DrawingContext
from mosaic.utilities.logging import get_logger

logger = get_logger(__name__)

BACKGROUND_COLOR = (0, 0, 0)
# rgba(255,255,255,0.32) and rgba(0,0,0,0.2)
HIGHLIGHT_COLOR = (255, 255, 255, 82)
SHADOW_COLOR = (0, 0, 0, 51)


class TileFieldRenderer:
    """Paint the color field as a grid of beveled tiles.

    Highlights and shadows are drawn in their own passes after the tile
    colors, and each pass sets the fill style exactly once.
    """

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def draw(
        self,
        ctx: DrawingContext,
        width: int,
        height: int,
        clock_ms: float,
        visual_mode: VisualMode,
    ) -> TileGrid:
        start_ns = time.perf_counter_ns()
        grid = TileGrid.from_surface(width, height)

        # Each frame starts black.
        ctx.fill_style = BACKGROUND_COLOR
        ctx.fill_rect(0, 0, width, height)

        if not grid.is_empty:
            colors = compute_color_field(clock_ms, grid, visual_mode)
            self._fill_pass(ctx, grid, colors)
            self._highlight_pass(ctx, grid)
            self._shadow_pass(ctx, grid)

        logger.debug(
            "renderer.frame",
            extra={
                "renderer": self.name,
                "tiles": grid.tile_count,
                "duration_ms": (time.perf_counter_ns() - start_ns) / 1_000_000,
            },
        )
        return grid

    def _fill_pass(
        self, ctx: DrawingContext, grid: TileGrid, colors: np.ndarray
    ) -> None:
        tile_size = grid.tile_size
        for x_index, y_index in grid.cells():
            red, green, blue = colors[x_index, y_index]
            ctx.fill_style = (int(red), int(green), int(blue))
            tile_x, tile_y = grid.tile_origin(x_index, y_index)
            ctx.fill_rect(tile_x, tile_y, tile_size, tile_size)

    def _highlight_pass(self, ctx: DrawingContext, grid: TileGrid) -> None:
        tile_size = grid.tile_size
        ctx.fill_style = HIGHLIGHT_COLOR
        for x_index, y_index in grid.cells():
            tile_x, tile_y = grid.tile_origin(x_index, y_index)
            ctx.fill_rect(tile_x, tile_y, 1, tile_size)
            ctx.fill_rect(tile_x, tile_y, tile_size, 1)

    def _shadow_pass(self, ctx: DrawingContext, grid: TileGrid) -> None:
        tile_size = grid.tile_size
        ctx.fill_style = SHADOW_COLOR
        for x_index, y_index in grid.cells():
            tile_x, tile_y = grid.tile_origin(x_index, y_index)
            ctx.fill_rect(tile_x + tile_size - 1, tile_y + 1, 1, tile_size - 1)
            ctx.fill_rect(tile_x + 1, tile_y + tile_size - 1, tile_size - 1, 1)
