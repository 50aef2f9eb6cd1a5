"""Tests for the three-pass tile rasterizer."""

from __future__ import annotations

import numpy as np
import pygame

from mosaic import VisualMode
from mosaic.field.generator import compute_color_field
from mosaic.field.grid import TileGrid
from mosaic.renderers.context import PygameDrawingContext
from mosaic.renderers.tile_field import (BACKGROUND_COLOR, HIGHLIGHT_COLOR,
                                         SHADOW_COLOR, TileFieldRenderer)


class TestTileFieldRendererPasses:
    """Validate the fill, highlight and shadow passes against a recording context."""

    def test_operation_counts(self, recording_context) -> None:
        """Style changes are grouped: one per tile plus one per overlay pass."""
        grid = TileFieldRenderer().draw(
            recording_context, 100, 50, clock_ms=1_000.0, visual_mode=VisualMode.NORMAL
        )

        assert (grid.tile_count_x, grid.tile_count_y) == (5, 3)
        assert len(recording_context.rects) == 1 + 5 * grid.tile_count
        assert len(recording_context.style_changes) == grid.tile_count + 3
        assert recording_context.style_changes[-2:] == [HIGHLIGHT_COLOR, SHADOW_COLOR]

    def test_frame_starts_black(self, recording_context) -> None:
        TileFieldRenderer().draw(
            recording_context, 100, 50, clock_ms=0.0, visual_mode=VisualMode.LIGHT
        )

        assert recording_context.rects[0] == (BACKGROUND_COLOR, (0, 0, 100, 50))

    def test_fill_pass_uses_field_colors(self, recording_context) -> None:
        clock_ms = 7_777.0
        TileFieldRenderer().draw(
            recording_context, 48, 48, clock_ms=clock_ms, visual_mode=VisualMode.NORMAL
        )
        colors = compute_color_field(clock_ms, TileGrid(2, 2), VisualMode.NORMAL)

        fills = recording_context.rects[1:5]
        assert fills == [
            (tuple(int(c) for c in colors[0, 0]), (1, 1, 22, 22)),
            (tuple(int(c) for c in colors[0, 1]), (1, 25, 22, 22)),
            (tuple(int(c) for c in colors[1, 0]), (25, 1, 22, 22)),
            (tuple(int(c) for c in colors[1, 1]), (25, 25, 22, 22)),
        ]

    def test_highlight_and_shadow_edges(self, recording_context) -> None:
        """Highlights run along the top and left edges, shadows along bottom and right."""
        TileFieldRenderer().draw(
            recording_context, 24, 24, clock_ms=0.0, visual_mode=VisualMode.NORMAL
        )

        overlays = recording_context.rects[2:]
        assert overlays == [
            (HIGHLIGHT_COLOR, (1, 1, 1, 22)),
            (HIGHLIGHT_COLOR, (1, 1, 22, 1)),
            (SHADOW_COLOR, (22, 2, 1, 21)),
            (SHADOW_COLOR, (2, 22, 21, 1)),
        ]

    def test_empty_surface_only_clears(self, recording_context) -> None:
        grid = TileFieldRenderer().draw(
            recording_context, 0, 0, clock_ms=0.0, visual_mode=VisualMode.NORMAL
        )

        assert grid.is_empty
        assert recording_context.rects == [(BACKGROUND_COLOR, (0, 0, 0, 0))]


class TestTileFieldRendererOnSurface:
    """Render onto a real pygame surface."""

    def test_pixels(self) -> None:
        surface = pygame.Surface((48, 48))
        surface.fill((12, 34, 56))
        clock_ms = 2_500.0

        TileFieldRenderer().draw(
            PygameDrawingContext(surface), 48, 48, clock_ms, VisualMode.NORMAL
        )
        colors = compute_color_field(clock_ms, TileGrid(2, 2), VisualMode.NORMAL)

        # Grout stays black.
        assert tuple(surface.get_at((0, 0)))[:3] == (0, 0, 0)
        assert tuple(surface.get_at((24, 10)))[:3] == (0, 0, 0)
        # Tile interiors carry the field color untouched by the bevels.
        assert tuple(surface.get_at((10, 10)))[:3] == tuple(int(c) for c in colors[0, 0])
        assert tuple(surface.get_at((35, 35)))[:3] == tuple(int(c) for c in colors[1, 1])

        base = np.array(colors[0, 0], dtype=int)
        highlight = np.array(tuple(surface.get_at((1, 10)))[:3])
        shadow = np.array(tuple(surface.get_at((22, 10)))[:3])
        assert (highlight >= base).all()
        assert (shadow <= base).all()
