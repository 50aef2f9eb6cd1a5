from __future__ import annotations

from typing import Protocol

import pygame

ColorValue = pygame.Color | str | tuple[int, int, int] | tuple[int, int, int, int]


class DrawingContext(Protocol):
    """The slice of a 2D canvas API the renderers paint through."""

    @property
    def fill_style(self) -> pygame.Color: ...

    @fill_style.setter
    def fill_style(self, value: ColorValue) -> None: ...

    def fill_rect(self, x: int, y: int, width: int, height: int) -> None: ...


class PygameDrawingContext:
    """Canvas-style fill API on top of a pygame surface.

    Opaque fills go straight to ``Surface.fill``. Translucent fills blit a
    cached patch so they blend with what is already drawn.
    """

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self._fill_style = pygame.Color(0, 0, 0)
        self._patch_cache: dict[tuple[int, int, tuple[int, ...]], pygame.Surface] = {}

    @property
    def fill_style(self) -> pygame.Color:
        return self._fill_style

    @fill_style.setter
    def fill_style(self, value: ColorValue) -> None:
        self._fill_style = pygame.Color(value)

    def fill_rect(self, x: int, y: int, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            return
        color = self._fill_style
        if color.a == 255:
            self.surface.fill(color, pygame.Rect(x, y, width, height))
            return
        self.surface.blit(self._translucent_patch(width, height, color), (x, y))

    def _translucent_patch(
        self, width: int, height: int, color: pygame.Color
    ) -> pygame.Surface:
        key = (width, height, tuple(color))
        patch = self._patch_cache.get(key)
        if patch is None:
            patch = pygame.Surface((width, height), pygame.SRCALPHA)
            patch.fill(color)
            self._patch_cache[key] = patch
        return patch
