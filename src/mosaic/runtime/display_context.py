from __future__ import annotations

from dataclasses import dataclass

import pygame

from mosaic.utilities.logging import get_logger

logger = get_logger(__name__)

WINDOW_CAPTION = "mosaic"


@dataclass
class DisplayContext:
    """Track and initialize pygame display resources."""

    size: tuple[int, int]
    fullscreen: bool = False
    resizable: bool = True
    screen: pygame.Surface | None = None
    clock: pygame.time.Clock | None = None

    def initialize(self) -> None:
        pygame.init()
        logger.info(
            "Opening %dx%d window (fullscreen=%s)",
            self.size[0],
            self.size[1],
            self.fullscreen,
        )
        size = (0, 0) if self.fullscreen else self.size
        self.screen = pygame.display.set_mode(size, self._display_flags())
        pygame.display.set_caption(WINDOW_CAPTION)
        self.clock = pygame.time.Clock()

    def ensure_initialized(self) -> None:
        if self.clock is None or self.screen is None:
            raise RuntimeError("GameLoop failed to initialize display surfaces")

    def set_screen(self, screen: pygame.Surface) -> None:
        self.screen = screen

    def get_size(self) -> tuple[int, int]:
        if self.screen is None:
            raise RuntimeError("Screen is not initialized")
        return self.screen.get_size()

    def _display_flags(self) -> int:
        if self.fullscreen:
            return pygame.FULLSCREEN
        if self.resizable:
            return pygame.RESIZABLE
        return 0
