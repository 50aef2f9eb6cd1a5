from __future__ import annotations

import math

import pygame
from reactivex.abc import DisposableBase

from mosaic.playback.controller import PlaybackController
from mosaic.playback.state import PlaybackState

FONT_SIZE = 28
TEXT_COLOR = (255, 255, 255)
BACKDROP_COLOR = (0, 0, 0, 140)
PADDING = 8
# Distance between the bottom edge and the text baseline area.
BOTTOM_MARGIN = 56


def format_speed(speed: float) -> str:
    return f"Speed: {math.floor(speed * 100)}%"


class SpeedDisplay:
    """Overlay showing the playback speed while it is being adjusted."""

    def __init__(self, controller: PlaybackController) -> None:
        self.visible = False
        self.text = format_speed(controller.speed)
        self._font: pygame.font.Font | None = None
        self._subscription: DisposableBase | None = controller.observe_playback().subscribe(
            on_next=self._on_playback
        )

    def _on_playback(self, playback: PlaybackState) -> None:
        self.visible = playback.is_adjusting_speed
        if playback.is_adjusting_speed:
            self.text = format_speed(playback.speed)

    def draw(self, surface: pygame.Surface) -> None:
        if not self.visible:
            return
        label = self._get_font().render(self.text, True, TEXT_COLOR)
        backdrop = pygame.Surface(
            (label.get_width() + PADDING * 2, label.get_height() + PADDING * 2),
            pygame.SRCALPHA,
        )
        backdrop.fill(BACKDROP_COLOR)
        backdrop.blit(label, (PADDING, PADDING))

        width, height = surface.get_size()
        position = (
            (width - backdrop.get_width()) // 2,
            height - BOTTOM_MARGIN - backdrop.get_height(),
        )
        surface.blit(backdrop, position)

    def dispose(self) -> None:
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, FONT_SIZE)
        return self._font
