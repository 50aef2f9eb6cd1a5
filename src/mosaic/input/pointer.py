from __future__ import annotations

from dataclasses import dataclass

import pygame

from mosaic.playback.controller import PlaybackController
from mosaic.utilities.logging import get_logger

logger = get_logger(__name__)

# Speed is scrubbed by dragging along the bottom of the window. Center pauses,
# left reverses, right speeds up.
CONTROL_AREA_HEIGHT = 44
PRIMARY_BUTTON = 1


@dataclass(frozen=True)
class PointerEvent:
    client_x: float | None = None
    client_y: float | None = None

    @classmethod
    def from_pygame(cls, event: pygame.event.Event) -> PointerEvent:
        pos = getattr(event, "pos", None)
        if pos is None:
            return cls()
        return cls(client_x=pos[0], client_y=pos[1])


class PointerInput:
    """Translate pointer gestures into playback controller operations."""

    def __init__(self, controller: PlaybackController) -> None:
        self._controller = controller

    def pointer_down(self, event: PointerEvent, surface_size: tuple[int, int]) -> None:
        if event.client_y is None:
            return
        _, height = surface_size
        if event.client_y >= height - CONTROL_AREA_HEIGHT:
            self._controller.begin_speed_adjust()
            self.pointer_move(event, surface_size)

    def pointer_move(self, event: PointerEvent, surface_size: tuple[int, int]) -> None:
        width, _ = surface_size
        self._controller.update_speed_from_pointer_x(event.client_x, width)

    def pointer_up(self, event: PointerEvent, surface_size: tuple[int, int]) -> None:
        self._controller.end_speed_adjust()

    def click(self) -> None:
        self._controller.toggle_mode()

    def handle_event(
        self, event: pygame.event.Event, surface_size: tuple[int, int]
    ) -> bool:
        """Dispatch a pygame mouse event. Returns ``True`` if it was consumed."""

        if event.type == pygame.MOUSEBUTTONDOWN:
            if getattr(event, "button", PRIMARY_BUTTON) != PRIMARY_BUTTON:
                return False
            self.pointer_down(PointerEvent.from_pygame(event), surface_size)
            return True
        if event.type == pygame.MOUSEMOTION:
            self.pointer_move(PointerEvent.from_pygame(event), surface_size)
            return True
        if event.type == pygame.MOUSEBUTTONUP:
            if getattr(event, "button", PRIMARY_BUTTON) != PRIMARY_BUTTON:
                return False
            # A release is followed by a click, same as the browser ordering.
            self.pointer_up(PointerEvent.from_pygame(event), surface_size)
            self.click()
            return True
        return False
