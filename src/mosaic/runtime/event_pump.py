from __future__ import annotations

from typing import Iterable

import pygame

from mosaic.input.pointer import PointerInput
from mosaic.utilities.logging import get_logger

logger = get_logger(__name__)


class EventPump:
    """Process pygame events and update runtime flags."""

    def __init__(self, pointer_input: PointerInput) -> None:
        self._pointer_input = pointer_input

    def pump(self, running: bool, surface_size: tuple[int, int]) -> bool:
        return self.process(pygame.event.get(), running, surface_size)

    def process(
        self,
        events: Iterable[pygame.event.Event],
        running: bool,
        surface_size: tuple[int, int],
    ) -> bool:
        for event in events:
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                logger.info("Escape pressed, stopping")
                running = False
            elif event.type == pygame.VIDEORESIZE:
                logger.debug("Window resized to %s", event.size)
            else:
                self._pointer_input.handle_event(event, surface_size)
        return running
