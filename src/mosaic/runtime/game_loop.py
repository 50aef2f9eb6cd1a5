from __future__ import annotations

import logging
import time

import pygame
from reactivex.scheduler.mainloop import PyGameScheduler

from mosaic.playback.controller import PlaybackController
from mosaic.renderers.context import DrawingContext, PygameDrawingContext
from mosaic.renderers.speed_display import SpeedDisplay
from mosaic.renderers.tile_field import TileFieldRenderer
from mosaic.runtime.display_context import DisplayContext
from mosaic.runtime.event_pump import EventPump
from mosaic.utilities.logging import FrameLogSampler, get_logger

logger = get_logger(__name__)


class GameLoop:
    """Drive the tick/draw cycle for the tile field."""

    def __init__(
        self,
        display: DisplayContext,
        controller: PlaybackController,
        tile_renderer: TileFieldRenderer,
        speed_display: SpeedDisplay,
        event_pump: EventPump,
        scheduler: PyGameScheduler,
        frame_log: FrameLogSampler,
        max_fps: int,
    ) -> None:
        self.display = display
        self.controller = controller
        self.tile_renderer = tile_renderer
        self.speed_display = speed_display
        self.event_pump = event_pump
        self.scheduler = scheduler
        self.frame_log = frame_log
        self.max_fps = max_fps
        self.running = False
        self.initialized = False
        self._context: PygameDrawingContext | None = None

    @property
    def speed(self) -> float:
        return self.controller.speed

    @speed.setter
    def speed(self, value: float) -> None:
        self.controller.speed = value

    def on_tick(self, sim_time_ms: float) -> None:
        self.controller.advance(sim_time_ms)

    def on_draw(self, ctx: DrawingContext, width: int, height: int) -> None:
        self.tile_renderer.draw(
            ctx,
            width,
            height,
            clock_ms=self.controller.clock_ms,
            visual_mode=self.controller.playback.visual_mode,
        )

    def start(self) -> None:
        logger.info("Starting GameLoop")
        if not self.initialized:
            self.display.initialize()
            self.initialized = True
        self.display.ensure_initialized()

        self.running = True
        logger.info("Entering main loop.")
        try:
            self._run_main_loop()
        finally:
            logger.info("Shutting down GameLoop.")
            self.speed_display.dispose()
            pygame.quit()

    def run_frame(self, frame_delta_ms: float) -> None:
        """Advance virtual time by one frame and paint it onto the screen."""

        screen = self.display.screen
        if screen is None:
            raise RuntimeError("Screen is not initialized")

        start = time.monotonic()
        self.on_tick(frame_delta_ms)
        width, height = screen.get_size()
        self.on_draw(self._drawing_context(screen), width, height)
        self.speed_display.draw(screen)

        self.frame_log.log(
            key="game_loop.frame",
            logger=logger,
            level=logging.DEBUG,
            msg="Frame drawn in %.2fms (clock=%.0fms, speed=%.2f)",
            args=(
                (time.monotonic() - start) * 1000,
                self.controller.clock_ms,
                self.controller.speed,
            ),
        )

    def _run_main_loop(self) -> None:
        clock = self.display.clock
        if clock is None:
            raise RuntimeError("GameLoop failed to initialize display clock")
        while self.running:
            self.running = self.event_pump.pump(self.running, self.display.get_size())
            if not self.running:
                break
            self.scheduler.run()
            surface = pygame.display.get_surface()
            if surface is not None:
                # Resizable windows hand back a new display surface.
                self.display.set_screen(surface)
            self.run_frame(max(clock.get_time(), 0))
            pygame.display.flip()
            clock.tick(self.max_fps)

    def _drawing_context(self, screen: pygame.Surface) -> PygameDrawingContext:
        if self._context is None or self._context.surface is not screen:
            self._context = PygameDrawingContext(screen)
        return self._context
