from __future__ import annotations

from typing import Any, Mapping

import pygame
from lagom import Singleton
from reactivex.scheduler.mainloop import PyGameScheduler

from mosaic.input.pointer import PointerInput
from mosaic.playback.controller import PlaybackController
from mosaic.renderers.speed_display import SpeedDisplay
from mosaic.renderers.tile_field import TileFieldRenderer
from mosaic.runtime.container import RuntimeContainer
from mosaic.runtime.display_context import DisplayContext
from mosaic.runtime.event_pump import EventPump
from mosaic.runtime.game_loop import GameLoop
from mosaic.utilities.env import Configuration
from mosaic.utilities.logging import FrameLogSampler, get_logger

logger = get_logger(__name__)


def build_runtime_container(
    *,
    window_size: tuple[int, int] | None = None,
    fullscreen: bool | None = None,
    max_fps: int | None = None,
    overrides: Mapping[type[Any], object] | None = None,
) -> RuntimeContainer:
    """Wire the runtime services; unset arguments fall back to the environment."""

    container = RuntimeContainer()
    logger.debug(
        "Configuring Lagom runtime container with overrides=%s.",
        set(overrides.keys()) if overrides else set(),
    )

    resolved_size = window_size or Configuration.window_size()
    resolved_fullscreen = Configuration.fullscreen() if fullscreen is None else fullscreen
    resolved_max_fps = Configuration.max_fps() if max_fps is None else max_fps

    _bind(
        container,
        overrides,
        DisplayContext,
        Singleton(
            lambda _: DisplayContext(
                size=resolved_size,
                fullscreen=resolved_fullscreen,
                resizable=Configuration.resizable(),
            )
        ),
    )
    _bind(container, overrides, PyGameScheduler, Singleton(lambda _: PyGameScheduler(pygame)))
    _bind(
        container,
        overrides,
        FrameLogSampler,
        Singleton(lambda _: FrameLogSampler(Configuration.frame_log_interval_seconds())),
    )
    _bind(
        container,
        overrides,
        PlaybackController,
        Singleton(lambda c: PlaybackController(scheduler=c[PyGameScheduler])),
    )
    _bind(container, overrides, TileFieldRenderer, Singleton(lambda _: TileFieldRenderer()))
    _bind(
        container,
        overrides,
        SpeedDisplay,
        Singleton(lambda c: SpeedDisplay(c[PlaybackController])),
    )
    _bind(
        container,
        overrides,
        PointerInput,
        Singleton(lambda c: PointerInput(c[PlaybackController])),
    )
    _bind(container, overrides, EventPump, Singleton(lambda c: EventPump(c[PointerInput])))
    _bind(
        container,
        overrides,
        GameLoop,
        Singleton(
            lambda c: GameLoop(
                display=c[DisplayContext],
                controller=c[PlaybackController],
                tile_renderer=c[TileFieldRenderer],
                speed_display=c[SpeedDisplay],
                event_pump=c[EventPump],
                scheduler=c[PyGameScheduler],
                frame_log=c[FrameLogSampler],
                max_fps=resolved_max_fps,
            )
        ),
    )
    return container


def _bind(
    container: RuntimeContainer,
    overrides: Mapping[type[Any], object] | None,
    key: type[Any],
    value: object,
) -> None:
    if overrides and key in overrides:
        container[key] = overrides[key]
        logger.debug("Applied Lagom override for %s.", key)
        return
    container[key] = value
    logger.debug("Registered Lagom provider for %s.", key)
