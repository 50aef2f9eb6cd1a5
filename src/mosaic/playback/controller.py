from __future__ import annotations

import random
from dataclasses import replace
from functools import cached_property

import pygame
import reactivex
from reactivex import operators as ops
from reactivex.abc import DisposableBase, SchedulerBase
from reactivex.scheduler.mainloop import PyGameScheduler
from reactivex.subject.behaviorsubject import BehaviorSubject

from mosaic import VisualMode
from mosaic.playback.state import (MAX_SPEED, MIN_SPEED, PlaybackState,
                                   SessionState)
from mosaic.utilities.logging import get_logger

logger = get_logger(__name__)

# Randomizing the start time randomizes the start of the whole experience.
INITIAL_CLOCK_RANGE_MS = 60_000
# Keeps a click that ends a drag from also toggling the mode.
SPEED_ADJUST_GRACE_MS = 150
SPEED_RANGE = MAX_SPEED - MIN_SPEED
LIGHT_MODE_DAMPING = 0.5


class PlaybackController:
    """Own the virtual clock and the playback settings that advance it."""

    def __init__(
        self,
        *,
        scheduler: SchedulerBase | None = None,
        rng: random.Random | None = None,
        initial_clock_ms: float | None = None,
        grace_period_ms: float = SPEED_ADJUST_GRACE_MS,
    ) -> None:
        self._scheduler = scheduler or PyGameScheduler(pygame)
        self._rng = rng or random.Random()
        if initial_clock_ms is None:
            initial_clock_ms = self._rng.random() * INITIAL_CLOCK_RANGE_MS
        self._grace_period_ms = grace_period_ms
        self._state = SessionState(clock_ms=initial_clock_ms)
        self._pending_end: DisposableBase | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def clock_ms(self) -> float:
        return self._state.clock_ms

    @property
    def playback(self) -> PlaybackState:
        return self._state.playback

    @property
    def speed(self) -> float:
        return self._state.playback.speed

    @speed.setter
    def speed(self, value: float) -> None:
        self._update_playback(speed=min(max(value, MIN_SPEED), MAX_SPEED))

    @property
    def has_pending_end(self) -> bool:
        return self._pending_end is not None

    @cached_property
    def _playback_subject(self) -> BehaviorSubject[PlaybackState]:
        return BehaviorSubject(self._state.playback)

    def observe_playback(self) -> reactivex.Observable[PlaybackState]:
        return self._playback_subject.pipe(ops.distinct_until_changed())

    def advance(self, frame_delta_ms: float) -> None:
        playback = self._state.playback
        # Light mode slows things down more.
        damping = LIGHT_MODE_DAMPING if playback.visual_mode is VisualMode.LIGHT else 1.0
        clock_ms = self._state.clock_ms + frame_delta_ms * damping * playback.speed
        self._state = replace(self._state, clock_ms=clock_ms)

    def begin_speed_adjust(self) -> None:
        self._cancel_pending_end()
        if not self._state.playback.is_adjusting_speed:
            logger.info("Speed adjustment started")
        self._update_playback(is_adjusting_speed=True)

    def update_speed_from_pointer_x(
        self, pointer_x: float | None, surface_width: float
    ) -> None:
        if not self._state.playback.is_adjusting_speed:
            return
        if pointer_x is None or surface_width <= 0:
            return
        position = pointer_x / surface_width
        self.speed = (position - 0.5) * SPEED_RANGE

    def end_speed_adjust(self) -> None:
        if not self._state.playback.is_adjusting_speed:
            return
        self._cancel_pending_end()
        self._pending_end = self._scheduler.schedule_relative(
            self._grace_period_ms / 1000,
            lambda *_: self._finish_speed_adjust(),
        )

    def toggle_mode(self) -> None:
        playback = self._state.playback
        if playback.is_adjusting_speed:
            logger.debug("Ignoring mode toggle while adjusting speed")
            return
        visual_mode = playback.visual_mode.toggled()
        logger.info("Switching to %s mode", visual_mode.name)
        self._update_playback(visual_mode=visual_mode)

    def _finish_speed_adjust(self) -> None:
        self._pending_end = None
        logger.info("Speed adjustment ended at %.2f", self._state.playback.speed)
        self._update_playback(is_adjusting_speed=False)

    def _cancel_pending_end(self) -> None:
        if self._pending_end is not None:
            self._pending_end.dispose()
            self._pending_end = None

    def _update_playback(self, **changes: object) -> None:
        playback = replace(self._state.playback, **changes)
        self._state = replace(self._state, playback=playback)
        self._playback_subject.on_next(playback)
