from __future__ import annotations

from dataclasses import dataclass, field

from mosaic import VisualMode

MIN_SPEED = -5.0
MAX_SPEED = 5.0
DEFAULT_SPEED = 1.0


@dataclass(frozen=True)
class PlaybackState:
    speed: float = DEFAULT_SPEED
    is_adjusting_speed: bool = False
    visual_mode: VisualMode = VisualMode.NORMAL


@dataclass(frozen=True)
class SessionState:
    """Virtual clock plus the playback settings that drive it."""

    clock_ms: float = 0.0
    playback: PlaybackState = field(default_factory=PlaybackState)
