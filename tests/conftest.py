from dataclasses import dataclass, field
from typing import Any, Callable

import pygame
import pytest
from hypothesis import HealthCheck, settings
from reactivex.disposable import Disposable

from mosaic.playback.controller import PlaybackController

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")


@dataclass
class _ScheduledAction:
    duetime: float
    action: Callable[..., Any]
    state: Any = None
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class StubScheduler:
    """Collects relative actions and runs them only when asked to."""

    scheduled: list[_ScheduledAction] = field(default_factory=list)

    def schedule_relative(self, duetime, action, state=None) -> Disposable:
        scheduled = _ScheduledAction(duetime=duetime, action=action, state=state)
        self.scheduled.append(scheduled)
        return Disposable(scheduled.cancel)

    @property
    def pending(self) -> list[_ScheduledAction]:
        return [item for item in self.scheduled if not item.cancelled]

    def run(self) -> None:
        due, self.scheduled = self.scheduled, []
        for item in due:
            if not item.cancelled:
                item.action(self, item.state)


class RecordingContext:
    """Drawing context that records fill styles and rectangles."""

    def __init__(self) -> None:
        self._fill_style: Any = None
        self.style_changes: list[Any] = []
        self.rects: list[tuple[Any, tuple[int, int, int, int]]] = []

    @property
    def fill_style(self) -> Any:
        return self._fill_style

    @fill_style.setter
    def fill_style(self, value: Any) -> None:
        self._fill_style = value
        self.style_changes.append(value)

    def fill_rect(self, x: int, y: int, width: int, height: int) -> None:
        self.rects.append((self._fill_style, (x, y, width, height)))


@pytest.fixture(autouse=True)
def dummy_sdl_video_driver(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    yield


@pytest.fixture(autouse=True)
def init_pygame() -> None:
    pygame.init()


@pytest.fixture()
def stub_scheduler() -> StubScheduler:
    return StubScheduler()


@pytest.fixture()
def controller(stub_scheduler: StubScheduler) -> PlaybackController:
    return PlaybackController(scheduler=stub_scheduler, initial_clock_ms=0.0)


@pytest.fixture()
def recording_context() -> RecordingContext:
    return RecordingContext()
