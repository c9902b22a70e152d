"""Shared test fixtures for the rsvp_pacer test suite.

WHY: The controller, planner and formatter tests all need the same sample
text, the same two run configurations, a virtual clock, and a way to
record the controller's events in order.

HOW: Pytest fixtures provide a ManualScheduler, an EventRecorder wired
into a PlaybackController, a constant-speed config (600 WPM, 100 ms per
word) and a ramped config (100 → 300 WPM over 10 s).

RULES:
- No test sleeps; all timing runs on ManualScheduler
- EventRecorder.events keeps every callback as a tuple, in call order
"""

from typing import Any, List, Tuple

import pytest

from rsvp_pacer.core.controller import PlaybackController
from rsvp_pacer.core.models import RunConfig
from rsvp_pacer.core.scheduler import ManualScheduler

SAMPLE_TEXT = "One. Two, three!"


class EventRecorder:
    """Collects controller callbacks as (kind, *args) tuples."""

    def __init__(self) -> None:
        self.events: List[Tuple[Any, ...]] = []

    def on_word(self, token: str, fixation: int) -> None:
        self.events.append(("word", token, fixation))

    def on_progress(self, position: int, total: int) -> None:
        self.events.append(("progress", position, total))

    def on_speed(self, wpm: float) -> None:
        self.events.append(("speed", wpm))

    def on_complete(self) -> None:
        self.events.append(("complete",))

    def on_stop(self) -> None:
        self.events.append(("stop",))

    def of(self, kind: str) -> List[Tuple[Any, ...]]:
        return [e for e in self.events if e[0] == kind]

    @property
    def words(self) -> List[str]:
        return [e[1] for e in self.of("word")]


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def recorder():
    return EventRecorder()


@pytest.fixture
def controller(scheduler, recorder):
    return PlaybackController(
        scheduler,
        on_word=recorder.on_word,
        on_progress=recorder.on_progress,
        on_complete=recorder.on_complete,
        on_speed=recorder.on_speed,
        on_stop=recorder.on_stop,
    )


@pytest.fixture
def constant_config():
    """600 WPM throughout: a 100 ms base delay per word."""
    return RunConfig(start_wpm=600, target_wpm=600, acceleration_ms=0)


@pytest.fixture
def ramp_config():
    return RunConfig(start_wpm=100, target_wpm=300, acceleration_ms=10_000)
