"""Dataclasses shared by the controller, the planner and the formatters.

WHY: The engine, the timeline formatters and the outer surfaces all talk
about the same few things: a run configuration, the controller's status,
and the words of a planned run with their timing. Defining them once keeps
every layer in agreement.

HOW: Four types:
  RunConfig      — start/target speed and acceleration window for one run
  PlaybackStatus — the controller's two states (idle, running)
  TimedWord      — one displayed word with fixation, start time and duration
  Timeline       — every TimedWord of a planned run plus its config

RULES:
- RunConfig is frozen; validate() raises InvalidConfig on bad values
- Speeds are words per minute, times are float milliseconds
- TimedWord.index is 0-based; progress callbacks add 1
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from rsvp_pacer.core.errors import InvalidConfig


class PlaybackStatus(str, enum.Enum):
    """States of the playback controller.

    RULES:
    - idle: no run loaded (initial state, after completion, after stop)
    - running: a timer is pending or a step is executing
    - There is no paused state; stopping discards the position
    """

    IDLE = "idle"
    RUNNING = "running"


@dataclass(frozen=True)
class RunConfig:
    """Speed settings supplied once at the start of a run.

    WHY: The ramp needs both ends of the speed range plus the length of
    the window over which it climbs.

    RULES:
    - start_wpm and target_wpm must both be positive
    - acceleration_ms must be >= 0; 0 disables the ramp
    - With a ramp, start_wpm must be strictly lower than target_wpm
    - Without a ramp the run plays at target_wpm throughout, so
      start_wpm == target_wpm is accepted
    """

    start_wpm: int
    target_wpm: int
    acceleration_ms: int = 0

    @property
    def ramp_enabled(self) -> bool:
        return self.acceleration_ms > 0

    def validate(self) -> None:
        """Raise InvalidConfig if this configuration cannot drive a run."""
        if self.start_wpm <= 0 or self.target_wpm <= 0:
            raise InvalidConfig("Speeds must be positive words per minute.")
        if self.acceleration_ms < 0:
            raise InvalidConfig("Acceleration time cannot be negative.")
        if self.start_wpm > self.target_wpm or (
            self.ramp_enabled and self.start_wpm == self.target_wpm
        ):
            raise InvalidConfig("Start speed must be lower than target speed.")


@dataclass
class TimedWord:
    """One word of a planned run.

    RULES:
    - start_ms is measured from the start of the run
    - duration_ms already includes the punctuation pause
    - wpm is the speed the word was paced at
    """

    index: int
    text: str
    fixation_index: int
    start_ms: float
    duration_ms: float
    wpm: float

    @property
    def end_ms(self) -> float:
        return self.start_ms + self.duration_ms


@dataclass
class Timeline:
    """Every word of a planned run, in display order.

    RULES:
    - words are ordered by start_ms, back to back with no gaps
    - total_ms is the end of the last word (0.0 for an empty timeline)
    """

    config: RunConfig
    words: list[TimedWord] = field(default_factory=list)

    @property
    def total_ms(self) -> float:
        return self.words[-1].end_ms if self.words else 0.0
