"""Playback controller — the state machine that paces a reading run.

WHY: Tokenizer, fixation, pacing and ramp are pure functions. Something
has to hold the position in the text, decide when the next word is due,
tell the outside world what to show, and guarantee that a stopped run
never fires another callback. That is this module.

HOW: PlaybackController owns one _PlaybackState per run. Each step renders
the current word through the injected callbacks and schedules exactly one
one-shot timer for that word's duration; when it fires, the index
advances, the speed is recomputed from the ramp, and the next step runs.
start() returns a RunHandle that stop() accepts as a cancellation token.

RULES:
- States: idle -> running -> idle (on completion or stop); no pause
- At most one timer is pending while running
- Word N+1 is never shown before word N's duration has elapsed
- stop() cancels the pending timer before clearing state; stale timer
  callbacks are ignored by run id
- start() validates everything before touching state; on EmptyInput or
  InvalidConfig the controller stays exactly as it was
- Progress is reported 1-based: (index + 1, total)
- on_complete fires exactly once per run that reaches the end
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from rsvp_pacer.core.errors import EmptyInput
from rsvp_pacer.core.fixation import fixation_index
from rsvp_pacer.core.models import PlaybackStatus, RunConfig
from rsvp_pacer.core.pacing import base_delay_ms, word_delay_ms
from rsvp_pacer.core.ramp import speed_at
from rsvp_pacer.core.scheduler import Scheduler, TimerHandle
from rsvp_pacer.core.tokenizer import tokenize

logger = logging.getLogger(__name__)

WordCallback = Callable[[str, int], None]
ProgressCallback = Callable[[int, int], None]
SpeedCallback = Callable[[float], None]
EventCallback = Callable[[], None]


@dataclass(frozen=True)
class RunHandle:
    """Cancellation token for one run, returned by start()."""

    run_id: int


@dataclass
class _PlaybackState:
    handle: RunHandle
    tokens: Tuple[str, ...]
    config: RunConfig
    started_at: float
    current_wpm: float
    index: int = 0
    timer: Optional[TimerHandle] = None


def _noop(*args) -> None:
    return None


class PlaybackController:
    """Paces a token sequence through injected callbacks.

    Args:
        scheduler: Timer primitive (AsyncioScheduler, ManualScheduler).
        on_word: Called with (token, fixation_index) for every word shown.
        on_progress: Called with (position, total), position 1-based.
        on_complete: Called once when the last word's duration elapses.
        on_speed: Called with the WPM each word is paced at.
        on_stop: Called once when a running run is stopped explicitly
            (or replaced by a new start()).
    """

    def __init__(
        self,
        scheduler: Scheduler,
        on_word: Optional[WordCallback] = None,
        on_progress: Optional[ProgressCallback] = None,
        on_complete: Optional[EventCallback] = None,
        on_speed: Optional[SpeedCallback] = None,
        on_stop: Optional[EventCallback] = None,
    ) -> None:
        self._scheduler = scheduler
        self._on_word = on_word or _noop
        self._on_progress = on_progress or _noop
        self._on_complete = on_complete or _noop
        self._on_speed = on_speed or _noop
        self._on_stop = on_stop or _noop
        self._state: Optional[_PlaybackState] = None
        self._last_run_id = 0

    # ------------------------------------------------------------------
    # Read-only view
    # ------------------------------------------------------------------

    @property
    def status(self) -> PlaybackStatus:
        return PlaybackStatus.RUNNING if self._state is not None else PlaybackStatus.IDLE

    @property
    def is_running(self) -> bool:
        return self._state is not None

    @property
    def tokens(self) -> Tuple[str, ...]:
        return self._state.tokens if self._state else ()

    @property
    def position(self) -> int:
        """0-based index of the word on screen (0 when idle)."""
        return self._state.index if self._state else 0

    @property
    def total(self) -> int:
        return len(self._state.tokens) if self._state else 0

    @property
    def current_wpm(self) -> Optional[float]:
        return self._state.current_wpm if self._state else None

    # ------------------------------------------------------------------
    # Control surface
    # ------------------------------------------------------------------

    def start(self, text: str, config: RunConfig) -> RunHandle:
        """Begin a new run over *text*, showing the first word immediately.

        A run already in progress is stopped first.

        Raises:
            InvalidConfig: If the speeds or acceleration are unusable.
            EmptyInput: If the text contains no words.
        """
        config.validate()
        tokens = tokenize(text)
        if not tokens:
            raise EmptyInput()

        if self._state is not None:
            logger.debug("Restarting: stopping run %d", self._state.handle.run_id)
            self.stop()

        self._last_run_id += 1
        handle = RunHandle(self._last_run_id)
        self._state = _PlaybackState(
            handle=handle,
            tokens=tokens,
            config=config,
            started_at=self._scheduler.now(),
            current_wpm=speed_at(0.0, config),
        )
        logger.info(
            "Run %d started: %d words, %d -> %d WPM over %d ms",
            handle.run_id, len(tokens), config.start_wpm, config.target_wpm,
            config.acceleration_ms,
        )
        self._step(handle.run_id)
        return handle

    def stop(self, handle: Optional[RunHandle] = None) -> None:
        """End the current run, cancelling its pending timer.

        Idempotent: a no-op when idle, or when *handle* belongs to a run
        that has already ended.
        """
        state = self._state
        if state is None:
            return
        if handle is not None and handle != state.handle:
            logger.debug("Ignoring stop for stale run %d", handle.run_id)
            return
        if state.timer is not None:
            state.timer.cancel()
            state.timer = None
        self._state = None
        logger.info("Run %d stopped at word %d/%d",
                    state.handle.run_id, state.index + 1, len(state.tokens))
        self._on_stop()

    # ------------------------------------------------------------------
    # Step loop
    # ------------------------------------------------------------------

    def _current(self, run_id: int) -> Optional[_PlaybackState]:
        state = self._state
        if state is None or state.handle.run_id != run_id:
            return None
        return state

    def _step(self, run_id: int) -> None:
        state = self._current(run_id)
        if state is None:
            return

        if state.index >= len(state.tokens):
            self._state = None
            logger.info("Run %d completed (%d words)", run_id, len(state.tokens))
            self._on_complete()
            return

        # Any callback may stop or restart the run; nothing of this step
        # reaches the outside world after that.
        token = state.tokens[state.index]
        self._on_word(token, fixation_index(token))
        if self._current(run_id) is not state:
            return
        self._on_progress(state.index + 1, len(state.tokens))
        if self._current(run_id) is not state:
            return
        self._on_speed(state.current_wpm)
        if self._current(run_id) is not state:
            return

        delay = word_delay_ms(token, base_delay_ms(state.current_wpm))
        state.timer = self._scheduler.call_later(delay, lambda: self._advance(run_id))

    def _advance(self, run_id: int) -> None:
        state = self._current(run_id)
        if state is None:
            return
        state.timer = None
        state.index += 1
        elapsed = self._scheduler.now() - state.started_at
        state.current_wpm = speed_at(elapsed, state.config)
        self._step(run_id)
