"""Plan a whole reading run up front.

WHY: Exporters (JSON, SRT, plain text) and the HTTP API need the exact
schedule a run would follow (every word, its fixation point, when it
appears and for how long) without waiting for it in real time.

HOW: Runs the real PlaybackController on a ManualScheduler and records
each word as it is shown. The virtual clock means the ramp sees the same
elapsed times a live run would, so the plan and the live run never drift
apart.

RULES:
- Raises the same errors as PlaybackController.start
- Words are back to back: each start_ms is the previous end_ms
- The planner never sleeps
"""

from __future__ import annotations

import logging
from typing import List

from rsvp_pacer.core.controller import PlaybackController
from rsvp_pacer.core.models import RunConfig, TimedWord, Timeline
from rsvp_pacer.core.pacing import base_delay_ms, word_delay_ms
from rsvp_pacer.core.scheduler import ManualScheduler

logger = logging.getLogger(__name__)


def plan_timeline(text: str, config: RunConfig) -> Timeline:
    """Return the Timeline a live run over *text* would follow.

    Raises:
        InvalidConfig: If the speeds or acceleration are unusable.
        EmptyInput: If the text contains no words.
    """
    scheduler = ManualScheduler()
    words: List[TimedWord] = []
    pending: dict = {}

    def on_word(token: str, fixation: int) -> None:
        pending["text"] = token
        pending["fixation"] = fixation

    def on_speed(wpm: float) -> None:
        token = pending["text"]
        words.append(TimedWord(
            index=len(words),
            text=token,
            fixation_index=pending["fixation"],
            start_ms=scheduler.now(),
            duration_ms=word_delay_ms(token, base_delay_ms(wpm)),
            wpm=wpm,
        ))

    controller = PlaybackController(scheduler, on_word=on_word, on_speed=on_speed)
    controller.start(text, config)
    # One timer fires per word, however long the text.
    scheduler.run_until_idle(limit=controller.total)

    timeline = Timeline(config=config, words=words)
    logger.debug("Planned %d words, %.0f ms total", len(words), timeline.total_ms)
    return timeline
