"""Plain text formatter — a human-readable pacing table.

WHY: When tuning speeds it helps to eyeball the schedule: which words get
the long pauses, how fast the ramp climbs, how long the whole text takes.

HOW: One header line with the configuration, then one line per word with
start time, duration, speed and the word itself, then a total.

RULES:
- One output file with suffix ``-rsvp.txt``
- Times in milliseconds with no decimals, WPM with no decimals
- Lines end with ``\\n``
"""

from __future__ import annotations

from typing import List

from rsvp_pacer.core.models import Timeline
from rsvp_pacer.formatters.base import BaseFormatter, FormatterOutput


class PlainTextFormatter(BaseFormatter):
    """Formatter producing a fixed-width pacing table."""

    @property
    def name(self) -> str:
        return "Plain Text"

    def format(self, timeline: Timeline) -> List[FormatterOutput]:
        config = timeline.config
        lines: List[str] = [
            "# {} -> {} WPM, acceleration {} ms, {} words".format(
                config.start_wpm, config.target_wpm, config.acceleration_ms,
                len(timeline.words),
            ),
        ]
        for w in timeline.words:
            lines.append("{:>9.0f} {:>7.0f} {:>5.0f}  {}".format(
                w.start_ms, w.duration_ms, w.wpm, w.text,
            ))
        lines.append("# total {:.0f} ms".format(timeline.total_ms))
        return [FormatterOutput(
            suffix="-rsvp.txt",
            content="\n".join(lines) + "\n",
            media_type="text/plain",
        )]
