"""SRT formatter — one subtitle cue per word.

WHY: Burning an RSVP run into a video (or previewing it in any media
player) is easiest as a subtitle track where each cue is one word.

HOW: Walks the Timeline and writes one cue per word using its start and
end times. The fixation glyph is wrapped in square brackets, e.g.
``ele[p]hant``, since SRT has no portable highlight markup.

RULES:
- One output file with suffix ``-rsvp.srt``
- Cue numbers start at 1
- Timestamps are HH:MM:SS,mmm, rounded to the nearest millisecond
- Cues are separated by one blank line; file ends with a newline
"""

from __future__ import annotations

from typing import List

from rsvp_pacer.core.fixation import split_at_fixation
from rsvp_pacer.core.models import Timeline
from rsvp_pacer.formatters.base import BaseFormatter, FormatterOutput


def format_timestamp(ms: float) -> str:
    """Format milliseconds as an SRT timestamp (HH:MM:SS,mmm)."""
    total = int(round(ms))
    hours, rest = divmod(total, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    seconds, millis = divmod(rest, 1000)
    return "{:02d}:{:02d}:{:02d},{:03d}".format(hours, minutes, seconds, millis)


def mark_fixation(token: str) -> str:
    before, focus, after = split_at_fixation(token)
    return "{}[{}]{}".format(before, focus, after)


class SRTFormatter(BaseFormatter):
    """Formatter producing one SRT cue per displayed word."""

    @property
    def name(self) -> str:
        return "SRT Subtitles"

    def format(self, timeline: Timeline) -> List[FormatterOutput]:
        blocks: List[str] = []
        for seq, word in enumerate(timeline.words, start=1):
            blocks.append("{}\n{} --> {}\n{}\n".format(
                seq,
                format_timestamp(word.start_ms),
                format_timestamp(word.end_ms),
                mark_fixation(word.text),
            ))
        return [FormatterOutput(
            suffix="-rsvp.srt",
            content="\n".join(blocks),
            media_type="application/x-subrip",
        )]
