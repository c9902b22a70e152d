"""Terminal renderer for live RSVP playback.

WHY: The controller only emits (word, fixation index), progress and speed
events. Something has to turn those into a single, steady line on the
terminal where the emphasised letter never moves.

HOW: Each word is left-padded so its fixation glyph always lands on the
same column (a third of the line width, mirroring the vertical guide of
the web reader). The glyph is drawn in bold red on a TTY, or wrapped in
brackets otherwise. The line is redrawn in place with a carriage return,
followed by the word counter and the current speed.

RULES:
- Draws once per word, on the speed event (the last event of a step)
- Never writes a newline until finish() is called
- Counter format: "12/340", speed format: "187 WPM"
"""

from __future__ import annotations

import shutil
import sys
from typing import Optional, TextIO

from rsvp_pacer.core.fixation import split_at_fixation

_HIGHLIGHT = "\033[1;31m"
_RESET = "\033[0m"
_CLEAR_EOL = "\033[K"


class TerminalRenderer:
    """Draws words, progress and speed on one terminal line."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        width: Optional[int] = None,
        color: Optional[bool] = None,
    ) -> None:
        self.stream = stream or sys.stdout
        self.width = width or shutil.get_terminal_size((80, 24)).columns
        if color is None:
            color = hasattr(self.stream, "isatty") and self.stream.isatty()
        self.color = color
        self.focus_column = self.width // 3
        self._word = ""
        self._fixation = 0
        self._position = 0
        self._total = 0

    def show_word(self, token: str, fixation: int) -> None:
        self._word = token
        self._fixation = fixation

    def show_progress(self, position: int, total: int) -> None:
        self._position = position
        self._total = total

    def show_speed(self, wpm: float) -> None:
        self.stream.write("\r" + self.render_line(wpm) + (_CLEAR_EOL if self.color else ""))
        self.stream.flush()

    def render_line(self, wpm: float) -> str:
        """The full line for the current word, without the leading ``\\r``."""
        before, focus, after = split_at_fixation(self._word)
        pad = max(0, self.focus_column - len(before))
        if self.color:
            word = "{}{}{}{}{}".format(before, _HIGHLIGHT, focus, _RESET, after)
        else:
            # The opening bracket takes the focus column's left neighbour.
            pad = max(0, pad - 1)
            word = "{}[{}]{}".format(before, focus, after)
        visible = pad + len(self._word) + (0 if self.color else 2)
        status = "{}/{}  {:.0f} WPM".format(self._position, self._total, wpm)
        gap = max(2, self.width - visible - len(status) - 1)
        return " " * pad + word + " " * gap + status

    def finish(self) -> None:
        self.stream.write("\n")
        self.stream.flush()
