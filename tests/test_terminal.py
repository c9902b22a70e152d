"""Tests for the terminal renderer.

WHY: The whole point of RSVP is that the emphasised letter never moves.
These tests pin the fixation glyph to the same column for every word.
"""

import io

from rsvp_pacer.terminal import TerminalRenderer


def _draw(renderer, token, fixation, position=1, total=1, wpm=300.0):
    renderer.show_word(token, fixation)
    renderer.show_progress(position, total)
    return renderer.render_line(wpm)


class TestTerminalRenderer:

    def test_focus_column_fixed_without_color(self):
        renderer = TerminalRenderer(stream=io.StringIO(), width=60, color=False)
        for token, fixation in [("a", 0), ("cat", 1), ("elephant", 2), ("extraordinarily", 5)]:
            line = _draw(renderer, token, fixation)
            assert line[renderer.focus_column] == token[fixation]
            assert line[renderer.focus_column - 1] == "["

    def test_focus_column_fixed_with_color(self):
        renderer = TerminalRenderer(stream=io.StringIO(), width=60, color=True)
        line = _draw(renderer, "elephant", 2)
        assert line.startswith(" " * (renderer.focus_column - 2) + "el\033[1;31me\033[0mphant")

    def test_status_suffix(self):
        renderer = TerminalRenderer(stream=io.StringIO(), width=60, color=False)
        line = _draw(renderer, "word", 1, position=12, total=340, wpm=187.4)
        assert line.endswith("12/340  187 WPM")

    def test_show_speed_redraws_in_place(self):
        stream = io.StringIO()
        renderer = TerminalRenderer(stream=stream, width=40, color=False)
        renderer.show_word("one", 1)
        renderer.show_progress(1, 2)
        renderer.show_speed(100.0)
        renderer.show_word("two", 1)
        renderer.show_progress(2, 2)
        renderer.show_speed(100.0)
        renderer.finish()
        out = stream.getvalue()
        assert out.count("\r") == 2
        assert out.endswith("\n")
        assert "2/2" in out

    def test_color_defaults_off_for_non_tty(self):
        renderer = TerminalRenderer(stream=io.StringIO(), width=40)
        assert renderer.color is False
