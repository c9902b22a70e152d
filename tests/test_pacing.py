"""Unit tests for punctuation-aware pacing.

RULES:
- Floating-point comparisons use pytest.approx with default tolerance.
"""

import pytest

from rsvp_pacer.core.pacing import (
    base_delay_ms,
    punctuation_multiplier,
    word_delay_ms,
)


class TestBaseDelay:

    def test_600_wpm(self):
        assert base_delay_ms(600) == pytest.approx(100.0)

    def test_120_wpm(self):
        assert base_delay_ms(120) == pytest.approx(500.0)

    def test_fractional_wpm(self):
        assert base_delay_ms(150.0) == pytest.approx(400.0)

    @pytest.mark.parametrize("wpm", [0, -10])
    def test_non_positive_rejected(self, wpm):
        with pytest.raises(ValueError):
            base_delay_ms(wpm)


class TestWordDelay:

    @pytest.mark.parametrize("token, expected", [
        ("end.", 1250.0),
        ("wait,", 900.0),
        ("yes;", 1000.0),
        ("note:", 1000.0),
        ("run!", 1100.0),
        ("why?", 1100.0),
        ("word", 500.0),
    ])
    def test_trailing_character_multipliers(self, token, expected):
        assert word_delay_ms(token, 500.0) == pytest.approx(expected)

    def test_only_last_character_counts(self):
        # Leading and inner punctuation never change the pause.
        assert word_delay_ms("e.g", 500.0) == pytest.approx(500.0)
        assert word_delay_ms("(quoted)", 500.0) == pytest.approx(500.0)

    def test_multipliers_do_not_stack(self):
        assert word_delay_ms("what?!", 500.0) == pytest.approx(1100.0)
        assert word_delay_ms("etc.,", 500.0) == pytest.approx(900.0)
        assert word_delay_ms("end...", 500.0) == pytest.approx(1250.0)


class TestPunctuationMultiplier:

    def test_empty_token(self):
        assert punctuation_multiplier("") == 1.0

    def test_plain_word(self):
        assert punctuation_multiplier("plain") == 1.0

    def test_period_highest(self):
        assert punctuation_multiplier("x.") > punctuation_multiplier("x!")
        assert punctuation_multiplier("x!") > punctuation_multiplier("x;")
        assert punctuation_multiplier("x;") > punctuation_multiplier("x,")
