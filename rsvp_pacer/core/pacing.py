"""Per-word display durations with punctuation-aware pauses.

WHY: Readers need a beat at clause and sentence boundaries to integrate
what they just read. Holding a word that ends a sentence for longer than
one in the middle of a clause keeps comprehension up at high speeds.

HOW: The base duration per word is 60000 / WPM milliseconds. It is
scaled by a multiplier chosen from the token's final character.

RULES:
- Multipliers by trailing character, first match wins:
    "."        2.5
    "!" / "?"  2.2
    ";" / ":"  2.0
    ","        1.8
    otherwise  1.0
- Only the final character counts; multipliers never stack
- All functions are pure
"""

from __future__ import annotations

from typing import Tuple

MS_PER_MINUTE = 60_000

PUNCTUATION_MULTIPLIERS: Tuple[Tuple[str, float], ...] = (
    (".", 2.5),
    ("!?", 2.2),
    (";:", 2.0),
    (",", 1.8),
)
"""Ordered (trailing characters, multiplier) pairs; checked top to bottom."""

DEFAULT_MULTIPLIER = 1.0


def base_delay_ms(wpm: float) -> float:
    """Milliseconds per word at *wpm* words per minute.

    Raises:
        ValueError: If wpm is not positive.
    """
    if wpm <= 0:
        raise ValueError("wpm must be positive, got {}".format(wpm))
    return MS_PER_MINUTE / wpm


def punctuation_multiplier(token: str) -> float:
    """Pause multiplier selected by the last character of *token*."""
    if not token:
        return DEFAULT_MULTIPLIER
    last = token[-1]
    for chars, multiplier in PUNCTUATION_MULTIPLIERS:
        if last in chars:
            return multiplier
    return DEFAULT_MULTIPLIER


def word_delay_ms(token: str, base_delay: float) -> float:
    """How long *token* stays on screen, given the base per-word duration."""
    return base_delay * punctuation_multiplier(token)
