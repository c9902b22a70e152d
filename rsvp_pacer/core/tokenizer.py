"""Split raw text into the words shown one at a time.

WHY: The reader displays one whitespace-delimited unit per step. Text
arrives from text areas, files and HTTP bodies with arbitrary runs of
spaces, tabs and newlines, none of which should ever become an empty
flash on screen.

HOW: str.split() with no separator already trims both ends and splits on
any run of Unicode whitespace, discarding empty fragments.

RULES:
- Token text is preserved verbatim, including attached punctuation
- Every token is non-empty and contains no whitespace
- Empty or whitespace-only text yields an empty tuple; callers decide
  whether that is an error (the controller raises EmptyInput)
"""

from __future__ import annotations

from typing import Tuple


def tokenize(text: str) -> Tuple[str, ...]:
    """Return the words of *text* in reading order.

    Args:
        text: Raw text of any length, possibly containing newlines.

    Returns:
        Immutable sequence of non-empty tokens.
    """
    return tuple(text.split())


def word_count(text: str) -> int:
    """Number of tokens *text* would produce."""
    return len(tokenize(text))
