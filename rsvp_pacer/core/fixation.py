"""Pick the character of a word the reader's eye should land on.

WHY: RSVP readers emphasise one letter per word and keep that letter at a
fixed position on screen. Words are recognised fastest when the eye lands
slightly left of centre (the "optimal recognition point"), where the early
letters carry most of the identifying information.

HOW: A one-third-length heuristic: floor(len / 3), clamped into the word.

RULES:
- Tokens of length <= 1 always get index 0
- The result is always a valid index into the token
- Pure: the same token always yields the same index
"""

from __future__ import annotations

from typing import Tuple


def fixation_index(token: str) -> int:
    """Zero-based index of the character to emphasise in *token*.

    >>> fixation_index("cat")
    1
    >>> fixation_index("elephant")
    2
    """
    length = len(token)
    if length <= 1:
        return 0
    return max(0, min(length // 3, length - 1))


def split_at_fixation(token: str) -> Tuple[str, str, str]:
    """Split *token* into (before, focus, after) around its fixation point.

    Renderers draw ``focus`` highlighted and align it to a fixed column.
    An empty token yields three empty strings.
    """
    idx = fixation_index(token)
    return token[:idx], token[idx:idx + 1], token[idx + 1:]
