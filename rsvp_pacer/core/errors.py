"""Exceptions raised when a reading run cannot start.

WHY: Callers (CLI, HTTP API, embedding apps) need typed exceptions to
tell "the user gave us nothing to read" apart from "the speeds make no
sense", and to show a clear message for each.

HOW: A small hierarchy rooted at PacerError. Both concrete errors also
subclass ValueError, since they describe bad input values.

RULES:
- Raised synchronously by PlaybackController.start, never from inside a step
- Raising either error leaves the controller idle with no timer scheduled
- Messages are user-facing and end with a period
"""

from __future__ import annotations


class PacerError(Exception):
    """Base class for all errors raised by the pacing engine."""


class EmptyInput(PacerError, ValueError):
    """Raised when tokenization yields no words.

    RULES:
    - Empty and whitespace-only text both raise this
    - The tokenizer itself never raises; the controller checks the result
    """

    def __init__(self, message: str = "No valid words found in the text.") -> None:
        super().__init__(message)


class InvalidConfig(PacerError, ValueError):
    """Raised when a RunConfig cannot drive a run.

    WHY: A non-positive speed would divide by zero in the pacing function,
    and a ramp whose start is not below its target would never accelerate.

    RULES:
    - Message names the offending rule, e.g. "Start speed must be lower
      than target speed."
    """
