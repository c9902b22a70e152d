"""RSVP Pacer — word-by-word reading engine with a ramped speed schedule.

WHY: Rapid serial visual presentation shows one word at a time at a fixed
spot on screen, so the reader never moves their eyes. Doing that well
needs more than a fixed timer: each word needs a fixation point, sentence
punctuation needs longer pauses, and the speed should climb gently from a
comfortable start rate to the target rate.

HOW: Three layers — the core engine (tokenizer, fixation, pacing, ramp,
playback controller), pluggable timeline formatters, and thin outer
surfaces (terminal player CLI, HTTP API). Each layer is independently
testable.

RULES:
- The controller never draws anything; renderers are injected callbacks
- Timing goes through an injected scheduler, so tests run on a virtual clock
- Formatters consume the same Timeline produced by the planner
"""

__version__ = "0.1.0"
