"""Core pacing engine modules.

WHY: The core package is the heart of the reader. Everything with
timing-correctness obligations lives here, free of any terminal, HTTP or
file-format concerns.

HOW: tokenizer.py splits text into words, fixation.py picks the glyph to
emphasise, pacing.py turns a word into a display duration, ramp.py turns
elapsed time into a speed, controller.py ties them together as a state
machine driven by a scheduler from scheduler.py. timeline.py replays the
controller on a virtual clock to plan a whole run up front.

RULES:
- tokenizer, fixation, pacing and ramp hold no state
- Only the controller mutates playback state
- models.py dataclasses are the contract with formatters and outer surfaces
"""
