"""Speed ramp: words per minute as a function of elapsed run time.

WHY: Jumping straight to a high target speed loses the reader in the
first sentence. Starting slower and climbing linearly lets them settle in.

HOW: Linear interpolation from start_wpm to target_wpm over the
acceleration window, then pinned at target_wpm.

RULES:
- acceleration_ms == 0 disables the ramp: always target_wpm
- Elapsed time is measured from the start of the run, not from the last
  step, so scheduling jitter never bends the curve
- Monotonic non-decreasing, never exceeds target_wpm
"""

from __future__ import annotations

from rsvp_pacer.core.models import RunConfig


def speed_at(elapsed_ms: float, config: RunConfig) -> float:
    """Instantaneous speed in WPM *elapsed_ms* after the run started."""
    if not config.ramp_enabled:
        return float(config.target_wpm)
    if elapsed_ms < 0:
        elapsed_ms = 0.0
    if elapsed_ms >= config.acceleration_ms:
        return float(config.target_wpm)
    progress = elapsed_ms / config.acceleration_ms
    return config.start_wpm + (config.target_wpm - config.start_wpm) * progress
