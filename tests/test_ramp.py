"""Unit tests for the speed ramp."""

import pytest

from rsvp_pacer.core.models import RunConfig
from rsvp_pacer.core.ramp import speed_at


class TestSpeedAt:

    def test_starts_at_start_speed(self, ramp_config):
        assert speed_at(0, ramp_config) == pytest.approx(100.0)

    def test_linear_midpoint(self, ramp_config):
        assert speed_at(5_000, ramp_config) == pytest.approx(200.0)

    def test_quarter_point(self, ramp_config):
        assert speed_at(2_500, ramp_config) == pytest.approx(150.0)

    def test_pinned_at_end_of_window(self, ramp_config):
        assert speed_at(10_000, ramp_config) == pytest.approx(300.0)

    def test_pinned_after_window(self, ramp_config):
        assert speed_at(10_001, ramp_config) == pytest.approx(300.0)
        assert speed_at(3_600_000, ramp_config) == pytest.approx(300.0)

    def test_disabled_ramp_uses_target(self):
        config = RunConfig(start_wpm=100, target_wpm=300, acceleration_ms=0)
        assert speed_at(0, config) == pytest.approx(300.0)
        assert speed_at(5_000, config) == pytest.approx(300.0)

    def test_negative_elapsed_clamped(self, ramp_config):
        assert speed_at(-50, ramp_config) == pytest.approx(100.0)

    def test_monotonic_and_bounded(self, ramp_config):
        speeds = [speed_at(ms, ramp_config) for ms in range(0, 15_000, 250)]
        assert speeds == sorted(speeds)
        assert all(100.0 <= s <= 300.0 for s in speeds)
