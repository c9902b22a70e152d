"""Unit tests for fixation point selection."""

import pytest

from rsvp_pacer.core.fixation import fixation_index, split_at_fixation


class TestFixationIndex:

    @pytest.mark.parametrize("token, expected", [
        ("a", 0),
        ("I", 0),
        ("an", 0),
        ("cat", 1),
        ("word", 1),
        ("three!", 2),
        ("elephant", 2),
        ("extraordinarily", 5),
    ])
    def test_one_third_rule(self, token, expected):
        assert fixation_index(token) == expected

    def test_empty_token(self):
        assert fixation_index("") == 0

    def test_always_in_range(self):
        for length in range(1, 40):
            idx = fixation_index("x" * length)
            assert 0 <= idx <= length - 1

    def test_pure(self):
        assert fixation_index("repeatable") == fixation_index("repeatable")


class TestSplitAtFixation:

    def test_splits_around_focus(self):
        assert split_at_fixation("elephant") == ("el", "e", "phant")

    def test_single_character(self):
        assert split_at_fixation("a") == ("", "a", "")

    def test_rejoins_to_token(self):
        before, focus, after = split_at_fixation("Two,")
        assert before + focus + after == "Two,"
        assert focus == "w"

    def test_empty(self):
        assert split_at_fixation("") == ("", "", "")
