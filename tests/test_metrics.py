"""Tests for metrics – accuracy, errors, speed and score."""

from __future__ import annotations

import pytest

from metrics import (
    RoundMetrics,
    accuracy,
    compute_correct_chars,
    compute_metrics,
    error_count,
    score,
    speed,
    words_per_minute,
)


# ---------------------------------------------------------------------------
# correct characters
# ---------------------------------------------------------------------------

class TestCorrectChars:
    def test_counts_matching_positions(self):
        assert compute_correct_chars("hello", "hxllo") == 4

    def test_stops_at_target_length(self):
        assert compute_correct_chars("hi", "hi there") == 2


# ---------------------------------------------------------------------------
# accuracy
# ---------------------------------------------------------------------------

class TestAccuracy:
    def test_denominator_is_target_length(self):
        assert accuracy("he", "hello") == pytest.approx(40.0)

    def test_full_match_is_100(self):
        assert accuracy("hello", "hello") == 100.0

    def test_wrong_prefix_counts_against_full_target(self):
        assert accuracy("xxllo", "hello") == pytest.approx(60.0)

    def test_empty_target(self):
        assert accuracy("abc", "") == 0.0

    def test_longer_input_is_clamped(self):
        assert accuracy("hello!!!", "hello") == 100.0

    def test_monotonic_over_correct_prefixes(self):
        target = "the quick brown fox"
        values = [accuracy(target[:n], target) for n in range(len(target) + 1)]
        assert values == sorted(values)


# ---------------------------------------------------------------------------
# error count
# ---------------------------------------------------------------------------

class TestErrorCount:
    def test_prefix_has_no_errors(self):
        target = "typing is fun"
        for n in range(len(target) + 1):
            assert error_count(target[:n], target) == 0

    def test_counts_mismatches(self):
        assert error_count("hxllx", "hello") == 2

    def test_longer_input_is_clamped(self):
        assert error_count("hexxxxxxx", "hey") == 1


# ---------------------------------------------------------------------------
# speed, wpm, score
# ---------------------------------------------------------------------------

class TestSpeedAndScore:
    def test_speed_zero_elapsed(self):
        assert speed(10, 0) == 0.0

    def test_speed(self):
        assert speed(10, 4.0) == 2.5

    def test_wpm_is_twelve_times_cps(self):
        assert words_per_minute(5.0) == 60.0

    def test_score_floors_speed(self):
        assert score(50.0, 3.9) == 300

    def test_score_below_one_cps_is_zero(self):
        assert score(100.0, 0.9) == 0


class TestComputeMetrics:
    def test_snapshot(self):
        m = compute_metrics("hello", "hexl", 2.0)
        assert m == RoundMetrics(accuracy=60.0, errors=1, speed=2.0, wpm=24.0, score=240)
