"""Unit tests for score history reports - pure functions, no mocks needed."""

from datetime import date, timedelta

import pytest

from gutscore.core.models import GutScoreHistoryPoint
from gutscore.core.reports import (
    calculate_history_trend,
    summarize_score_history,
    trend_direction,
)


def _history(*scores: int) -> list[GutScoreHistoryPoint]:
    """Build history oldest-first starting 2026-01-01."""
    return [
        GutScoreHistoryPoint(date=date(2026, 1, 1) + timedelta(days=i), score=s)
        for i, s in enumerate(scores)
    ]


class TestCalculateHistoryTrend:
    """Tests for calculate_history_trend."""

    def test_too_few_scores(self):
        """Fewer than two scores has no trend."""
        assert calculate_history_trend([]) == 0
        assert calculate_history_trend([55]) == 0

    def test_improving(self):
        """Newer scores higher than older ones give a positive trend."""
        # newest first: recent [70, 60], older [40, 30]
        assert calculate_history_trend([70, 60, 40, 30]) == 30

    def test_declining(self):
        """Newer scores lower than older ones give a negative trend."""
        assert calculate_history_trend([30, 40, 60, 70]) == -30

    def test_odd_count_gives_newer_half_extra_point(self):
        """With 3 scores the newer half holds 2."""
        # recent [60, 50] avg 55, older [41]
        assert calculate_history_trend([60, 50, 41]) == 14

    def test_rounded_to_one_decimal(self):
        """Trend is rounded to one decimal."""
        # recent [52, 50, 50] avg 50.67, older [49, 49, 49]
        assert calculate_history_trend([52, 50, 50, 49, 49, 49]) == pytest.approx(1.7)
        assert calculate_history_trend([51, 50, 50]) == pytest.approx(0.5)

class TestSummarizeScoreHistory:
    """Tests for summarize_score_history."""

    def test_empty_history(self):
        """No scores, no summary."""
        assert summarize_score_history([]) is None

    def test_single_score(self):
        """One score summarizes to itself with no trend."""
        summary = summarize_score_history(_history(42))

        assert summary.current == 42
        assert summary.average == 42
        assert summary.minimum == 42
        assert summary.maximum == 42
        assert summary.trend == 0
        assert summary.data_points == 1

    def test_current_is_most_recent(self):
        """The newest score is current regardless of input order."""
        history = _history(30, 45, 61)
        summary = summarize_score_history(list(reversed(history)))

        assert summary.current == 61
        assert summary.minimum == 30
        assert summary.maximum == 61
        assert summary.data_points == 3

    def test_average_rounded(self):
        """Average is rounded to one decimal."""
        summary = summarize_score_history(_history(30, 45, 61))
        # 136 / 3 = 45.33...
        assert summary.average == pytest.approx(45.3)

    def test_average_rounds_halves_up(self):
        """Average uses the same half-up rounding as the score components."""
        summary = summarize_score_history(_history(40, 40, 40, 41))
        # 40.25 -> 40.3, where round() would give 40.2
        assert summary.average == pytest.approx(40.3)

    def test_trend_positive_when_improving(self):
        """Rising history gives a positive trend."""
        summary = summarize_score_history(_history(30, 40, 60, 70))
        assert summary.trend == 30


class TestTrendDirection:
    """Tests for trend_direction."""

    def test_up(self):
        assert trend_direction(2.5) == "up"

    def test_down(self):
        assert trend_direction(-0.1) == "down"

    def test_stable(self):
        assert trend_direction(0) == "stable"
