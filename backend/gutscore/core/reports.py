"""Score History Reports - Pure functions summarizing stored scores.

All functions are pure: same input always produces same output, no side effects.
"""

import math
from collections.abc import Sequence

from .gutscore import round_half_up
from .models import GutScoreHistoryPoint, ScoreHistorySummary


def calculate_history_trend(scores_newest_first: Sequence[int]) -> float:
    """Difference between the newer and older halves of a score run.

    The newer half takes the extra point when the count is odd.

    Args:
        scores_newest_first: Scores ordered from most recent to oldest

    Returns:
        Average change rounded to one decimal (0 with fewer than two scores)
    """
    if len(scores_newest_first) < 2:
        return 0.0

    split = math.ceil(len(scores_newest_first) / 2)
    recent = scores_newest_first[:split]
    older = scores_newest_first[split:]

    recent_avg = sum(recent) / len(recent)
    older_avg = sum(older) / len(older)
    return round_half_up(recent_avg - older_avg, 1)


def summarize_score_history(
    history: Sequence[GutScoreHistoryPoint],
) -> ScoreHistorySummary | None:
    """Summarize stored scores for display.

    Args:
        history: Stored scores in any order (may be empty)

    Returns:
        ScoreHistorySummary, or None when there is no history
    """
    if not history:
        return None

    newest_first = sorted(history, key=lambda point: point.date, reverse=True)
    values = [point.score for point in newest_first]

    return ScoreHistorySummary(
        current=values[0],
        average=round_half_up(sum(values) / len(values), 1),
        minimum=min(values),
        maximum=max(values),
        trend=calculate_history_trend(values),
        data_points=len(values),
    )


def trend_direction(trend: float) -> str:
    """Label a trend value as "up", "down" or "stable"."""
    if trend > 0:
        return "up"
    if trend < 0:
        return "down"
    return "stable"
