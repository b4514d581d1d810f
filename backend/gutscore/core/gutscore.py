"""GutScore Calculations - Pure functions for the composite gut health score.

The GutScore is a 0-100 composite built from four equally weighted
components, each worth 0-25 points:

1. Symptom severity (lower and rarer symptoms = higher score)
2. Trend (improving score history = higher score)
3. Consistency (more days with any tracking = higher score)
4. Food diversity (more unique foods = higher score)

All functions are pure: same input always produces same output, no side effects.
Inputs are expected to already be sliced to their tracking windows.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from .models import (
    FoodLogEntry,
    GutScoreComponents,
    GutScoreHistoryPoint,
    GutScoreResult,
    ScoreInterpretation,
    SymptomLogEntry,
)


# Points available per component; four components make up the 0-100 score.
COMPONENT_MAX = 25.0

# Parameters used as divisors
_POSITIVE_PARAMETERS = (
    "expected_symptom_entries",
    "trend_swing",
    "tracking_days",
    "diversity_target",
)


class ParameterError(ValueError):
    """Raised when a scoring parameter would make the score undefined."""

    def __init__(self, parameter: str, message: str) -> None:
        super().__init__(f"{parameter} {message}")
        self.parameter = parameter


@dataclass(frozen=True)
class ScoringParameters:
    """Tunable constants behind the score.

    Attributes:
        neutral_symptom_score: Symptom score when nothing was logged
        baseline_trend_score: Trend score when history is too short
        min_severity: Lowest valid severity
        max_severity: Highest valid severity
        expected_symptom_entries: Entries per window treated as the frequency ceiling (3/day * 7 days)
        max_frequency_penalty: Largest share of the symptom score frequency can remove
        trend_swing: Average score change mapping to the trend extremes
        tracking_days: Days in the tracking window
        diversity_target: Unique foods per window for full diversity points

    Raises:
        ParameterError: If a divisor is not positive, the severity range is
            empty, or the frequency penalty is not a fraction
    """

    neutral_symptom_score: float = 15.0
    baseline_trend_score: float = 12.5
    min_severity: int = 1
    max_severity: int = 10
    expected_symptom_entries: int = 21
    max_frequency_penalty: float = 0.5
    trend_swing: float = 20.0
    tracking_days: int = 7
    diversity_target: int = 30

    def __post_init__(self) -> None:
        for name in _POSITIVE_PARAMETERS:
            if getattr(self, name) <= 0:
                raise ParameterError(name, "must be greater than zero")
        if self.min_severity >= self.max_severity:
            raise ParameterError("min_severity", "must be below max_severity")
        if not 0 <= self.max_frequency_penalty <= 1:
            raise ParameterError("max_frequency_penalty", "must be between 0 and 1")


DEFAULT_PARAMETERS = ScoringParameters()


def _clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up (27.5 -> 28), unlike round()'s half-to-even."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def symptom_severity_component(
    symptom_logs: Sequence[SymptomLogEntry],
    params: ScoringParameters = DEFAULT_PARAMETERS,
) -> float:
    """Score symptom severity and frequency (0-25, higher = healthier).

    No symptoms logged could mean no tracking or no symptoms, so an empty
    window gets a neutral score rather than full points.

    Args:
        symptom_logs: Symptom entries in the tracking window
        params: Scoring constants

    Returns:
        Symptom severity points
    """
    if not symptom_logs:
        return _clamp(params.neutral_symptom_score, 0, COMPONENT_MAX)

    severities = [
        _clamp(log.severity, params.min_severity, params.max_severity)
        for log in symptom_logs
    ]
    avg_severity = sum(severities) / len(severities)

    severity_range = params.max_severity - params.min_severity
    severity_factor = 1 - (avg_severity - params.min_severity) / severity_range

    frequency_penalty = min(len(symptom_logs) / params.expected_symptom_entries, 1)
    frequency_factor = 1 - frequency_penalty * params.max_frequency_penalty

    points = COMPONENT_MAX * severity_factor * frequency_factor
    return _clamp(points, 0, COMPONENT_MAX)


def trend_component(
    previous_scores: Sequence[GutScoreHistoryPoint],
    params: ScoringParameters = DEFAULT_PARAMETERS,
) -> float:
    """Score the direction of the score history (0-25, higher = improving).

    History is split at its midpoint into an older and a recent half. A rise of
    trend_swing points in the average maps to full points, an equal drop to
    zero, and no change to the midpoint.

    Args:
        previous_scores: Stored scores in the history window
        params: Scoring constants

    Returns:
        Trend points
    """
    if len(previous_scores) < 2:
        return _clamp(params.baseline_trend_score, 0, COMPONENT_MAX)

    ordered = sorted(previous_scores, key=lambda point: point.date)
    midpoint = len(ordered) // 2
    older = ordered[:midpoint]
    recent = ordered[midpoint:]

    older_avg = sum(point.score for point in older) / len(older)
    recent_avg = sum(point.score for point in recent) / len(recent)
    improvement = recent_avg - older_avg

    normalized = _clamp((improvement + params.trend_swing) / (2 * params.trend_swing), 0, 1)
    return COMPONENT_MAX * normalized


def consistency_component(
    symptom_logs: Sequence[SymptomLogEntry],
    food_logs: Sequence[FoodLogEntry],
    params: ScoringParameters = DEFAULT_PARAMETERS,
) -> float:
    """Score tracking habit: distinct days with any symptom or food entry (0-25)."""
    tracked_days = {log.date for log in symptom_logs}
    tracked_days.update(log.date for log in food_logs)

    days_tracked = min(len(tracked_days), params.tracking_days)
    return COMPONENT_MAX * days_tracked / params.tracking_days


def food_diversity_component(
    food_logs: Sequence[FoodLogEntry],
    params: ScoringParameters = DEFAULT_PARAMETERS,
) -> float:
    """Score diet variety by unique food names (0-25).

    Unlike symptoms, an empty food log scores zero: diversity needs data.
    Names are compared lowercased and trimmed; blank names are ignored.
    """
    if not food_logs:
        return 0.0

    unique_foods = {
        food.strip().lower()
        for log in food_logs
        for food in log.foods
        if food.strip()
    }

    diversity_ratio = min(len(unique_foods) / params.diversity_target, 1)
    return COMPONENT_MAX * diversity_ratio


def calculate_gut_score(
    symptom_logs: Sequence[SymptomLogEntry],
    food_logs: Sequence[FoodLogEntry],
    previous_scores: Sequence[GutScoreHistoryPoint],
    params: ScoringParameters | None = None,
) -> GutScoreResult:
    """Calculate the GutScore from a user's recent logs and score history.

    The integer score rounds the sum of the unrounded components; components
    are rounded to one decimal for display only.

    Args:
        symptom_logs: Last 7 days of symptom entries
        food_logs: Last 7 days of food entries
        previous_scores: Last 30 days of stored scores
        params: Scoring constants (defaults to DEFAULT_PARAMETERS)

    Returns:
        GutScoreResult with the 0-100 score and its components
    """
    params = params or DEFAULT_PARAMETERS

    symptom_severity = symptom_severity_component(symptom_logs, params)
    trend = trend_component(previous_scores, params)
    consistency = consistency_component(symptom_logs, food_logs, params)
    food_diversity = food_diversity_component(food_logs, params)

    total = symptom_severity + trend + consistency + food_diversity
    score = int(_clamp(round_half_up(total), 0, 100))

    return GutScoreResult(
        score=score,
        components=GutScoreComponents(
            symptom_severity=round_half_up(symptom_severity, 1),
            trend=round_half_up(trend, 1),
            consistency=round_half_up(consistency, 1),
            food_diversity=round_half_up(food_diversity, 1),
        ),
    )


_SCORE_BANDS: tuple[tuple[int, ScoreInterpretation], ...] = (
    (
        80,
        ScoreInterpretation(
            label="Excellent",
            description="Your gut health indicators are strong. Keep up your current routine!",
            color="#22c55e",
        ),
    ),
    (
        60,
        ScoreInterpretation(
            label="Good",
            description=(
                "Your gut health is on a positive track. "
                "Small improvements can make a big difference."
            ),
            color="#84cc16",
        ),
    ),
    (
        40,
        ScoreInterpretation(
            label="Fair",
            description=(
                "There is room for improvement. Consider tracking more "
                "consistently and diversifying your diet."
            ),
            color="#eab308",
        ),
    ),
    (
        20,
        ScoreInterpretation(
            label="Needs Attention",
            description=(
                "Your symptoms or tracking patterns suggest your gut could use some "
                "support. Consider reviewing your diet and talking to a healthcare provider."
            ),
            color="#f97316",
        ),
    ),
)

_CRITICAL = ScoreInterpretation(
    label="Critical",
    description=(
        "Your gut health indicators are concerning. "
        "We strongly recommend consulting with a healthcare provider."
    ),
    color="#ef4444",
)


def interpret_score(score: float) -> ScoreInterpretation:
    """Map a score to its qualitative band.

    Args:
        score: A GutScore (0-100)

    Returns:
        ScoreInterpretation with label, description and display color
    """
    for threshold, interpretation in _SCORE_BANDS:
        if score >= threshold:
            return interpretation
    return _CRITICAL
