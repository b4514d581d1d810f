"""Tracking Windows - Pure functions for slicing logs before scoring.

The score itself never filters by date. These helpers do the caller-side
slicing: 7 days of symptom and food logs, 30 days of stored scores.
"""

from collections.abc import Iterable
from datetime import date, timedelta

from pydantic import BaseModel, Field

from .models import (
    DailyGutScore,
    FoodLogEntry,
    GutScoreHistoryPoint,
    GutScoreResult,
    SymptomLogEntry,
)


SYMPTOM_WINDOW_DAYS = 7
HISTORY_WINDOW_DAYS = 30


class ScoringInputs(BaseModel):
    """Logs and history already sliced to their windows, ready to score."""

    symptom_logs: list[SymptomLogEntry] = Field(default_factory=list)
    food_logs: list[FoodLogEntry] = Field(default_factory=list)
    previous_scores: list[GutScoreHistoryPoint] = Field(default_factory=list)


def window_start(today: date, days: int) -> date:
    """First day (inclusive) of a window reaching back `days` days from today."""
    return today - timedelta(days=days)


def select_scoring_inputs(
    symptom_logs: Iterable[SymptomLogEntry],
    food_logs: Iterable[FoodLogEntry],
    previous_scores: Iterable[GutScoreHistoryPoint],
    today: date | None = None,
) -> ScoringInputs:
    """Slice a user's logs and stored scores to the scoring windows.

    Stored scores for today itself are left out: the score being computed
    replaces them.

    Args:
        symptom_logs: All known symptom entries
        food_logs: All known food entries
        previous_scores: All known stored scores
        today: Day being scored (defaults to today)

    Returns:
        ScoringInputs for calculate_gut_score
    """
    if today is None:
        today = date.today()

    log_start = window_start(today, SYMPTOM_WINDOW_DAYS)
    history_start = window_start(today, HISTORY_WINDOW_DAYS)

    return ScoringInputs(
        symptom_logs=[log for log in symptom_logs if log_start <= log.date <= today],
        food_logs=[log for log in food_logs if log_start <= log.date <= today],
        previous_scores=[
            point for point in previous_scores
            if history_start <= point.date < today
        ],
    )


def to_daily_score(result: GutScoreResult, score_date: date) -> DailyGutScore:
    """Attach a result to the day it was computed for."""
    return DailyGutScore(
        date=score_date,
        score=result.score,
        components=result.components,
    )


def upsert_daily_score(
    history: Iterable[GutScoreHistoryPoint],
    daily: DailyGutScore,
) -> list[GutScoreHistoryPoint]:
    """Insert a day's score into a history, replacing any score for that day.

    Args:
        history: Existing stored scores
        daily: The newly computed day's score

    Returns:
        New history sorted by date with at most one point per day
    """
    by_date = {point.date: point for point in history}
    by_date[daily.date] = GutScoreHistoryPoint(date=daily.date, score=daily.score)
    return [by_date[day] for day in sorted(by_date)]
