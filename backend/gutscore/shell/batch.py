"""Batch Scoring - Runs the score for many users and collects the outcome.

This is the computation half of the daily scoring job: the caller loads each
user's windowed logs, hands them over here, and stores the returned daily
scores (one per user per day). No I/O happens in this module.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date

from ..core.gutscore import ScoringParameters, calculate_gut_score
from ..core.models import DailyGutScore
from ..core.windows import ScoringInputs, to_daily_score


logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Outcome of scoring a batch of users.

    Attributes:
        scores: Daily score per user_id that was scored successfully
        errors: One message per user that failed
        total_users: Users in the batch
    """

    scores: dict[str, DailyGutScore] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)
    total_users: int = 0

    @property
    def scores_calculated(self) -> int:
        return len(self.scores)


def score_users(
    inputs_by_user: Mapping[str, ScoringInputs],
    score_date: date | None = None,
    params: ScoringParameters | None = None,
) -> BatchResult:
    """Score every user in the batch, continuing past individual failures.

    Args:
        inputs_by_user: Windowed inputs keyed by user_id
        score_date: Day the scores are for (defaults to today)
        params: Scoring constants (defaults to the built-in ones)

    Returns:
        BatchResult with the scores and any per-user errors
    """
    if score_date is None:
        score_date = date.today()

    result = BatchResult(total_users=len(inputs_by_user))
    logger.info("Scoring %d users for %s", result.total_users, score_date)

    for user_id, inputs in inputs_by_user.items():
        try:
            score = calculate_gut_score(
                inputs.symptom_logs,
                inputs.food_logs,
                inputs.previous_scores,
                params,
            )
        except Exception as e:
            logger.error("Failed to score user %s: %s", user_id[:8], str(e))
            result.errors.append(f"Error calculating score for user {user_id}: {e}")
            continue

        result.scores[user_id] = to_daily_score(score, score_date)
        logger.debug("Scored user %s: %d", user_id[:8], score.score)

    logger.info(
        "Scored %d of %d users (%d errors)",
        result.scores_calculated,
        result.total_users,
        len(result.errors),
    )
    return result
