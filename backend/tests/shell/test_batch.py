"""Unit tests for batch scoring - real engine, no I/O."""

import logging
from datetime import date

from gutscore.core.gutscore import ScoringParameters
from gutscore.core.models import FoodLogEntry, SymptomLogEntry
from gutscore.core.windows import ScoringInputs
from gutscore.shell.batch import score_users


SCORE_DATE = date(2026, 2, 10)


def _broken_inputs() -> ScoringInputs:
    """Inputs whose severity bypassed validation and is not a number."""
    bad_entry = SymptomLogEntry.model_construct(date=SCORE_DATE, severity="severe")
    return ScoringInputs.model_construct(
        symptom_logs=[bad_entry], food_logs=[], previous_scores=[]
    )


class TestScoreUsers:
    """Tests for score_users."""

    def test_empty_batch(self):
        """No users, no scores."""
        result = score_users({}, score_date=SCORE_DATE)

        assert result.total_users == 0
        assert result.scores_calculated == 0
        assert result.errors == []

    def test_scores_every_user(self):
        """Each user gets a daily score for the batch date."""
        inputs = {
            "user-aaaaaaaaaaaa": ScoringInputs(),
            "user-bbbbbbbbbbbb": ScoringInputs(
                symptom_logs=[SymptomLogEntry(date=SCORE_DATE, severity=3)],
                food_logs=[FoodLogEntry(date=SCORE_DATE, foods=["rice", "egg"])],
            ),
        }
        result = score_users(inputs, score_date=SCORE_DATE)

        assert result.total_users == 2
        assert result.scores_calculated == 2
        assert result.scores["user-aaaaaaaaaaaa"].score == 28
        assert result.scores["user-bbbbbbbbbbbb"].date == SCORE_DATE

    def test_failure_does_not_stop_batch(self):
        """One user's bad data is recorded and the rest are still scored."""
        inputs = {
            "user-broken": _broken_inputs(),
            "user-fine": ScoringInputs(),
        }
        result = score_users(inputs, score_date=SCORE_DATE)

        assert result.scores_calculated == 1
        assert "user-fine" in result.scores
        assert len(result.errors) == 1
        assert result.errors[0].startswith("Error calculating score for user user-broken")

    def test_failure_is_logged(self, caplog):
        """Failures are logged with a truncated user id."""
        with caplog.at_level(logging.ERROR, logger="gutscore.shell.batch"):
            score_users({"user-broken-123456": _broken_inputs()}, score_date=SCORE_DATE)

        assert "Failed to score user user-bro" in caplog.text
        assert "user-broken-123456" not in caplog.text

    def test_parameters_are_used(self):
        """Custom parameters reach the engine."""
        params = ScoringParameters(neutral_symptom_score=14.0)
        result = score_users({"user-a": ScoringInputs()}, score_date=SCORE_DATE, params=params)

        assert result.scores["user-a"].score == 27

    def test_defaults_to_today(self):
        """Scores are dated today when no date is given."""
        result = score_users({"user-a": ScoringInputs()})
        assert result.scores["user-a"].date == date.today()
