"""Core Data Models - Pydantic models for type safety.

All models are immutable value objects with no behavior beyond validation.
"""

from datetime import datetime, timezone
from datetime import date as DateType
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _to_calendar_day(value: Any) -> Any:
    """Reduce datetimes and ISO timestamps to their calendar day.

    Timezone-aware values are converted to UTC first; naive values are taken
    as-is. Anything unparseable is passed through for pydantic to reject.
    """
    if isinstance(value, str):
        text = value.strip()
        try:
            value = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return text
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


CalendarDay = Annotated[DateType, BeforeValidator(_to_calendar_day)]


class SymptomLogEntry(BaseModel):
    """A single severity reading (bloating, pain, gas, mood, energy, ...)."""

    model_config = ConfigDict(frozen=True)

    date: CalendarDay = Field(description="Day the symptom was logged")
    severity: int = Field(ge=1, le=10, description="Severity on a 1-10 scale")


class FoodLogEntry(BaseModel):
    """One meal's worth of foods logged on a day."""

    model_config = ConfigDict(frozen=True)

    date: CalendarDay = Field(description="Day the meal was logged")
    foods: list[str] = Field(default_factory=list, description="Free-text food names")


class GutScoreHistoryPoint(BaseModel):
    """A previously computed score, one per user per day."""

    model_config = ConfigDict(frozen=True)

    date: CalendarDay
    score: int = Field(ge=0, le=100)


class GutScoreComponents(BaseModel):
    """Breakdown of the four equally weighted sub-scores."""

    model_config = ConfigDict(frozen=True)

    symptom_severity: float = Field(ge=0, le=25, description="Lower severity = higher score")
    trend: float = Field(ge=0, le=25, description="Improving history = higher score")
    consistency: float = Field(ge=0, le=25, description="More tracked days = higher score")
    food_diversity: float = Field(ge=0, le=25, description="More unique foods = higher score")


class GutScoreResult(BaseModel):
    """Composite score with its component breakdown."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    components: GutScoreComponents


class ScoreInterpretation(BaseModel):
    """Qualitative band for a score, used for display."""

    model_config = ConfigDict(frozen=True)

    label: str
    description: str
    color: str = Field(description="Hex display color")


class SymptomRecord(BaseModel):
    """A day's multi-dimensional symptom row as users enter it.

    Each dimension is optional; None means it was not tracked.
    """

    model_config = ConfigDict(frozen=True)

    date: CalendarDay
    bloating: Optional[int] = Field(default=None, ge=1, le=10)
    pain: Optional[int] = Field(default=None, ge=1, le=10)
    gas: Optional[int] = Field(default=None, ge=1, le=10)
    mood: Optional[int] = Field(default=None, ge=1, le=10)
    energy: Optional[int] = Field(default=None, ge=1, le=10)
    stool_type: Optional[int] = Field(default=None, ge=1, le=7, description="Bristol scale 1-7")
    notes: Optional[str] = None


class DailyGutScore(BaseModel):
    """The record a caller stores for a user's day (upserted on date)."""

    model_config = ConfigDict(frozen=True)

    date: CalendarDay
    score: int = Field(ge=0, le=100)
    components: GutScoreComponents


class ScoreHistorySummary(BaseModel):
    """Summary statistics over a run of stored scores."""

    model_config = ConfigDict(frozen=True)

    current: int = Field(description="Most recent score")
    average: float
    minimum: int
    maximum: int
    trend: float = Field(description="Recent half average minus older half. Positive = improving.")
    data_points: int = Field(ge=1)
