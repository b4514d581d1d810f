"""Symptom Flattening - Pure functions turning symptom rows into severity entries.

The score treats every severity-bearing value alike, so a multi-dimensional
symptom row becomes one entry per tracked dimension.
"""

from collections.abc import Iterable

from .models import SymptomLogEntry, SymptomRecord


# Order in which a row's dimensions are emitted
SYMPTOM_DIMENSIONS = ("bloating", "pain", "gas", "mood", "energy", "stool_type")


def flatten_symptom_record(record: SymptomRecord) -> list[SymptomLogEntry]:
    """Split one symptom row into an entry per tracked dimension.

    Args:
        record: The symptom row to flatten

    Returns:
        List of entries, empty if no dimension was tracked
    """
    entries = []
    for dimension in SYMPTOM_DIMENSIONS:
        severity = getattr(record, dimension)
        if severity is not None:
            entries.append(SymptomLogEntry(date=record.date, severity=severity))
    return entries


def flatten_symptom_records(records: Iterable[SymptomRecord]) -> list[SymptomLogEntry]:
    """Flatten many symptom rows, preserving their order."""
    return [entry for record in records for entry in flatten_symptom_record(record)]
