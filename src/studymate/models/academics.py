"""Notes, timetable entries and GPA arithmetic."""

from __future__ import annotations

import math
from collections.abc import Iterable
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Note(BaseModel):
    """A note owned by the signed-in user."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(alias="_id")
    title: str
    content: str
    user_uid: str | None = None
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")


class NoteCreate(BaseModel):
    """Payload for creating a note."""

    title: str
    content: str

    @field_validator("title", "content")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Title and content are required.")
        return v


class TimetableEntry(BaseModel):
    """A recurring class slot."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(alias="_id")
    day: str
    time: str
    subject: str
    type: str = "Lecture"
    user_uid: str | None = None


class TimetableEntryCreate(BaseModel):
    """Payload for creating a timetable entry."""

    day: str
    time: str
    subject: str
    type: str = "Lecture"

    @field_validator("day", "time", "subject")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Day, time and subject are required.")
        return v.strip()


class GPAError(ValueError):
    """Raised for subject rows that cannot be averaged."""


def calculate_gpa(subjects: Iterable[tuple[float, float]]) -> float:
    """Credit-weighted grade point average, rounded to two decimals.

    Args:
        subjects: (credits, grade points) pairs

    Raises:
        GPAError: if any credit is not positive, any grade is negative,
            or there are no credits at all
    """
    total_points = 0.0
    total_credits = 0.0
    for credits, grade in subjects:
        if not (math.isfinite(credits) and math.isfinite(grade)) or credits <= 0 or grade < 0:
            raise GPAError(
                "Please enter valid numbers for all credits and grade points. "
                "Credits must be greater than 0."
            )
        total_points += credits * grade
        total_credits += credits

    if total_credits == 0:
        raise GPAError("Please enter credits for at least one subject.")
    return round(total_points / total_credits, 2)


def parse_subject(spec: str) -> tuple[float, float]:
    """Parse a ``CREDITS:GRADE`` pair."""
    credits, sep, grade = spec.partition(":")
    if not sep:
        raise GPAError(f"Expected CREDITS:GRADE, got '{spec}'")
    try:
        return float(credits), float(grade)
    except ValueError as e:
        raise GPAError(f"Expected numbers in '{spec}'") from e
