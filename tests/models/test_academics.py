"""Tests for notes, timetable models and the GPA calculator."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from studymate.models.academics import (
    GPAError,
    Note,
    NoteCreate,
    TimetableEntry,
    TimetableEntryCreate,
    calculate_gpa,
    parse_subject,
)


class TestCalculateGPA:
    def test_credit_weighted_average(self) -> None:
        assert calculate_gpa([(3, 4.0), (4, 3.0)]) == 3.43

    def test_single_subject(self) -> None:
        assert calculate_gpa([(2, 3.7)]) == 3.7

    @pytest.mark.parametrize(
        "subjects",
        [
            [(0, 4.0)],
            [(-1, 3.0)],
            [(3, -1.0)],
            [(float("nan"), 3.0)],
            [(float("inf"), 4.0)],
            [(3, float("inf"))],
        ],
    )
    def test_invalid_rows_rejected(self, subjects) -> None:
        with pytest.raises(GPAError, match="Credits must be greater than 0"):
            calculate_gpa(subjects)

    def test_no_subjects(self) -> None:
        with pytest.raises(GPAError, match="at least one subject"):
            calculate_gpa([])

    def test_error_is_value_error(self) -> None:
        assert issubclass(GPAError, ValueError)


class TestParseSubject:
    def test_pair(self) -> None:
        assert parse_subject("3:3.7") == (3.0, 3.7)

    @pytest.mark.parametrize("spec", ["3", "3-4.0", "a:b", ":4"])
    def test_malformed(self, spec: str) -> None:
        with pytest.raises(GPAError):
            parse_subject(spec)


class TestNoteModels:
    def test_note_from_api_payload(self) -> None:
        note = Note.model_validate(
            {
                "_id": "65f0",
                "title": "Exam",
                "content": "Chapter 4",
                "user_uid": "u1",
                "createdAt": "2026-03-10T09:00:00Z",
                "updatedAt": "2026-03-10T10:00:00Z",
                "__v": 0,
            }
        )

        assert note.id == "65f0"
        assert note.updated_at is not None
        assert note.updated_at.hour == 10

    def test_blank_title_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NoteCreate(title="  ", content="body")


class TestTimetableModels:
    def test_type_defaults_to_lecture(self) -> None:
        entry = TimetableEntry.model_validate(
            {"_id": "t1", "day": "Monday", "time": "09:00", "subject": "Maths"}
        )
        assert entry.type == "Lecture"

    def test_create_strips_fields(self) -> None:
        payload = TimetableEntryCreate(day=" Monday ", time="09:00", subject="Physics", type="Lab")
        assert payload.model_dump() == {
            "day": "Monday",
            "time": "09:00",
            "subject": "Physics",
            "type": "Lab",
        }

    def test_create_requires_subject(self) -> None:
        with pytest.raises(ValidationError):
            TimetableEntryCreate(day="Monday", time="09:00", subject="")
