"""Tests for notes and timetable commands with the API mocked out."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
from typer.testing import CliRunner

from studymate.main import app
from studymate.models.academics import Note, TimetableEntry
from studymate.services.api.client import NotAuthenticatedError
from studymate.utils import exit_codes

runner = CliRunner()


def _client_cm():
    client = MagicMock()
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=None)
    return client


def _patch_client(module: str):
    return patch(f"studymate.commands.{module}.get_client", return_value=_client_cm())


class TestNotes:
    def test_list(self) -> None:
        api = MagicMock()
        api.list_notes = AsyncMock(
            return_value=[Note.model_validate({"_id": "n1", "title": "Exam", "content": "Ch. 4"})]
        )
        with _patch_client("notes"), patch("studymate.commands.notes.NotesAPI", return_value=api):
            result = runner.invoke(app, ["notes", "list"])

        assert result.exit_code == 0
        assert "Exam" in result.stdout

    def test_list_empty(self) -> None:
        api = MagicMock()
        api.list_notes = AsyncMock(return_value=[])
        with _patch_client("notes"), patch("studymate.commands.notes.NotesAPI", return_value=api):
            result = runner.invoke(app, ["notes", "list"])

        assert "No notes yet" in result.stdout

    def test_add(self) -> None:
        api = MagicMock()
        api.create_note = AsyncMock(
            return_value=Note.model_validate({"_id": "n2", "title": "Lab", "content": "Goggles"})
        )
        with _patch_client("notes"), patch("studymate.commands.notes.NotesAPI", return_value=api):
            result = runner.invoke(app, ["notes", "add", "Lab", "Goggles"])

        assert result.exit_code == 0
        api.create_note.assert_awaited_once_with("Lab", "Goggles")

    def test_edit_requires_a_field(self) -> None:
        result = runner.invoke(app, ["notes", "edit", "n1"])

        assert result.exit_code == exit_codes.ERROR_INVALID_ARGS
        assert "Nothing to update" in result.stdout

    def test_not_logged_in(self) -> None:
        api = MagicMock()
        api.list_notes = AsyncMock(side_effect=NotAuthenticatedError("Not logged in."))
        with _patch_client("notes"), patch("studymate.commands.notes.NotesAPI", return_value=api):
            result = runner.invoke(app, ["notes", "list"])

        assert result.exit_code == exit_codes.ERROR_AUTH_FAILURE

    def test_not_found_maps_exit_code(self) -> None:
        request = httpx.Request("DELETE", "http://api.test/api/notes/nope")
        response = httpx.Response(404, json={"message": "Note not found"}, request=request)
        api = MagicMock()
        api.delete_note = AsyncMock(
            side_effect=httpx.HTTPStatusError("404", request=request, response=response)
        )
        with _patch_client("notes"), patch("studymate.commands.notes.NotesAPI", return_value=api):
            result = runner.invoke(app, ["notes", "delete", "nope"])

        assert result.exit_code == exit_codes.ERROR_NOT_FOUND
        assert "Note not found" in result.stdout


class TestTimetable:
    def test_list_sorted_by_weekday(self) -> None:
        api = MagicMock()
        api.list_entries = AsyncMock(
            return_value=[
                TimetableEntry.model_validate({"_id": "t2", "day": "Friday", "time": "09:00", "subject": "Art"}),
                TimetableEntry.model_validate({"_id": "t1", "day": "Monday", "time": "10:00", "subject": "Maths"}),
            ]
        )
        with _patch_client("timetable"), patch("studymate.commands.timetable.TimetableAPI", return_value=api):
            result = runner.invoke(app, ["timetable", "list"])

        assert result.exit_code == 0
        assert result.stdout.index("Maths") < result.stdout.index("Art")

    def test_list_filtered_by_day(self) -> None:
        api = MagicMock()
        api.list_entries = AsyncMock(
            return_value=[
                TimetableEntry.model_validate({"_id": "t2", "day": "Friday", "time": "09:00", "subject": "Art"}),
            ]
        )
        with _patch_client("timetable"), patch("studymate.commands.timetable.TimetableAPI", return_value=api):
            result = runner.invoke(app, ["timetable", "list", "--day", "monday"])

        assert "No classes scheduled" in result.stdout

    def test_add(self) -> None:
        api = MagicMock()
        api.create_entry = AsyncMock(
            return_value=TimetableEntry.model_validate(
                {"_id": "t3", "day": "Tuesday", "time": "14:00", "subject": "Physics", "type": "Lab"}
            )
        )
        with _patch_client("timetable"), patch("studymate.commands.timetable.TimetableAPI", return_value=api):
            result = runner.invoke(app, ["timetable", "add", "Tuesday", "14:00", "Physics", "--type", "Lab"])

        assert result.exit_code == 0
        api.create_entry.assert_awaited_once_with("Tuesday", "14:00", "Physics", type="Lab")

    def test_edit_sends_only_given_fields(self) -> None:
        api = MagicMock()
        api.update_entry = AsyncMock(
            return_value=TimetableEntry.model_validate(
                {"_id": "t1", "day": "Wednesday", "time": "11:00", "subject": "Maths"}
            )
        )
        with _patch_client("timetable"), patch("studymate.commands.timetable.TimetableAPI", return_value=api):
            result = runner.invoke(app, ["timetable", "edit", "t1", "--day", "Wednesday", "--time", "11:00"])

        assert result.exit_code == 0
        assert "Updated Maths on Wednesday at 11:00" in result.stdout
        api.update_entry.assert_awaited_once_with(
            "t1", day="Wednesday", time="11:00", subject=None, type=None
        )

    def test_edit_requires_a_field(self) -> None:
        result = runner.invoke(app, ["timetable", "edit", "t1"])

        assert result.exit_code == exit_codes.ERROR_INVALID_ARGS
        assert "Nothing to update" in result.stdout

    def test_edit_rejects_blank_subject(self) -> None:
        result = runner.invoke(app, ["timetable", "edit", "t1", "--subject", "  "])

        assert result.exit_code == exit_codes.ERROR_INVALID_ARGS
        assert "Day, time and subject are required." in result.stdout
