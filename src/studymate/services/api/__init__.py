"""HTTP API clients for the notes and timetable collections."""
