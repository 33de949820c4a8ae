"""Service layer for StudyMate."""
