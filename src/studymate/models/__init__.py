"""Data models for StudyMate."""
