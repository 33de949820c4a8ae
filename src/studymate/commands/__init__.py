"""Command modules for StudyMate."""
