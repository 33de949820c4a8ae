"""StudyMate - student productivity toolkit with a Pomodoro timer."""

__version__ = "0.1.0"
