"""Configuration models for StudyMate.

Settings are persisted as JSON by ConfigService and validated with pydantic.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from studymate.models.pomodoro.settings import TimerConfig
from studymate.utils.logger import parse_level


class PomodoroSettings(BaseModel):
    """Pomodoro timer settings."""

    work_minutes: int = Field(default=25, ge=1)
    short_break_minutes: int = Field(default=5, ge=1)
    long_break_minutes: int = Field(default=15, ge=1)
    cycles_before_long_break: int = Field(default=4, ge=1)
    auto_resume_delay_ms: int = Field(
        default=1000, ge=0, description="Delay before work resumes after a break"
    )
    break_start_delay_ms: int = Field(
        default=250, ge=0, description="Delay before a requested break starts"
    )

    def timer_config(self) -> TimerConfig:
        """Durations as the engine's TimerConfig."""
        return TimerConfig(
            work_minutes=self.work_minutes,
            short_break_minutes=self.short_break_minutes,
            long_break_minutes=self.long_break_minutes,
            cycles_before_long_break=self.cycles_before_long_break,
        )


class APIConfig(BaseModel):
    """API configuration."""

    endpoint: str = Field(default="http://localhost:3001/api")
    timeout: int = Field(default=30)
    retry: int = Field(default=3)

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Strip whitespace and trailing slashes."""
        if not v or not v.strip():
            raise ValueError("endpoint cannot be empty")
        return v.strip().rstrip("/")


class StorageConfig(BaseModel):
    """Local key-value storage configuration."""

    directory: str | None = Field(
        default=None, description="Store directory (defaults to the user data dir)"
    )


class NotificationsConfig(BaseModel):
    """Notification configuration."""

    enabled: bool = Field(default=True)
    bell: bool = Field(default=True)


class LoggingConfig(BaseModel):
    """Log file configuration."""

    level: str = Field(default="INFO", description="DEBUG, INFO, WARNING or ERROR")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        parse_level(v)
        return v.strip().upper()


class AppConfig(BaseModel):
    """Main StudyMate configuration"""

    pomodoro: PomodoroSettings = Field(default_factory=PomodoroSettings)
    api: APIConfig = Field(default_factory=APIConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    notifications: NotificationsConfig = Field(default_factory=NotificationsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
