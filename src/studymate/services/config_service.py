"""Configuration service for managing StudyMate configuration.

This module provides the ConfigService class, the single source of truth for
configuration in StudyMate. It handles:

- Loading and saving config.json
- Applying Pomodoro timer settings with input coercion
- Storing the API identity token
"""

from __future__ import annotations

import json
from functools import lru_cache
from json import JSONDecodeError
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir

from studymate.models.config_models import AppConfig
from studymate.utils.logger import get_logger, set_level

logger = get_logger()


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir("studymate"))
        self.config_path = self.config_dir / "config.json"
        self.credentials_dir = self.config_dir / "credentials"
        self.data_dir = Path(user_data_dir("studymate"))

        # Ensure directories exist
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.credentials_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    @property
    def store_dir(self) -> Path:
        """Directory of the local key-value store."""
        if self.config.storage.directory:
            return Path(self.config.storage.directory).expanduser()
        return self.data_dir / "store"

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run
            self._config = AppConfig()
            self.save_config()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        set_level(self._config.logging.level)
        return self._config

    def save_config(self):
        """Save the current configuration to storage."""
        if self._config is None:
            raise RuntimeError("No configuration to save")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self._config.model_dump_json(indent=4))

            self.config_path.chmod(0o600)
        except Exception as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def reset_config(self):
        """Reset configuration to defaults."""
        self._config = AppConfig()
        self.save_config()

    def apply_pomodoro_settings(self, **raw: Any) -> AppConfig:
        """Coerce and persist timer durations.

        Each value is parsed as a whole number; values below 1 become 1 and
        unparseable values keep the current setting. ``None`` leaves a field
        unchanged.
        """
        current = self.config.pomodoro
        timer = current.timer_config().apply(**raw)
        self._config = self.config.model_copy(
            update={
                "pomodoro": current.model_copy(
                    update={
                        "work_minutes": timer.work_minutes,
                        "short_break_minutes": timer.short_break_minutes,
                        "long_break_minutes": timer.long_break_minutes,
                        "cycles_before_long_break": timer.cycles_before_long_break,
                    }
                )
            }
        )
        self.save_config()
        logger.info(
            "pomodoro settings applied: %s/%s/%s x%s",
            timer.work_minutes,
            timer.short_break_minutes,
            timer.long_break_minutes,
            timer.cycles_before_long_break,
        )
        return self._config

    def load_credentials(self) -> dict | None:
        """Load the stored identity token.

        Returns:
            dict with 'token', or None if not found
        """
        cred_path = self.credentials_dir / "default.json"
        if not cred_path.exists():
            return None

        try:
            with open(cred_path, encoding="utf-8") as f:
                return json.load(f)
        except JSONDecodeError:
            return None

    def save_credentials(self, token: str) -> None:
        """Save the identity token sent as a bearer token to the API."""
        cred_path = self.credentials_dir / "default.json"
        cred_path.parent.mkdir(parents=True, exist_ok=True)

        with open(cred_path, "w", encoding="utf-8") as f:
            json.dump({"token": token}, f, indent=2)

        # Set secure file permissions
        cred_path.chmod(0o600)

    def clear_credentials(self) -> None:
        """Forget the stored identity token."""
        cred_path = self.credentials_dir / "default.json"
        if cred_path.exists():
            cred_path.unlink()


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
