"""Phaseline configuration management."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

SUPPORTED_LOCALES = {"en", "es"}


@dataclass
class Config:
    """Phaseline configuration."""

    home_path: Path = field(default_factory=lambda: Path.home() / ".phaseline")
    log_level: str = "WARNING"
    locale: str = "en"

    # Activity windows
    recent_activity_days: int = 7
    active_window_minutes: int = 60
    recent_window_hours: int = 24

    # Phase and health thresholds
    new_project_days: int = 3
    stale_after_days: int = 14
    low_completion_rate: float = 30.0
    stalled_after_days: int = 7

    @classmethod
    def load(cls, home_path: Path | None = None) -> Config:
        """Load config from YAML file, env vars, then defaults."""
        config = cls()

        if home_path:
            config.home_path = home_path

        # Override from env
        env_home = os.environ.get("PHASELINE_HOME")
        if env_home:
            config.home_path = Path(env_home)

        # Load YAML config if exists
        config_file = config.config_file
        if config_file.exists():
            with open(config_file) as f:
                data = yaml.safe_load(f) or {}
            for key, value in data.items():
                if key == "home_path" or not hasattr(config, key):
                    continue
                expected_type = type(getattr(config, key))
                setattr(config, key, expected_type(value))

        env_log = os.environ.get("PHASELINE_LOG_LEVEL")
        if env_log:
            config.log_level = env_log

        env_locale = os.environ.get("PHASELINE_LOCALE")
        if env_locale:
            config.locale = env_locale

        return config

    @property
    def config_file(self) -> Path:
        return self.home_path / "config.yaml"

    @property
    def resolved_locale(self) -> str:
        """Configured locale, or English when it is not supported."""
        locale = (self.locale or "").lower().split("-")[0].split("_")[0]
        return locale if locale in SUPPORTED_LOCALES else "en"

    def save(self) -> None:
        """Save current config to YAML."""
        self.home_path.mkdir(parents=True, exist_ok=True)
        data = {
            "log_level": self.log_level,
            "locale": self.locale,
            "recent_activity_days": self.recent_activity_days,
            "active_window_minutes": self.active_window_minutes,
            "recent_window_hours": self.recent_window_hours,
            "new_project_days": self.new_project_days,
            "stale_after_days": self.stale_after_days,
            "low_completion_rate": self.low_completion_rate,
            "stalled_after_days": self.stalled_after_days,
        }
        with open(self.config_file, "w") as f:
            yaml.dump(data, f, default_flow_style=False)
