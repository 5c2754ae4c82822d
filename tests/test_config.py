"""Tests for configuration loading."""

from __future__ import annotations

import yaml

from phaseline.config import Config


class TestConfig:
    def test_defaults(self, tmp_path):
        config = Config.load(tmp_path)
        assert config.home_path == tmp_path
        assert config.locale == "en"
        assert config.log_level == "WARNING"
        assert config.new_project_days == 3
        assert config.low_completion_rate == 30.0
        assert config.stalled_after_days == 7

    def test_yaml_overrides(self, tmp_path):
        (tmp_path / "config.yaml").write_text(
            yaml.dump({"locale": "es", "stale_after_days": "21", "low_completion_rate": 25})
        )
        config = Config.load(tmp_path)
        assert config.locale == "es"
        assert config.stale_after_days == 21
        assert config.low_completion_rate == 25.0

    def test_yaml_cannot_move_home(self, tmp_path):
        (tmp_path / "config.yaml").write_text(yaml.dump({"home_path": "/elsewhere"}))
        assert Config.load(tmp_path).home_path == tmp_path

    def test_unknown_keys_ignored(self, tmp_path):
        (tmp_path / "config.yaml").write_text(yaml.dump({"colour": "blue"}))
        assert not hasattr(Config.load(tmp_path), "colour")

    def test_empty_file(self, tmp_path):
        (tmp_path / "config.yaml").write_text("")
        assert Config.load(tmp_path).locale == "en"

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        (tmp_path / "config.yaml").write_text(yaml.dump({"locale": "en", "log_level": "INFO"}))
        monkeypatch.setenv("PHASELINE_LOCALE", "es")
        monkeypatch.setenv("PHASELINE_LOG_LEVEL", "DEBUG")
        config = Config.load(tmp_path)
        assert config.locale == "es"
        assert config.log_level == "DEBUG"

    def test_env_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PHASELINE_HOME", str(tmp_path / "custom"))
        assert Config.load().home_path == tmp_path / "custom"

    def test_save_roundtrip(self, tmp_path):
        config = Config(
            home_path=tmp_path / "home", locale="es", recent_activity_days=10, stalled_after_days=14
        )
        config.save()
        assert config.config_file.exists()

        loaded = Config.load(tmp_path / "home")
        assert loaded.locale == "es"
        assert loaded.recent_activity_days == 10
        assert loaded.stalled_after_days == 14


class TestResolvedLocale:
    def test_region_suffix(self):
        assert Config(locale="es-MX").resolved_locale == "es"
        assert Config(locale="ES_es").resolved_locale == "es"

    def test_unsupported_falls_back(self):
        assert Config(locale="fr").resolved_locale == "en"
        assert Config(locale="").resolved_locale == "en"
