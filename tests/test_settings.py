"""
Tests for tomlenv Settings - defaults and TOMLENV_* overrides.
Run: pytest tests/test_settings.py -v
"""
import pytest
from tomlenv.config.settings import Settings


class TestSettings:

    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.env_var == "env"
        assert s.env_file_name == "env.toml"
        assert s.env_dir == "."
        assert s.log_level == "WARNING"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("TOMLENV_VAR", "APP_ENV")
        monkeypatch.setenv("TOMLENV_DIR", "/etc/app")
        monkeypatch.setenv("TOMLENV_FILE_NAME", "environments.toml")
        s = Settings(_env_file=None)
        assert s.env_var == "APP_ENV"
        assert s.env_dir == "/etc/app"
        assert s.env_file_name == "environments.toml"

    def test_dotenv_file(self, tmp_path):
        dotenv = tmp_path / ".env"
        dotenv.write_text("TOMLENV_VAR=DEPLOY_ENV\n")
        assert Settings(_env_file=dotenv).env_var == "DEPLOY_ENV"

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("TOMLENV_LOG_LEVEL", "debug")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_unknown_log_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("TOMLENV_LOG_LEVEL", "chatty")
        assert Settings(_env_file=None).log_level == "WARNING"
