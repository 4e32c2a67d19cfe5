"""Tests for bundle_cli/config.py."""

import pydantic
import pytest

from bundle_cli.config import Settings, get_engine_command, get_log_level, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BUNDLE_ANALYZER_ENGINE_COMMAND", raising=False)
    monkeypatch.delenv("BUNDLE_ANALYZER_LOG_LEVEL", raising=False)


class TestSettings:
    def test_defaults(self) -> None:
        settings = load_settings()
        assert settings.engine_command == ["tuist", "inspect", "bundle", "{path}", "--json"]
        assert settings.log_level == "INFO"

    def test_engine_command_is_split_shell_style(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BUNDLE_ANALYZER_ENGINE_COMMAND", "'/opt/my tools/analyze' --format json {path}")
        assert get_engine_command() == ["/opt/my tools/analyze", "--format", "json", "{path}"]

    def test_empty_engine_command_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BUNDLE_ANALYZER_ENGINE_COMMAND", "")
        assert get_engine_command()[0] == "tuist"

    def test_log_level_is_uppercased(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BUNDLE_ANALYZER_LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"

    def test_accepts_field_values(self) -> None:
        settings = Settings(engine_command="analyzer --json", log_level="warning")
        assert settings.engine_command == ["analyzer", "--json"]
        assert settings.log_level == "WARNING"

    def test_settings_are_read_only(self) -> None:
        settings = load_settings()
        with pytest.raises(pydantic.ValidationError):
            settings.log_level = "DEBUG"
