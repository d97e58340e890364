"""Tests for settings loading (config.py) and logging setup (logging_utils.py)."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from minish import logging_utils
from minish.config import ShellSettings, get_settings


class TestShellSettings:
    def test_defaults(self) -> None:
        settings = ShellSettings()
        assert settings.prompt == "$ "
        assert settings.log_level == "WARNING"
        assert settings.report_status is True
        assert settings.history_file is None

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MINISH_PROMPT", "> ")
        monkeypatch.setenv("MINISH_REPORT_STATUS", "false")
        monkeypatch.setenv("MINISH_HISTORY_FILE", "/tmp/minish_history")

        settings = ShellSettings()

        assert settings.prompt == "> "
        assert settings.report_status is False
        assert settings.history_file == Path("/tmp/minish_history")

    def test_reads_dotenv_in_working_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / ".env").write_text("MINISH_LOG_LEVEL=debug\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        assert ShellSettings().log_level == "DEBUG"

    def test_log_level_is_normalised(self) -> None:
        assert ShellSettings(log_level=" info ").log_level == "INFO"

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ShellSettings(log_level="LOUD")


class TestGetSettings:
    def test_overrides_win_over_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MINISH_PROMPT", "env> ")
        assert get_settings(prompt="flag> ").prompt == "flag> "

    def test_none_overrides_are_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MINISH_PROMPT", "env> ")
        assert get_settings(prompt=None).prompt == "env> "


class TestConfigureLogging:
    def test_reconfigures_only_on_level_change(self, monkeypatch: pytest.MonkeyPatch) -> None:
        fake_logger = MagicMock()
        monkeypatch.setattr(logging_utils, "_CONFIGURED_LEVEL", None)
        monkeypatch.setattr(logging_utils, "logger", fake_logger)

        logging_utils.configure_logging("DEBUG")
        logging_utils.configure_logging("DEBUG")
        logging_utils.configure_logging("INFO")

        assert fake_logger.remove.call_count == 2
        assert [c.kwargs["level"] for c in fake_logger.add.call_args_list] == ["DEBUG", "INFO"]
