"""
test_debug_logger.py
--------------------
Unit tests for category and level filtering of the console logger.
"""

import pytest

from frogger.core.debug.debug_logger import DebugLogger, LoggerConfig


@pytest.fixture(autouse=True)
def restore_logger_config(monkeypatch):
    """Every test works on a private copy of the logger settings."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", True)
    monkeypatch.setattr(LoggerConfig, "LOG_LEVEL", "INFO")
    monkeypatch.setattr(LoggerConfig, "CATEGORIES", dict(LoggerConfig.CATEGORIES))


class TestFiltering:

    def test_enabled_category_prints(self, capsys):
        DebugLogger.state("phase changed", category="game_state")
        out = capsys.readouterr().out
        assert "[STATE]" in out
        assert "phase changed" in out

    def test_disabled_category_silent(self, capsys):
        DebugLogger.state("key pressed", category="input")
        assert capsys.readouterr().out == ""

    def test_trace_needs_verbose(self, capsys):
        DebugLogger.trace("bug wrapped", category="entity_spawn")
        assert capsys.readouterr().out == ""

        LoggerConfig.configure(level="verbose")
        DebugLogger.trace("bug wrapped", category="entity_spawn")
        assert "bug wrapped" in capsys.readouterr().out

    def test_master_switch(self, capsys):
        LoggerConfig.configure(enabled=False)
        DebugLogger.fail("broken")
        assert capsys.readouterr().out == ""


class TestConfigure:

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError):
            LoggerConfig.configure(level="LOUD")

    def test_from_env(self):
        LoggerConfig.configure_from_env({
            "FROGGER_LOG_LEVEL": "warn",
            "FROGGER_LOG_CATEGORIES": "input, drawing",
        })

        assert LoggerConfig.LOG_LEVEL == "WARN"
        assert LoggerConfig.CATEGORIES["input"] is True
        assert LoggerConfig.CATEGORIES["drawing"] is True

    def test_empty_env_changes_nothing(self):
        LoggerConfig.configure_from_env({})
        assert LoggerConfig.LOG_LEVEL == "INFO"
        assert LoggerConfig.CATEGORIES["input"] is False


class TestFormatting:

    def test_init_entry_shows_status(self, capsys):
        DebugLogger.init_entry("GameScene")
        out = capsys.readouterr().out
        assert "> GameScene" in out
        assert "[OK]" in out

    def test_blank_init_prints_newline(self, capsys):
        DebugLogger.init("")
        assert capsys.readouterr().out == "\n"
