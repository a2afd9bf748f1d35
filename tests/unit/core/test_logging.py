"""Tests for logging configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog

from console_rpg.core.logging import (
    add_app_context,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore structlog defaults and the root logger after each test."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    clear_context()
    structlog.reset_defaults()
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level="INFO", json_format=True)

        get_logger("test").info("Attack resolved", damage=4)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "Attack resolved"
        assert payload["damage"] == 4
        assert payload["app"] == "console_rpg"
        assert payload["level"] == "info"

    def test_level_filters_lower_levels(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level="WARNING", json_format=True)

        get_logger("test").info("hidden")

        assert "hidden" not in capsys.readouterr().out

    def test_bound_context_included(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level="INFO", json_format=True)
        bind_context(session_id="abc123")

        get_logger("test").info("Characters filtered")

        payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert payload["session_id"] == "abc123"


    def test_defaults_from_settings(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("CONSOLE_RPG_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("CONSOLE_RPG_JSON_LOGS", "true")
        configure_logging()

        logger = get_logger("test")
        logger.warning("suppressed")
        logger.error("Relocation failed")

        payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert payload["event"] == "Relocation failed"


    def test_log_file_receives_stdlib_records(self, tmp_path: Path) -> None:
        log_path = tmp_path / "console_rpg.log"
        configure_logging(level="INFO", json_format=True, log_file=str(log_path))

        persistence_logger = logging.getLogger("console_rpg.persistence")
        persistence_logger.info("World saved")
        persistence_logger.debug("Row written")

        contents = log_path.read_text()
        assert "[INFO] console_rpg.persistence: World saved" in contents
        assert "Row written" not in contents

    def test_stdlib_level_follows_setting(self) -> None:
        configure_logging(level="WARNING", json_format=False)
        assert logging.getLogger().level == logging.WARNING


class TestAddAppContext:
    """Tests for the app context processor."""

    def test_adds_app_key(self) -> None:
        event_dict = add_app_context(None, "info", {"event": "x"})  # type: ignore[arg-type]
        assert event_dict["app"] == "console_rpg"
