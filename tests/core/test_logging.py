"""
Unit tests for sysx logging configuration.
"""

import io
import logging
import sys
from pathlib import Path

import click
import pytest

from sysx.core.logging import (
    ColoredFormatter,
    LogLevel,
    StructuredFormatter,
    bug,
    fatal,
    get_logger,
    log_structured,
    setup_logging,
    success,
    trace,
)


def _record(level: int, message: str = "hello") -> logging.LogRecord:
    return logging.LogRecord("sysx.test", level, __file__, 1, message, (), None)


class TestLogLevels:
    """Tests for custom level registration."""

    @pytest.mark.parametrize(
        "level, name",
        [(5, "TRACE"), (25, "SUCCESS"), (45, "BUG")],
    )
    def test_custom_levels_registered(self, level: int, name: str):
        assert logging.getLevelName(level) == name

    def test_standard_fatal_alias_untouched(self):
        assert logging.getLevelName("FATAL") == logging.FATAL
        assert logging.getLevelName(logging.CRITICAL) == "CRITICAL"
        assert LogLevel.FATAL is LogLevel.CRITICAL

    def test_styles(self):
        assert LogLevel.INFO.style() == {"fg": "blue"}
        assert LogLevel.SUCCESS.style() == {"fg": "green"}
        assert LogLevel.WARNING.style() == {"fg": "yellow"}
        assert LogLevel.ERROR.style() == {"fg": "red"}
        assert LogLevel.DEBUG.style() == {"fg": "magenta"}
        assert LogLevel.TRACE.style() == {"fg": "cyan"}
        assert LogLevel.BUG.style()["fg"] == "bright_red"


class TestFormatters:
    """Tests for the structured and colored formatters."""

    def test_structured_data_appended(self):
        formatter = StructuredFormatter("%(levelname)s %(message)s")
        record = _record(logging.INFO)
        record.structured_data = {"radix": 16}

        assert formatter.format(record) == "INFO hello | Data: {'radix': 16}"

    def test_structured_format_does_not_mutate_record(self):
        formatter = StructuredFormatter("%(message)s")
        record = _record(logging.INFO)
        record.structured_data = {"k": 1}

        formatter.format(record)
        assert formatter.format(record) == "hello | Data: {'k': 1}"

    def test_colored_level_name(self):
        formatter = ColoredFormatter("%(levelname)s %(message)s")
        record = _record(LogLevel.SUCCESS)

        output = formatter.format(record)

        assert output == f"{click.style('SUCCESS', fg='green')} hello"
        assert record.levelname == "SUCCESS"

    def test_colored_unknown_level(self):
        formatter = ColoredFormatter("%(levelname)s")
        logging.addLevelName(33, "CUSTOM33")
        assert formatter.format(_record(33)) == click.style("CUSTOM33")


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_console_level(self):
        setup_logging(log_level="debug", enable_colors=False)
        logger = logging.getLogger("sysx")

        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert any(isinstance(h, logging.StreamHandler) for h in logger.handlers)

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "logs" / "sysx.log"
        setup_logging(log_level="INFO", log_file=log_file, enable_colors=False)

        logger = get_logger("sysx.test")
        success(logger, "codec ready")
        for handler in logging.getLogger("sysx").handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "[SUCCESS] sysx.test" in content
        assert "codec ready" in content

    def test_level_helpers(self, tmp_path: Path):
        log_file = tmp_path / "sysx.log"
        setup_logging(log_level="TRACE", log_file=log_file, enable_colors=True)

        logger = get_logger("sysx.helpers")
        trace(logger, "t")
        bug(logger, "b")
        fatal(logger, "f")
        log_structured(logger, logging.INFO, "structured", key="value")
        for handler in logging.getLogger("sysx").handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "[TRACE]" in content
        assert "[BUG]" in content
        assert "[CRITICAL]" in content
        assert "structured" in content

    def test_log_structured_respects_level(self, tmp_path: Path):
        log_file = tmp_path / "sysx.log"
        setup_logging(log_level="WARNING", log_file=log_file, enable_colors=False)

        log_structured(get_logger("sysx.quiet"), logging.INFO, "hidden", a=1)
        for handler in logging.getLogger("sysx").handlers:
            handler.flush()

        assert "hidden" not in log_file.read_text(encoding="utf-8")

    def test_no_colors_when_stderr_is_not_a_tty(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(sys, "stderr", io.StringIO())
        setup_logging(log_level="INFO")

        logger = get_logger("sysx.piped")
        logger.warning("plain")

        output = sys.stderr.getvalue()
        assert "[WARNING] sysx.piped: plain" in output
        assert "\x1b[" not in output

    def test_explicit_colors_override_tty_check(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(sys, "stderr", io.StringIO())
        setup_logging(log_level="INFO", enable_colors=True)

        (handler,) = logging.getLogger("sysx").handlers
        assert isinstance(handler.formatter, ColoredFormatter)

    def test_invalid_level(self):
        from sysx.core.exceptions import ConfigurationError

        with pytest.raises(ConfigurationError):
            setup_logging(log_level="LOUD")
