"""Tests for ColoredFormatter."""

import logging
from io import StringIO
from unittest.mock import patch

import pytest

from jukebox_sync.utils.logging import ColoredFormatter

RESET = "\033[0m"
DIM = "\033[2m"


class _TtyStream(StringIO):
    def isatty(self) -> bool:
        return True


def _record(level: int, message: str = "room ABC123 ready") -> logging.LogRecord:
    return logging.LogRecord(
        name="jukebox_sync.application.services.room_engine",
        level=level,
        pathname="room_engine.py",
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )


class TestColoredFormatter:
    """Tests for ANSI color formatting."""

    @pytest.mark.parametrize("level", sorted(ColoredFormatter.COLORS))
    def test_level_color_on_tty(self, level: int):
        fmt = ColoredFormatter("%(levelname)s | %(message)s", stream=_TtyStream())

        output = fmt.format(_record(level))

        assert output.startswith(ColoredFormatter.COLORS[level])
        assert RESET in output

    def test_logger_name_is_dimmed(self):
        fmt = ColoredFormatter("%(name)s: %(message)s", stream=_TtyStream())

        output = fmt.format(_record(logging.INFO))

        assert output.startswith(f"{DIM}jukebox_sync.application.services.room_engine{RESET}")

    def test_no_color_env_disables_colors(self):
        fmt = ColoredFormatter("%(levelname)s | %(message)s", stream=_TtyStream())

        with patch.dict("os.environ", {"NO_COLOR": "1"}):
            output = fmt.format(_record(logging.INFO))

        assert output == "INFO | room ABC123 ready"

    def test_plain_output_when_not_a_tty(self):
        fmt = ColoredFormatter("%(levelname)s | %(message)s", stream=StringIO())

        output = fmt.format(_record(logging.ERROR))

        assert "\033[" not in output
        assert output == "ERROR | room ABC123 ready"

    def test_record_left_untouched_for_other_handlers(self):
        fmt = ColoredFormatter("%(levelname)s %(name)s", stream=_TtyStream())
        record = _record(logging.WARNING)

        fmt.format(record)

        assert record.levelname == "WARNING"
        assert record.name == "jukebox_sync.application.services.room_engine"

    def test_defaults_to_stderr(self):
        fmt = ColoredFormatter("%(message)s")

        with patch("sys.stderr", StringIO()):
            assert fmt.use_color() is False
