"""Unit tests for console formatting helpers."""

import logging
from collections.abc import Iterator

import click
import pytest
from histsweep.utils.formatting import (
    configure_logging,
    format_size,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from rich.logging import RichHandler


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Restore root logger handlers and level after the test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestFormatSize:
    """Tests for format_size."""

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (None, "0 B"),
            (0, "0 B"),
            (10, "10 B"),
            (1023, "1023 B"),
            (1024, "1.0 KB"),
            (1536, "1.5 KB"),
            (5 * 1024 * 1024, "5.0 MB"),
            (3 * 1024**4, "3.0 TB"),
        ],
    )
    def test_format_size(self, size: int | None, expected: str) -> None:
        """Byte counts are rendered with binary units."""
        assert format_size(size) == expected


class TestPrintHelpers:
    """Tests for the print_* helpers."""

    def test_info_and_success_go_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Info and success messages are written to stdout."""
        print_info("scanning")
        print_success("done")

        captured = capsys.readouterr()
        out = click.unstyle(captured.out)
        assert "scanning" in out
        assert "done" in out
        assert captured.err == ""

    def test_warning_and_error_go_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Warnings and errors are prefixed and written to stderr."""
        print_warning("careful")
        print_error("broken")

        captured = capsys.readouterr()
        err = click.unstyle(captured.err)
        assert "Warning: careful" in err
        assert "Error: broken" in err
        assert captured.out == ""


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.mark.usefixtures("restore_logging")
    def test_default_level_is_warning(self) -> None:
        """Without verbose only warnings and above are logged."""
        configure_logging()

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], RichHandler)

    @pytest.mark.usefixtures("restore_logging")
    def test_verbose_enables_debug(self) -> None:
        """Verbose logging switches to DEBUG."""
        configure_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    @pytest.mark.usefixtures("restore_logging")
    def test_reconfigure_replaces_handler(self) -> None:
        """Calling twice leaves a single handler."""
        configure_logging()
        configure_logging(verbose=True)
        assert len(logging.getLogger().handlers) == 1
