"""Unit tests for diagnostic formatting."""

import logging

import pytest
from mimels.utils.formatting import print_error, print_warning, setup_logging


class TestDiagnostics:
    """Tests for print_warning and print_error."""

    def test_warning_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Warnings carry the program name and [WARNING] tag on stderr."""
        print_warning("Permission denied: ./secret")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "mimels: [WARNING] Permission denied: ./secret\n"

    def test_error_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Errors carry the program name and [ERROR] tag on stderr."""
        print_error("Nothing to list")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "mimels: [ERROR] Nothing to list\n"

    def test_markup_in_message_printed_verbatim(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Square brackets in paths are not interpreted as Rich markup."""
        print_warning("Permission denied: ./[bold]x[/bold]")

        assert "./[bold]x[/bold]" in capsys.readouterr().err

    def test_emoji_codes_in_message_printed_verbatim(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Emoji shortcodes in paths are not replaced."""
        print_warning("Permission denied: ./notes:smile:.txt")

        assert capsys.readouterr().err == "mimels: [WARNING] Permission denied: ./notes:smile:.txt\n"

    def test_long_message_not_wrapped(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Long paths stay on one line."""
        path = "./" + "d/" * 80 + "file"
        print_warning(f"Permission denied: {path}")

        assert capsys.readouterr().err.count("\n") == 1


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_default_level_warning(self) -> None:
        """Without verbose the root logger level is WARNING."""
        setup_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_verbose_level_debug(self) -> None:
        """Verbose mode logs at DEBUG level."""
        setup_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG
        setup_logging()
