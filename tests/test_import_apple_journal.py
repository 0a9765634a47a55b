#!/usr/bin/env python3
"""
Test cases for the logging helpers and fragment converters of
import_apple_journal.py
"""

import dataclasses
import subprocess
from unittest.mock import MagicMock, patch

import pytest

from import_apple_journal import (
    FragmentConversionError,
    LogLevel,
    MarkdownifyConverter,
    PandocConverter,
    check_pandoc,
    ensure_dir,
    log_debug,
    log_error,
    log_message,
    log_warning,
    make_converter,
    set_log_file,
    set_log_level,
)


def test_set_log_level():
    """Test setting the global log level."""
    set_log_level("DEBUG")
    assert log_message("Test", "DEBUG") is None
    set_log_level("ERROR")
    with patch("builtins.print") as mock_print:
        log_message("Test", "INFO")
        mock_print.assert_not_called()
    with pytest.raises(ValueError):
        set_log_level("INVALID")


def test_log_levels_are_ordered():
    assert LogLevel.DEBUG.value < LogLevel.INFO.value < LogLevel.WARNING.value
    assert LogLevel.WARNING.value < LogLevel.ERROR.value


def test_log_message(temp_dir, capsys):
    """Test logging to console and file."""
    log_file = temp_dir / "test.log"
    set_log_file(log_file)
    log_message("Test message", "INFO")
    captured = capsys.readouterr()
    assert "[INFO]" in captured.out
    assert "Test message" in captured.out
    assert log_file.read_text().endswith("Test message\n")


def test_log_file_records_filtered_levels(temp_dir, capsys):
    """Messages below the console threshold still reach the log file."""
    log_file = temp_dir / "debug.log"
    set_log_file(log_file)
    log_debug("Hidden on console")
    assert capsys.readouterr().out == ""
    assert "[DEBUG]" in log_file.read_text()


def test_log_error(temp_dir, capsys):
    """Test error logging."""
    log_file = temp_dir / "error.log"
    set_log_file(log_file)
    set_log_level("ERROR")
    log_error("Error message")
    captured = capsys.readouterr()
    assert "Error message" in captured.out
    assert log_file.read_text().endswith("Error message\n")


def test_log_warning(temp_dir, capsys):
    """Test warning logging."""
    set_log_level("WARNING")
    log_warning("Warning message")
    captured = capsys.readouterr()
    assert "[WARNING]" in captured.out
    assert "Warning message" in captured.out


def test_unwritable_log_file_reports_to_stderr(temp_dir, capsys):
    set_log_file(temp_dir / "missing_dir" / "test.log")
    log_message("Still printed", "INFO")
    captured = capsys.readouterr()
    assert "Still printed" in captured.out
    assert "Could not write to log file" in captured.err


def test_ensure_dir(temp_dir):
    """Test directory creation."""
    new_dir = temp_dir / "new" / "subdir"
    ensure_dir(new_dir)
    assert new_dir.is_dir()
    ensure_dir(new_dir)


def test_check_pandoc():
    """Test checking for Pandoc installation."""
    with patch("subprocess.run", return_value=True):
        assert check_pandoc()
    with patch("subprocess.run", side_effect=FileNotFoundError):
        assert not check_pandoc()
    with patch("subprocess.run", side_effect=subprocess.CalledProcessError(1, "pandoc")):
        assert not check_pandoc()


def test_markdownify_converter():
    converter = MarkdownifyConverter()
    html = (
        '<div class="bodyText"><h2>Plans</h2>'
        "<p>Hello <b>world</b></p><ul><li>coffee</li></ul></div>"
    )
    markdown = converter.convert(html)
    assert "## Plans" in markdown
    assert "Hello **world**" in markdown
    assert "- coffee" in markdown
    assert markdown == markdown.strip()


def test_markdownify_converter_wraps_errors():
    with patch(
        "import_apple_journal.MarkdownConverter.convert", side_effect=RuntimeError("bad")
    ):
        with pytest.raises(FragmentConversionError):
            MarkdownifyConverter().convert("<p>x</p>")


def test_converters_are_immutable():
    converter = MarkdownifyConverter()
    with pytest.raises(dataclasses.FrozenInstanceError):
        converter.bullets = "*"


def test_pandoc_converter():
    """Test Pandoc fragment conversion."""
    result = MagicMock(stdout="Hello **world**\n")
    with patch("subprocess.run", return_value=result) as mock_run:
        assert PandocConverter().convert("<p>Hello <b>world</b></p>") == "Hello **world**"
    args, kwargs = mock_run.call_args
    assert args[0][:5] == ["pandoc", "-f", "html", "-t", "gfm"]
    assert kwargs["input"] == "<p>Hello <b>world</b></p>"


def test_pandoc_converter_errors():
    with patch(
        "subprocess.run",
        side_effect=subprocess.CalledProcessError(1, "cmd", stderr="Error"),
    ):
        with pytest.raises(FragmentConversionError, match="Error"):
            PandocConverter().convert("<p>x</p>")
    with patch("subprocess.run", side_effect=FileNotFoundError):
        with pytest.raises(FragmentConversionError, match="not found"):
            PandocConverter().convert("<p>x</p>")


def test_make_converter():
    assert isinstance(make_converter(), MarkdownifyConverter)
    assert isinstance(make_converter("pandoc"), PandocConverter)
    with pytest.raises(ValueError):
        make_converter("word")
