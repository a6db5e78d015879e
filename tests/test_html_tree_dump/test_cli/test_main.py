"""Tests for the CLI main module."""

import json
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from html_tree_dump.api import dump_string
from html_tree_dump.cli.main import (
    EXIT_INPUT_ERROR,
    EXIT_INTERRUPTED,
    EXIT_INVARIANT_VIOLATION,
    EXIT_OK,
    CLIConfig,
    create_argument_parser,
    main,
)

EMPTY_DOCUMENT = "#Document\n  <html>\n    <head>\n    <body>\n"


@pytest.fixture
def html_file(tmp_path):
    def write(content, name="page.html"):
        path = tmp_path / name
        path.write_bytes(content if isinstance(content, bytes) else content.encode("utf-8"))
        return path

    return write


class TestCLIConfig:
    """Test CLI configuration management."""

    def test_default_config(self):
        """Test default configuration values."""
        config = CLIConfig()
        assert config.show_diagnostics is True
        assert config.logging_level == "WARNING"
        assert config.parser_config.default_encoding == "utf-8"

    def test_config_from_file(self):
        """Test loading configuration from file."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
            json.dump(
                {
                    "parser": {"encoding": "windows-1252", "scripting": True},
                    "show_diagnostics": False,
                    "logging_level": "info",
                },
                f,
            )
            config_path = Path(f.name)

        try:
            config = CLIConfig.from_file(config_path)
            assert config.parser_config.encoding == "windows-1252"
            assert config.parser_config.scripting is True
            assert config.show_diagnostics is False
            assert config.logging_level == "INFO"
        finally:
            config_path.unlink()

    def test_config_from_nonexistent_file(self):
        """Test handling non-existent config file."""
        config = CLIConfig.from_file(Path("nonexistent.json"))
        assert config.show_diagnostics is True

    def test_invalid_config_file(self, tmp_path, capsys):
        """Test that an invalid file keeps defaults and warns."""
        config_path = tmp_path / "config.json"
        config_path.write_text('{"parser": {"encoding": "bogus"}}')

        config = CLIConfig.from_file(config_path)

        assert config.parser_config.encoding is None
        assert "Could not load config file" in capsys.readouterr().err

    def test_non_object_config_file(self, tmp_path, capsys):
        config_path = tmp_path / "config.json"
        config_path.write_text("[1, 2]")

        CLIConfig.from_file(config_path)

        assert "Could not load config file" in capsys.readouterr().err

    def test_unknown_logging_level(self, tmp_path, capsys):
        config_path = tmp_path / "config.json"
        config_path.write_text('{"logging_level": "LOUD"}')

        config = CLIConfig.from_file(config_path)

        assert config.logging_level == "WARNING"
        assert "LOUD" in capsys.readouterr().err


class TestArgumentParser:
    """Test command-line argument parsing."""

    def test_basic_arguments(self):
        parser = create_argument_parser()
        args = parser.parse_args(["page.html"])
        assert args.path == Path("page.html")
        assert args.encoding is None
        assert args.sniff_encoding is False
        assert args.scripting is False
        assert args.no_diagnostics is False
        assert args.output is None

    def test_all_options(self):
        parser = create_argument_parser()
        args = parser.parse_args(
            ["page.html", "-e", "latin1", "--scripting", "--no-diagnostics",
             "-o", "out.txt", "-c", "conf.json", "-v"]
        )
        assert args.encoding == "latin1"
        assert args.scripting is True
        assert args.no_diagnostics is True
        assert args.output == Path("out.txt")
        assert args.config == Path("conf.json")
        assert args.verbose is True

    def test_missing_path(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_verbose_and_quiet_exclusive(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["page.html", "--verbose", "--quiet"])
        assert exc_info.value.code == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "0.1.0" in capsys.readouterr().out


class TestMain:
    """Test the html-tree-dump command."""

    def test_diagnostics_then_dump(self, html_file, capsys):
        """Test that the parse error report precedes the dump."""
        path = html_file("")

        assert main([str(path)]) == EXIT_OK

        out = capsys.readouterr().out
        assert out.startswith(
            "Parse errors:\n    Unexpected End of file. Expected DOCTYPE."
        )
        assert out.endswith(EMPTY_DOCUMENT)
        assert out.count("Parse errors:") == 1

    def test_no_diagnostics_block_without_errors(self, html_file, capsys):
        path = html_file("<!DOCTYPE html>")

        assert main([str(path)]) == EXIT_OK

        assert capsys.readouterr().out == '#Document\n  <!DOCTYPE html "" "">\n' + (
            EMPTY_DOCUMENT[len("#Document\n"):]
        )

    def test_no_diagnostics_flag(self, html_file, capsys):
        path = html_file("<!-- foo -->")

        assert main([str(path), "--no-diagnostics"]) == EXIT_OK

        assert capsys.readouterr().out == dump_string("<!-- foo -->").text

    def test_output_file(self, html_file, tmp_path, capsys):
        path = html_file("foo")
        output = tmp_path / "dump.txt"

        assert main([str(path), "-o", str(output)]) == EXIT_OK

        captured = capsys.readouterr()
        assert output.read_text(encoding="utf-8") == EMPTY_DOCUMENT + "      #text:foo\n"
        assert captured.out.startswith("Parse errors:")
        assert "#Document" not in captured.out
        assert "Dump written to" in captured.err

    def test_encoding_option(self, html_file, capsys):
        path = html_file(b"<p>caf\xe9</p>")

        assert main([str(path), "--no-diagnostics", "-e", "windows-1252"]) == EXIT_OK

        assert "#text:caf\\u{e9}" in capsys.readouterr().out

    def test_unknown_encoding_option(self, html_file, capsys):
        path = html_file("foo")

        assert main([str(path), "-e", "bogus"]) == EXIT_INPUT_ERROR

        assert "Error:" in capsys.readouterr().err

    def test_config_file_option(self, html_file, tmp_path, capsys):
        path = html_file("")
        config_path = tmp_path / "config.json"
        config_path.write_text('{"show_diagnostics": false}')

        assert main([str(path), "-c", str(config_path)]) == EXIT_OK

        assert capsys.readouterr().out == EMPTY_DOCUMENT

    def test_missing_file(self, tmp_path, capsys):
        missing = tmp_path / "missing.html"

        assert main([str(missing)]) == EXIT_INPUT_ERROR

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error:" in captured.err
        assert "missing.html" in captured.err

    def test_invalid_utf8_file(self, html_file, capsys):
        """Test that a file that is not UTF-8 is an input error."""
        path = html_file(b"<p>\xff</p>")

        assert main([str(path)]) == EXIT_INPUT_ERROR

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "UTF-8" in captured.err

    def test_sniff_encoding_option(self, html_file, capsys):
        path = html_file(b'<meta charset="windows-1252"><p>caf\xe9</p>')

        assert main([str(path), "--no-diagnostics", "--sniff-encoding"]) == EXIT_OK

        assert "#text:caf\\u{e9}" in capsys.readouterr().out

    def test_foreign_content(self, html_file, capsys):
        path = html_file("<svg></svg>")

        assert main([str(path)]) == EXIT_INVARIANT_VIOLATION

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error:" in captured.err

    def test_unwritable_output(self, html_file, tmp_path, capsys):
        path = html_file("foo")
        output = tmp_path / "no-such-dir" / "dump.txt"

        assert main([str(path), "--no-diagnostics", "-o", str(output)]) == EXIT_INPUT_ERROR

        assert "Error writing output" in capsys.readouterr().err

    def test_keyboard_interrupt(self, html_file, capsys):
        path = html_file("foo")

        with patch("html_tree_dump.cli.main.TreeDumper.dump", side_effect=KeyboardInterrupt):
            assert main([str(path)]) == EXIT_INTERRUPTED

        assert "interrupted" in capsys.readouterr().err
