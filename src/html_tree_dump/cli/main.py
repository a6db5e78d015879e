"""Main CLI entry point for the html-tree-dump command-line tool.

Reads one HTML document, writes any parse diagnostics, then writes the tree
dump of the document.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from html_tree_dump import __version__
from html_tree_dump.api import DumpResult, TreeDumper, format_diagnostics
from html_tree_dump.shared.config import ConfigError, ParserConfig
from html_tree_dump.shared.errors import InputAcquisitionError, TreeInvariantError
from html_tree_dump.shared.logging import configure_logging, get_logger

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_INVARIANT_VIOLATION = 3
EXIT_INTERRUPTED = 130  # Standard exit code for SIGINT

_LOGGING_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CLIConfig:
    """Configuration management for CLI operations."""

    def __init__(self):
        self.parser_config = ParserConfig()
        self.show_diagnostics = True
        self.logging_level = "WARNING"

    @classmethod
    def from_file(cls, config_path: Path) -> "CLIConfig":
        """Load CLI configuration from a JSON file.

        The file may contain a ``parser`` object (see :class:`ParserConfig`),
        ``show_diagnostics`` and ``logging_level``. A missing or invalid file
        leaves the defaults in place and prints a warning.
        """
        config = cls()
        if config_path.exists():
            try:
                with config_path.open(encoding="utf-8") as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ConfigError("Configuration file must contain a JSON object")
                if "parser" in data:
                    config.parser_config = ParserConfig.from_dict(data["parser"])
                config.show_diagnostics = bool(
                    data.get("show_diagnostics", config.show_diagnostics)
                )
                level = str(data.get("logging_level", config.logging_level)).upper()
                if level not in _LOGGING_LEVELS:
                    raise ConfigError(f"Unknown logging_level: {level}")
                config.logging_level = level

            except (OSError, ValueError, ConfigError) as e:
                print(f"Warning: Could not load config file: {e}", file=sys.stderr)

        return config


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="html-tree-dump",
        description="Dump the parsed tree of an HTML document, one line per node",
    )

    parser.add_argument("--version", action="version", version=__version__)

    parser.add_argument(
        "path",
        type=Path,
        help="HTML file to dump"
    )
    parser.add_argument(
        "--encoding", "-e",
        help="Decode the input with this encoding instead of UTF-8"
    )
    parser.add_argument(
        "--sniff-encoding",
        action="store_true",
        help="Pick the input encoding from a BOM or <meta charset>"
    )
    parser.add_argument(
        "--scripting",
        action="store_true",
        help="Parse <noscript> as if scripting were enabled"
    )
    parser.add_argument(
        "--no-diagnostics",
        action="store_true",
        help="Do not print parse errors"
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Write the dump to this file instead of stdout"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Configuration file path"
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    verbosity.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )

    return parser


def _build_config(args: argparse.Namespace) -> CLIConfig:
    config = CLIConfig()
    if args.config:
        config = CLIConfig.from_file(args.config)

    overrides = {}
    if args.encoding:
        overrides["encoding"] = args.encoding
    if args.sniff_encoding:
        overrides["sniff_encoding"] = True
    if args.scripting:
        overrides["scripting"] = True
    if overrides:
        config.parser_config = config.parser_config.override(**overrides)

    if args.no_diagnostics:
        config.show_diagnostics = False
    if args.verbose:
        config.logging_level = "DEBUG"
    elif args.quiet:
        config.logging_level = "ERROR"
    return config


def write_result(
    result: DumpResult,
    show_diagnostics: bool,
    stdout: TextIO,
    output: Optional[Path] = None,
) -> None:
    """Write diagnostics (first) and the dump."""
    if show_diagnostics:
        stdout.write(format_diagnostics(result.diagnostics))
    if output is None:
        stdout.write(result.text)
    else:
        output.write_text(result.text, encoding="utf-8")


def cmd_dump(args: argparse.Namespace, config: CLIConfig) -> int:
    """Dump the document named on the command line."""
    logger = get_logger(__name__, None, "cli")
    dumper = TreeDumper(config.parser_config)

    try:
        result = dumper.dump(args.path)
    except InputAcquisitionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except TreeInvariantError as e:
        logger.exception("Parsed tree violates the dump contract")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVARIANT_VIOLATION

    try:
        write_result(result, config.show_diagnostics, sys.stdout, args.output)
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    if args.output:
        print(f"Dump written to {args.output}", file=sys.stderr)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        config = _build_config(args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    configure_logging(config.logging_level)

    try:
        return cmd_dump(args, config)
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
