"""Parsing and dumping API with progressive disclosure.

Level 1 is a set of module-level functions (``dump``, ``dump_string``,
``dump_bytes``, ``dump_file``, ``render_html``); level 2 is the configurable,
reusable :class:`TreeDumper` they delegate to. Parsing itself is done by
html5lib, driving :class:`~html_tree_dump.dom.builder.NodeTreeBuilder`.

Parse diagnostics never interrupt a dump. Unreadable or undecodable input
raises :class:`InputAcquisitionError`; a tree that breaks the namespace contract
raises :class:`TreeInvariantError`.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, BinaryIO, Dict, Iterable, List, Optional, TextIO, Tuple, Union

import html5lib
from html5lib.constants import E

from html_tree_dump.dom.builder import NodeTreeBuilder
from html_tree_dump.dom.nodes import Document
from html_tree_dump.dump.walker import count_nodes, render
from html_tree_dump.shared import (
    DiagnosticEntry,
    DiagnosticSeverity,
    InputAcquisitionError,
    ParserConfig,
    PerformanceMetrics,
    get_logger,
)

# Type definitions for input data
InputType = Union[str, bytes, BinaryIO, TextIO, Path]

# (position, error code, datavars) as recorded by html5lib.HTMLParser.errors
ParseError = Tuple[Tuple[int, int], str, Dict[str, Any]]

PREVIEW_LENGTH = 100  # Max length for content preview in logs
MS_PER_SECOND = 1000  # Milliseconds per second conversion

DIAGNOSTICS_HEADER = "Parse errors:"
DIAGNOSTIC_INDENT = "    "


@dataclass
class ParsedDocument:
    """Output of the document tree provider: a tree plus parser diagnostics."""

    document: Document
    diagnostics: List[DiagnosticEntry] = field(default_factory=list)
    encoding: Optional[str] = None
    source_length: int = 0


@dataclass
class DumpResult:
    """Result of dumping one document.

    Attributes:
        text: The full dump, one newline-terminated line per node
        document: The tree the dump was rendered from
        diagnostics: Parser diagnostics, in the order they were reported
        encoding: Encoding used to decode byte input (None for text input)
        performance: Timing and size metrics
        correlation_id: Correlation ID of the operation
    """

    text: str
    document: Document
    diagnostics: List[DiagnosticEntry] = field(default_factory=list)
    encoding: Optional[str] = None
    performance: PerformanceMetrics = field(default_factory=PerformanceMetrics)
    correlation_id: Optional[str] = None

    @property
    def line_count(self) -> int:
        return self.text.count("\n")

    @property
    def node_count(self) -> int:
        return count_nodes(self.document)

    @property
    def has_diagnostics(self) -> bool:
        return bool(self.diagnostics)


def format_diagnostics(diagnostics: Iterable[DiagnosticEntry]) -> str:
    """Render diagnostics as a ``Parse errors:`` report.

    Returns an empty string when there is nothing to report; otherwise the
    header line followed by one line per diagnostic, indented by four spaces.
    The header is not preceded by a blank line, so the report can open the
    output; callers that print it after other text add their own separator.

    Example:
        >>> format_diagnostics([])
        ''
    """
    lines = [f"{DIAGNOSTIC_INDENT}{entry.describe()}\n" for entry in diagnostics]
    if not lines:
        return ""
    return f"{DIAGNOSTICS_HEADER}\n" + "".join(lines)


def _diagnostics_from_errors(
    errors: Iterable[ParseError], correlation_id: Optional[str]
) -> List[DiagnosticEntry]:
    diagnostics = []
    for (line, column), code, datavars in errors:
        datavars = datavars or {}
        diagnostics.append(
            DiagnosticEntry(
                severity=DiagnosticSeverity.ERROR,
                message=E.get(code, code) % datavars,
                component="html5lib",
                position={"line": line, "column": column},
                details={"code": code, **datavars},
                correlation_id=correlation_id,
            )
        )
    return diagnostics


def _read_path(path: Path, correlation_id: Optional[str]) -> bytes:
    logger = get_logger(__name__, correlation_id, "read_path")
    logger.info("Reading document", extra={"file_path": str(path)})
    try:
        with path.open("rb") as file:
            return file.read()
    except OSError as e:
        logger.exception("Document could not be read", extra={"file_path": str(path)})
        raise InputAcquisitionError(f"Cannot read {path}: {e.strerror or e}", path) from e


def _read_source(source: InputType, correlation_id: Optional[str]) -> Union[str, bytes]:
    if isinstance(source, (str, bytes)):
        return source
    if isinstance(source, Path):
        return _read_path(source, correlation_id)
    if hasattr(source, "read"):
        try:
            content = source.read()
        except OSError as e:
            raise InputAcquisitionError(f"Cannot read input stream: {e}") from e
        if not isinstance(content, (str, bytes)):
            raise TypeError(
                f"Stream returned {type(content).__name__}, expected str or bytes"
            )
        return content
    raise TypeError(f"Unsupported input type: {type(source).__name__}")


def _decode_utf8(
    content: bytes, source: InputType, correlation_id: Optional[str]
) -> str:
    path = source if isinstance(source, Path) else None
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError as e:
        logger = get_logger(__name__, correlation_id, "decode")
        logger.exception("Input is not valid UTF-8", extra={"offset": e.start})
        name = path if path is not None else "input"
        raise InputAcquisitionError(
            f"Cannot decode {name} as UTF-8: invalid byte "
            f"0x{content[e.start]:02x} at offset {e.start}",
            path,
        ) from e


def parse_document(
    source: InputType,
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None,
) -> ParsedDocument:
    """Parse HTML into a document tree plus diagnostics.

    Args:
        source: HTML as text, bytes, a readable stream, or a Path
        config: Parser configuration (defaults to ``ParserConfig()``)
        correlation_id: Optional correlation ID for request tracking

    Byte input is decoded as strict UTF-8 unless the configuration forces
    an encoding or asks html5lib to sniff one.

    Returns:
        ParsedDocument with the tree, diagnostics and the encoding used

    Raises:
        InputAcquisitionError: If a path or stream cannot be read, or strictly
            decoded byte input is not valid UTF-8
    """
    config = config or ParserConfig()
    logger = get_logger(__name__, correlation_id, "parse_document")

    content = _read_source(source, correlation_id)
    source_length = len(content)
    encoding = None
    if isinstance(content, bytes) and config.strict_utf8:
        content = _decode_utf8(content, source, correlation_id)
        encoding = "utf-8"
    binary_input = isinstance(content, bytes)

    parser = html5lib.HTMLParser(tree=NodeTreeBuilder, namespaceHTMLElements=True)
    document = parser.parse(content, **config.html5lib_options(binary_input))

    diagnostics = []
    if config.collect_diagnostics:
        diagnostics = _diagnostics_from_errors(parser.errors, correlation_id)

    if binary_input:
        encoding = parser.documentEncoding

    logger.debug(
        "Document parsed",
        extra={
            "input_type": type(content).__name__,
            "content_length": source_length,
            "encoding": encoding,
            "diagnostics_count": len(diagnostics),
        },
    )

    return ParsedDocument(
        document=document,
        diagnostics=diagnostics,
        encoding=encoding,
        source_length=source_length,
    )


class TreeDumper:
    """Configurable, reusable tree dumper.

    Attributes:
        config: Parser configuration applied to every dump
        correlation_id: Correlation ID for request tracking

    Examples:
        >>> dumper = TreeDumper()
        >>> print(dumper.dump("<p>hi</p>").text, end="")
        #Document
          <html>
            <head>
            <body>
              <p>
                #text:hi

        Byte input with a forced encoding:
        >>> dumper = TreeDumper(ParserConfig(encoding="windows-1252"))
        >>> dumper.dump(b"caf\\xe9").encoding
        'windows-1252'
    """

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        self.config = config or ParserConfig()
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "tree_dumper")

        self._dump_count = 0
        self._total_processing_time = 0.0
        self._total_diagnostics = 0

    def dump(
        self,
        source: InputType,
        correlation_id_override: Optional[str] = None,
    ) -> DumpResult:
        """Parse ``source`` and render its tree.

        Diagnostics are logged as part of this call and returned on the
        result; they never prevent the dump.

        Raises:
            InputAcquisitionError: If a path or stream cannot be read
            TreeInvariantError: If the parsed tree breaks the namespace contract
        """
        start_time = time.time()
        correlation_id = correlation_id_override or self.correlation_id
        logger = get_logger(__name__, correlation_id, "tree_dumper")

        logger.info(
            "Starting dump operation",
            extra={
                "input_type": type(source).__name__,
                "dump_count": self._dump_count + 1,
            },
        )

        parsed = parse_document(source, self.config, correlation_id)
        for entry in parsed.diagnostics:
            logger.info(
                f"Parse diagnostic: {entry.describe()}",
                extra={"code": entry.code, "position": entry.position},
            )

        text = render(parsed.document)

        processing_time = (time.time() - start_time) * MS_PER_SECOND
        performance = PerformanceMetrics(
            processing_time_ms=processing_time,
            characters_processed=parsed.source_length,
            nodes_rendered=text.count("\n"),
        )

        self._dump_count += 1
        self._total_processing_time += processing_time
        self._total_diagnostics += len(parsed.diagnostics)

        logger.info(
            "Dump completed",
            extra={
                "nodes_rendered": performance.nodes_rendered,
                "diagnostics_count": len(parsed.diagnostics),
                "processing_time_ms": processing_time,
                "characters_per_second": performance.characters_per_second,
                "nodes_per_second": performance.nodes_per_second,
            },
        )

        return DumpResult(
            text=text,
            document=parsed.document,
            diagnostics=parsed.diagnostics,
            encoding=parsed.encoding,
            performance=performance,
            correlation_id=correlation_id,
        )

    def reconfigure(self, config: ParserConfig) -> None:
        """Replace the parser configuration used by later dumps."""
        self.config = config
        self.logger.info("Dumper reconfigured", extra={"config": config.to_dict()})

    @property
    def statistics(self) -> Dict[str, Any]:
        """Get dumper usage statistics."""
        return {
            "total_dumps": self._dump_count,
            "total_diagnostics": self._total_diagnostics,
            "total_processing_time_ms": self._total_processing_time,
            "average_processing_time_ms": (
                self._total_processing_time / self._dump_count
                if self._dump_count > 0 else 0.0
            ),
            "correlation_id": self.correlation_id,
        }

    def reset_statistics(self) -> None:
        """Reset dumper usage statistics."""
        self._dump_count = 0
        self._total_processing_time = 0.0
        self._total_diagnostics = 0

        self.logger.info("Dumper statistics reset")


def dump(
    source: InputType,
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None,
) -> DumpResult:
    """Dump HTML from any supported input source.

    Examples:
        >>> dump("foo").text
        '#Document\\n  <html>\\n    <head>\\n    <body>\\n      #text:foo\\n'
    """
    return TreeDumper(config, correlation_id).dump(source)


def dump_string(
    html: str,
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None,
) -> DumpResult:
    """Dump HTML given as text."""
    logger = get_logger(__name__, correlation_id, "dump_string")
    logger.debug(
        "Dumping string input",
        extra={
            "content_length": len(html),
            "preview": (
                html[:PREVIEW_LENGTH] + "..." if len(html) > PREVIEW_LENGTH else html
            ),
        },
    )
    return dump(html, config, correlation_id)


def dump_bytes(
    data: bytes,
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None,
) -> DumpResult:
    """Dump HTML given as bytes, UTF-8 unless the configuration says otherwise."""
    return dump(data, config, correlation_id)


def dump_file(
    file_path: Union[str, Path],
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None,
) -> DumpResult:
    """Dump the HTML file at ``file_path``.

    Raises:
        InputAcquisitionError: If the file cannot be opened or read
    """
    return dump(Path(file_path), config, correlation_id)


def render_html(html: str) -> str:
    """Return only the dump text of ``html``; diagnostics are logged."""
    return dump_string(html).text
