"""Public parsing and dumping API."""

from .parser import (
    DumpResult,
    ParsedDocument,
    TreeDumper,
    dump,
    dump_bytes,
    dump_file,
    dump_string,
    format_diagnostics,
    parse_document,
    render_html,
)

__all__ = [
    "DumpResult",
    "ParsedDocument",
    "TreeDumper",
    "dump",
    "dump_bytes",
    "dump_file",
    "dump_string",
    "format_diagnostics",
    "parse_document",
    "render_html",
]
