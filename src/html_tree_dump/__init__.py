"""HTML Tree Dump.

Parses HTML with html5lib and renders the resulting document tree as a
deterministic, indented, one-line-per-node text dump, suitable for inspecting
or diffing how a document was parsed.

Progressive API Disclosure:
- Level 1: Simple functions - dump(), dump_string(), dump_bytes(), dump_file()
- Level 2: Configured dumper - TreeDumper class
- Level 3: Building blocks - parse_document(), render(), format_node()
"""

__version__ = "0.1.0"
__author__ = "HTML Tree Dump Team"

# Progressive API disclosure - Level 1: Simple functions
# Progressive API disclosure - Level 2: Configured dumper
from .api import (
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

# Progressive API disclosure - Level 3: Building blocks
from .dump import escape_default, format_node, render

# Configuration and error types
from .shared import (
    InputAcquisitionError,
    HTMLTreeDumpError,
    ParserConfig,
    TreeInvariantError,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple dumping functions
    "dump",
    "dump_string",
    "dump_bytes",
    "dump_file",
    "render_html",
    "format_diagnostics",

    # Level 2: Configured dumper
    "TreeDumper",

    # Level 3: Building blocks
    "parse_document",
    "render",
    "format_node",
    "escape_default",

    # Result objects
    "DumpResult",
    "ParsedDocument",

    # Configuration and errors
    "ParserConfig",
    "HTMLTreeDumpError",
    "InputAcquisitionError",
    "TreeInvariantError",
]
