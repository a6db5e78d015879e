"""Exception hierarchy for HTML tree dumping.

Parse diagnostics are never raised; only conditions that abort a dump live here.
"""

from pathlib import Path
from typing import Any, Optional, Union


class HTMLTreeDumpError(Exception):
    """Base exception for all html_tree_dump failures."""


class InputAcquisitionError(HTMLTreeDumpError):
    """Raised when the input document cannot be opened or read."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = path


class TreeInvariantError(HTMLTreeDumpError):
    """Raised when the parsed tree breaks the contract the dumper relies on.

    Either an element or attribute carries a namespace other than the HTML
    (respectively empty) namespace, or a node kind that HTML parsing never
    produces reached the formatter.
    """

    def __init__(self, message: str, node: Any = None):
        super().__init__(message)
        self.node = node
