"""Command-line interface module for HTML Tree Dump.

This module provides the html-tree-dump tool, which prints parse diagnostics
followed by the tree dump of an HTML file.
"""

from .main import main

__all__ = ["main"]
