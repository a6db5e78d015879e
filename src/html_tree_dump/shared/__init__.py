"""Shared utilities for HTML tree dumping.

This module provides configuration objects, result and diagnostic types, the
exception hierarchy, and logging helpers used across all layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    ParserConfig,
)
from .errors import (
    HTMLTreeDumpError,
    InputAcquisitionError,
    TreeInvariantError,
)
from .logging import (
    CorrelationLogger,
    configure_logging,
    get_logger,
)
from .result import (
    DiagnosticEntry,
    DiagnosticSeverity,
    PerformanceMetrics,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "ParserConfig",
    "HTMLTreeDumpError",
    "InputAcquisitionError",
    "TreeInvariantError",
    "CorrelationLogger",
    "configure_logging",
    "get_logger",
    "DiagnosticEntry",
    "DiagnosticSeverity",
    "PerformanceMetrics",
]
