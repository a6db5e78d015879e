"""Result objects and diagnostic types for HTML tree dumping.

This module defines the diagnostic entries collected from the parser and the
performance metrics attached to every dump operation.
"""

import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, Optional


class DiagnosticSeverity(Enum):
    """Severity levels for diagnostic entries."""

    ERROR = auto()  # Recoverable parse error reported by html5lib


@dataclass
class DiagnosticEntry:
    """Single diagnostic entry with context information."""

    severity: DiagnosticSeverity
    message: str
    component: str
    position: Optional[Dict[str, int]] = None
    details: Optional[Dict[str, Any]] = None
    timestamp: float = field(default_factory=time.time)
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate diagnostic entry."""
        if not self.message:
            raise ValueError("Diagnostic message cannot be empty")
        if not self.component:
            raise ValueError("Diagnostic component cannot be empty")

    @property
    def code(self) -> Optional[str]:
        """Parser error code, when the diagnostic came from the parser."""
        if self.details is None:
            return None
        return self.details.get("code")

    def describe(self) -> str:
        """Single-line rendering used in the ``Parse errors:`` report."""
        if not self.position:
            return self.message
        return (
            f"{self.message} (line {self.position['line']}, "
            f"column {self.position['column']})"
        )


@dataclass
class PerformanceMetrics:
    """Performance metrics for dump operations."""

    processing_time_ms: float = 0.0
    characters_processed: int = 0
    nodes_rendered: int = 0

    @property
    def characters_per_second(self) -> float:
        """Calculate characters processed per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.characters_processed * 1000.0) / self.processing_time_ms

    @property
    def nodes_per_second(self) -> float:
        """Calculate nodes rendered per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.nodes_rendered * 1000.0) / self.processing_time_ms
