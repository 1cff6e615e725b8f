"""Diagnostic types shared by the tree model and the serializer.

Operations that report a problem without raising (for example
``SVGElement.try_append``) attach ``DiagnosticEntry`` objects to their result.
"""

import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Optional


class DiagnosticSeverity(Enum):
    """Severity levels for diagnostic entries."""

    DEBUG = auto()
    INFO = auto()
    WARNING = auto()
    ERROR = auto()


@dataclass
class DiagnosticEntry:
    """Single diagnostic entry with context information."""

    severity: DiagnosticSeverity
    message: str
    component: str
    details: Optional[Dict[str, Any]] = None
    timestamp: float = field(default_factory=time.time)
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate diagnostic entry."""
        if not self.message:
            raise ValueError("Diagnostic message cannot be empty")
        if not self.component:
            raise ValueError("Diagnostic component cannot be empty")


def filter_by_severity(
    diagnostics: List[DiagnosticEntry],
    severity: DiagnosticSeverity
) -> List[DiagnosticEntry]:
    """Get diagnostics of a specific severity level."""
    return [diag for diag in diagnostics if diag.severity == severity]
