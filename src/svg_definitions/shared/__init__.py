"""Shared utilities for SVG document construction.

This module provides the configuration objects, diagnostic types, logging
helpers and number formatting used across the tree model, the serializer and
the path-data builder.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    PathConfig,
    SerializerConfig,
    SVGConfig,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)
from .numbers import format_number
from .result import (
    DiagnosticEntry,
    DiagnosticSeverity,
    filter_by_severity,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "PathConfig",
    "SerializerConfig",
    "SVGConfig",
    "CorrelationLogger",
    "get_logger",
    "format_number",
    "DiagnosticEntry",
    "DiagnosticSeverity",
    "filter_by_severity",
]
