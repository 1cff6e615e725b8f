"""Structured logging utilities for SVG document construction.

Tree building and serialization log through ``CorrelationLogger`` so records
carry the component that produced them and, for serializers created with one,
the caller's correlation ID. The library never installs handlers; configuring
output is left to the application.
"""

import logging
from typing import Any, Dict, Optional


class CorrelationLogger:
    """Logger that stamps records with a component and correlation ID.

    The library logs serialization statistics at DEBUG and rejected tree
    operations at WARNING, so only those two levels are exposed.
    """

    def __init__(
        self,
        name: str,
        correlation_id: Optional[str] = None,
        component: Optional[str] = None
    ) -> None:
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id
        self.component = component or name.split(".")[-1]

    def _get_extra(self, extra: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        combined_extra = {
            "component": self.component,
            "correlation_id": self.correlation_id,
        }
        if extra:
            combined_extra.update(extra)
        return combined_extra

    def is_enabled_for(self, level: int) -> bool:
        """Check whether records at ``level`` would be emitted.

        Lets callers skip computing expensive ``extra`` fields.
        """
        return self.logger.isEnabledFor(level)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log a DEBUG record with correlation info."""
        self.logger.debug(message, extra=self._get_extra(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log a WARNING record with correlation info."""
        self.logger.warning(message, extra=self._get_extra(extra))


def get_logger(
    name: str,
    correlation_id: Optional[str] = None,
    component: Optional[str] = None
) -> CorrelationLogger:
    """Get a correlation-aware logger.

    Args:
        name: Logger name (typically __name__)
        correlation_id: Optional correlation ID for request tracking
        component: Component name, defaulting to the last segment of ``name``

    Returns:
        CorrelationLogger instance
    """
    return CorrelationLogger(name, correlation_id, component)
