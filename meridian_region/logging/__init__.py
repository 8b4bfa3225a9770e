"""
Structured Logging for Meridian Region
======================================

Bounded Context: Observability

JSON-structured logging for the registry, catalog loader and CLI. The
geometry layer never logs.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from meridian_region.logging import StructuredLogger, LogEvent
    >>> logger = StructuredLogger(component="registry")
    >>> logger.info(
    ...     event=LogEvent.REGION_REGISTERED,
    ...     message="Registered region",
    ...     metadata={'region_id': 'downtown'}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
