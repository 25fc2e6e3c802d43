"""Logging configuration and utilities."""

from collections.abc import Sequence
from typing import Any

import structlog


def get_context_logger(name: str) -> structlog.BoundLogger:
    """Get a context-aware logger.

    Args:
        name: Logger name

    Returns:
        Structured logger instance
    """
    return structlog.get_logger(name)


class LookupLogContext:
    """Context manager binding section lookup details into the logging context."""

    def __init__(self, section: str, type_chain: Sequence[str] = (), **context: Any):
        """Initialize with the section being read and the subject type chain.

        Args:
            section: Section name
            type_chain: Ancestor names of the subject type
            **context: Additional context key-value pairs
        """
        self.context = {
            "section": section,
            "type_chain": ".".join(type_chain) or None,
            **context,
        }

    def __enter__(self):
        """Enter context."""
        structlog.contextvars.bind_contextvars(**self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context."""
        structlog.contextvars.unbind_contextvars(*self.context.keys())


__all__ = [
    "get_context_logger",
    "LookupLogContext",
]
