"""Logging configuration package."""

from .main import LookupLogContext, get_context_logger


__all__ = [
    "get_context_logger",
    "LookupLogContext",
]
