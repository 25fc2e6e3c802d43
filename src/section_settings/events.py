"""Settings event type constants."""

from enum import Enum


class SettingsEvents(str, Enum):
    """Event type constants for structured logging."""

    # Lookup events
    LOOKUP_RESOLVED = "settings.lookup.resolved"
    LOOKUP_MISSING = "settings.lookup.missing"
    SECTION_MISSING = "settings.section.missing"

    # Conversion events
    CONVERSION_FAILED = "settings.conversion.failed"

    # Store events
    SECTION_LOADED = "settings.section.loaded"
    WRITE_STARTED = "settings.write.started"
    WRITE_COMPLETED = "settings.write.completed"
    WRITE_REJECTED = "settings.write.rejected"
    WRITE_FAILED = "settings.write.failed"


__all__ = ["SettingsEvents"]
