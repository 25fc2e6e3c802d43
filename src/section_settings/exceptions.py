"""Section settings exception hierarchy.

Provides specific exception types for lookup, conversion and persistence
failures so callers can tell a missing setting apart from a bad value.

Exception Hierarchy:
    SettingsError (base)
    ├── SectionNotFoundError
    ├── SettingNotFoundError
    ├── TypeConversionError
    ├── InvalidNameError
    └── SettingsWriteError
        ├── WriteNotSupportedError
        └── PersistenceError
"""

from typing import Optional, Sequence


class SettingsError(Exception):
    """Root of every error raised while reading or writing section settings.

    ``context`` holds the section, key or value involved so a log line or
    traceback names the field that failed without the caller re-deriving it.
    """

    def __init__(self, message: str, context: Optional[dict] = None):
        """
        Args:
            message: What went wrong, without the section/key details
            context: Section, key or value details appended by ``__str__``
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Render as ``message (section=...; key=...)``."""
        if self.context:
            context_str = "; ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# Lookup Errors

class SectionNotFoundError(SettingsError):
    """Raised when a section does not exist or cannot be loaded.

    Attributes:
        section_name: Name of the section that was requested
    """

    def __init__(
        self,
        message: str,
        section_name: Optional[str] = None,
        context: Optional[dict] = None,
    ):
        if context is None:
            context = {}
        if section_name:
            context["section"] = section_name
        super().__init__(message, context)
        self.section_name = section_name


class SettingNotFoundError(SettingsError):
    """Raised when none of the candidate keys exists in the section.

    Attributes:
        section_name: Section that was searched
        setting_name: Logical setting name
        candidates: Keys tried, in precedence order
    """

    def __init__(
        self,
        message: str,
        section_name: Optional[str] = None,
        setting_name: Optional[str] = None,
        candidates: Sequence[str] = (),
        context: Optional[dict] = None,
    ):
        if context is None:
            context = {}
        if section_name:
            context["section"] = section_name
        if candidates:
            context["candidates"] = ",".join(candidates)
        super().__init__(message, context)
        self.section_name = section_name
        self.setting_name = setting_name
        self.candidates = tuple(candidates)


class TypeConversionError(SettingsError, ValueError):
    """Raised when a value cannot be converted to or from its string form.

    Attributes:
        raw_value: The string (or object, on serialize) that failed
        target_type: Name of the requested type
    """

    def __init__(
        self,
        message: str,
        raw_value: object = None,
        target_type: Optional[str] = None,
        context: Optional[dict] = None,
    ):
        if context is None:
            context = {}
        if raw_value is not None:
            context["raw_value"] = repr(raw_value)[:100]
        if target_type:
            context["target_type"] = target_type
        super().__init__(message, context)
        self.raw_value = raw_value
        self.target_type = target_type


class InvalidNameError(SettingsError, ValueError):
    """Raised when a type or setting name cannot be used to build a key.

    Names must be non-empty strings and must not contain the key separator.
    """

    def __init__(self, message: str, name: object = None, context: Optional[dict] = None):
        if context is None:
            context = {}
        context["name"] = repr(name)
        super().__init__(message, context)
        self.name = name


# Write Errors

class SettingsWriteError(SettingsError):
    """Base exception for failed writes.

    Attributes:
        section_name: Section being written
        key: Field name being written
    """

    def __init__(
        self,
        message: str,
        section_name: Optional[str] = None,
        key: Optional[str] = None,
        context: Optional[dict] = None,
    ):
        if context is None:
            context = {}
        if section_name:
            context["section"] = section_name
        if key:
            context["key"] = key
        super().__init__(message, context)
        self.section_name = section_name
        self.key = key


class WriteNotSupportedError(SettingsWriteError):
    """Raised when the store cannot be written to (e.g. read-only)."""

    pass


class PersistenceError(SettingsWriteError):
    """Raised when the store accepted a write but failed to persist it."""

    pass


__all__ = [
    "SettingsError",
    "SectionNotFoundError",
    "SettingNotFoundError",
    "TypeConversionError",
    "InvalidNameError",
    "SettingsWriteError",
    "WriteNotSupportedError",
    "PersistenceError",
]
