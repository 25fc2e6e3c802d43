"""Section store interface and the in-memory implementation."""

import threading
from abc import ABC, abstractmethod
from collections.abc import Mapping

from ..events import SettingsEvents
from ..exceptions import SectionNotFoundError, WriteNotSupportedError
from ..log_config import get_context_logger


class SectionStore(ABC):
    """
    Flat key/value storage scoped by section name.

    Implementations return string values only; typing is the resolver's
    concern. ``load_section`` hands out a copy so callers can never mutate
    the store behind its back.
    """

    def __init__(self, read_only: bool = False):
        self.read_only = read_only
        self._write_lock = threading.Lock()
        self.logger = get_context_logger("section_store")

    @abstractmethod
    def load_section(self, section_name: str) -> Mapping[str, str]:
        """Return the fields of a section.

        Raises:
            SectionNotFoundError: If the section is missing or malformed
        """

    def write_field(self, section_name: str, key: str, value: str) -> None:
        """Write one field, creating the section if needed.

        Raises:
            WriteNotSupportedError: If the store is read-only
            PersistenceError: If the write could not be persisted
        """
        if self.read_only:
            self.logger.warning(
                SettingsEvents.WRITE_REJECTED, section=section_name, key=key
            )
            raise WriteNotSupportedError(
                f"{type(self).__name__} is read-only",
                section_name=section_name,
                key=key,
            )
        with self._write_lock:
            self._write(section_name, key, value)
        self.logger.info(SettingsEvents.WRITE_COMPLETED, section=section_name, key=key)

    @abstractmethod
    def _write(self, section_name: str, key: str, value: str) -> None:
        """Persist a single field; called with the write lock held."""


class InMemorySectionStore(SectionStore):
    """Dictionary-backed store, mainly for tests and programmatic setup.

    Example:
        >>> store = InMemorySectionStore({"logSection": {"LogLevel": "Info"}})
        >>> store.load_section("logSection")
        {'LogLevel': 'Info'}
    """

    def __init__(
        self,
        sections: Mapping[str, Mapping[str, str]] | None = None,
        read_only: bool = False,
    ):
        super().__init__(read_only=read_only)
        self._sections: dict[str, dict[str, str]] = {
            name: dict(fields) for name, fields in (sections or {}).items()
        }

    def load_section(self, section_name: str) -> dict[str, str]:
        try:
            return dict(self._sections[section_name])
        except KeyError:
            raise SectionNotFoundError(
                f"Section {section_name!r} not found", section_name=section_name
            ) from None

    def _write(self, section_name: str, key: str, value: str) -> None:
        self._sections.setdefault(section_name, {})[key] = value

    def section_names(self) -> list[str]:
        """List the sections currently held."""
        return list(self._sections)


__all__ = ["SectionStore", "InMemorySectionStore"]
