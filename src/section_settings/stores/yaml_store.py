"""
YAML Section Store

Reads sections from a single YAML document whose top-level keys are section
names and whose values are flat mappings of field name to scalar:

    logSection:
      LogLevel: Info
      Base.LogLevel: Warn
      Base.Buggy.LogLevel: Debug
      Timestamp: true

The document is read with ``yaml.BaseLoader``, which skips implicit typing,
so every value reaches the resolver exactly as written (``Off`` stays
``Off``, ``1.10`` stays ``1.10``).
"""

import os
from pathlib import Path
from typing import Any

import yaml

from ..events import SettingsEvents
from ..exceptions import PersistenceError, SectionNotFoundError
from .base import SectionStore


_READ_ERRORS = (OSError, UnicodeDecodeError, yaml.YAMLError)


def _is_empty(node: Any) -> bool:
    # BaseLoader reads a key with no value as ""
    return node is None or node == ""


class YamlSectionStore(SectionStore):
    """Section store backed by a YAML file.

    Args:
        path: YAML file location
        read_only: Reject writes with WriteNotSupportedError
        cache: Keep the parsed document until the file's mtime changes
    """

    def __init__(self, path: str | Path, read_only: bool = False, cache: bool = False):
        super().__init__(read_only=read_only)
        self.path = Path(path)
        self.cache = cache
        self._cached_document: dict[str, Any] | None = None
        self._cached_mtime: float | None = None

    def _read_document(self) -> Any:
        """Load the whole document, or None when the file does not exist."""
        try:
            mtime = os.stat(self.path).st_mtime
        except FileNotFoundError:
            return None

        if self.cache and self._cached_document is not None and mtime == self._cached_mtime:
            return self._cached_document

        with open(self.path, encoding="utf-8") as f:
            document = yaml.load(f, Loader=yaml.BaseLoader) or {}  # ruff: noqa: S506

        if self.cache:
            self._cached_document = document
            self._cached_mtime = mtime
        return document

    def load_section(self, section_name: str) -> dict[str, str]:
        try:
            document = self._read_document()
        except _READ_ERRORS as e:
            raise SectionNotFoundError(
                f"Cannot load section {section_name!r} from {self.path}: {e}",
                section_name=section_name,
            ) from e

        if not isinstance(document, dict) or section_name not in document:
            raise SectionNotFoundError(
                f"Section {section_name!r} not found in {self.path}",
                section_name=section_name,
            )

        section = document[section_name]
        if _is_empty(section):
            return {}
        if not isinstance(section, dict):
            raise SectionNotFoundError(
                f"Section {section_name!r} is not a mapping",
                section_name=section_name,
            )

        fields = {}
        for key, value in section.items():
            if not isinstance(value, str):
                raise SectionNotFoundError(
                    f"Section {section_name!r} field {key!r} is not a scalar",
                    section_name=section_name,
                )
            fields[key] = value

        self.logger.debug(
            SettingsEvents.SECTION_LOADED, section=section_name, field_count=len(fields)
        )
        return fields

    def _fail(self, message: str, section_name: str, key: str) -> PersistenceError:
        self.logger.error(
            SettingsEvents.WRITE_FAILED, path=str(self.path), section=section_name, error=message
        )
        return PersistenceError(message, section_name=section_name, key=key)

    def _write(self, section_name: str, key: str, value: str) -> None:
        try:
            document = self._read_document()
        except _READ_ERRORS as e:
            raise self._fail(
                f"Cannot read {self.path} before writing: {e}", section_name, key
            ) from e

        document = document or {}
        if not isinstance(document, dict):
            raise self._fail(f"{self.path} is not a mapping of sections", section_name, key)
        section = document.get(section_name)
        if _is_empty(section):
            section = {}
        if not isinstance(section, dict):
            raise self._fail(
                f"Section {section_name!r} in {self.path} is not a mapping", section_name, key
            )

        document = dict(document)
        document[section_name] = {**section, key: value}

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                yaml.safe_dump(document, f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            raise self._fail(f"Cannot write {self.path}: {e}", section_name, key) from e
        finally:
            self._cached_document = None
            self._cached_mtime = None


__all__ = ["YamlSectionStore"]
