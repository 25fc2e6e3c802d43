"""
Section Settings Package

Typed, hierarchy-aware settings lookup over named configuration sections.

This package provides:
- HierarchicalSettingsResolver: lookup/write scoped by a class hierarchy
- Section stores: in-memory, YAML and web.config style XML
- ConverterRegistry: string <-> typed value conversion
- One-shot helpers that build a resolver and delegate

Usage:
    from section_settings import HierarchicalSettingsResolver, get_setting

    # Simple usage
    level = get_setting("logSection", "LogLevel", LogLevel, type_chain=Buggy)

    # Several settings for the same type
    resolver = HierarchicalSettingsResolver("logSection", Buggy)
    level = resolver.get("LogLevel", LogLevel)
    timestamp = resolver.get_or_default("Timestamp", False)
"""

from collections.abc import Sequence
from typing import Any

from .config import (
    StoreSettings,
    build_store,
    get_default_store,
    get_store_settings,
    reload_store_settings,
    reset_default_store,
    set_default_store,
)
from .converters import ConverterRegistry, default_registry
from .exceptions import (
    InvalidNameError,
    PersistenceError,
    SectionNotFoundError,
    SettingNotFoundError,
    SettingsError,
    SettingsWriteError,
    TypeConversionError,
    WriteNotSupportedError,
)
from .resolver import HierarchicalSettingsResolver, candidate_keys, write_key
from .stores import InMemorySectionStore, SectionStore, XmlSectionStore, YamlSectionStore
from .type_chain import KEY_SEPARATOR, type_chain_for

__version__ = "1.0.0"

__all__ = [
    # Core
    "HierarchicalSettingsResolver",
    "candidate_keys",
    "write_key",
    "type_chain_for",
    "KEY_SEPARATOR",
    # Stores
    "SectionStore",
    "InMemorySectionStore",
    "YamlSectionStore",
    "XmlSectionStore",
    # Conversion
    "ConverterRegistry",
    "default_registry",
    # Configuration
    "StoreSettings",
    "get_store_settings",
    "reload_store_settings",
    "build_store",
    "get_default_store",
    "set_default_store",
    "reset_default_store",
    # Errors
    "SettingsError",
    "SectionNotFoundError",
    "SettingNotFoundError",
    "TypeConversionError",
    "InvalidNameError",
    "SettingsWriteError",
    "WriteNotSupportedError",
    "PersistenceError",
    # Helpers
    "get_setting",
    "try_get_setting",
    "get_setting_or_default",
    "set_setting",
    "__version__",
]


TypeChainLike = type | Sequence[str] | None


# Package-level convenience functions
def get_setting(
    section_name: str,
    setting_name: str,
    value_type: type = str,
    *,
    type_chain: TypeChainLike = None,
    store: SectionStore | None = None,
) -> Any:
    """Get a setting from a section.

    Example:
        get_setting("logSection", "LogLevel", LogLevel, type_chain=Buggy)
    """
    return HierarchicalSettingsResolver(section_name, type_chain, store).get(
        setting_name, value_type
    )


def try_get_setting(
    section_name: str,
    setting_name: str,
    value_type: type = str,
    *,
    type_chain: TypeChainLike = None,
    store: SectionStore | None = None,
) -> tuple[bool, Any]:
    """Get a setting as ``(found, value)`` instead of raising when absent."""
    return HierarchicalSettingsResolver(section_name, type_chain, store).try_get(
        setting_name, value_type
    )


def get_setting_or_default(
    section_name: str,
    setting_name: str,
    default: Any,
    value_type: type | None = None,
    *,
    type_chain: TypeChainLike = None,
    store: SectionStore | None = None,
) -> Any:
    """Get a setting, or ``default`` when it is absent."""
    return HierarchicalSettingsResolver(section_name, type_chain, store).get_or_default(
        setting_name, default, value_type
    )


def set_setting(
    section_name: str,
    setting_name: str,
    value: Any,
    value_type: type | None = None,
    *,
    type_chain: TypeChainLike = None,
    store: SectionStore | None = None,
) -> None:
    """Write a setting for the given type chain (bare name when none)."""
    HierarchicalSettingsResolver(section_name, type_chain, store).set(
        setting_name, value, value_type
    )
