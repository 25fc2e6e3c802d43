"""
Settings Store Configuration

Provides pydantic-based configuration for the process-wide default store:
- Environment variable overrides (SECTION_SETTINGS_*)
- Store format inference from the file suffix
- A cached default store shared by resolvers built without an explicit one
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import SettingsError
from .stores import InMemorySectionStore, SectionStore, XmlSectionStore, YamlSectionStore


_SUFFIX_FORMATS = {
    ".yaml": "yaml",
    ".yml": "yaml",
    ".xml": "xml",
    ".config": "xml",
}


class StoreSettings(BaseSettings):
    """
    Default store settings.

    Examples:
        From the environment:
        >>> # SECTION_SETTINGS_CONFIG_PATH=/etc/app/web.config
        >>> settings = get_store_settings()
        >>> settings.resolved_format()
        'xml'
    """

    model_config = SettingsConfigDict(
        env_prefix="SECTION_SETTINGS_",
        case_sensitive=False,
        extra="ignore",
    )

    config_path: Path | None = Field(default=None, description="File backing the default store")
    store_format: Literal["yaml", "xml"] | None = Field(
        default=None, description="Store format; inferred from the suffix when unset"
    )
    read_only: bool = False
    cache_sections: bool = Field(default=False, description="Cache parsed YAML until mtime changes")

    def resolved_format(self) -> str | None:
        """Return the explicit format, or the one implied by the file suffix."""
        if self.store_format is not None:
            return self.store_format
        if self.config_path is None:
            return None
        return _SUFFIX_FORMATS.get(self.config_path.suffix.lower())


@lru_cache
def get_store_settings() -> StoreSettings:
    """Get cached store settings."""
    return StoreSettings()


def reload_store_settings() -> StoreSettings:
    """Reload store settings by clearing cache."""
    get_store_settings.cache_clear()
    return get_store_settings()


def build_store(settings: StoreSettings | None = None) -> SectionStore:
    """
    Build the store described by the settings.

    Args:
        settings: Store settings (defaults to the cached environment settings)

    Returns:
        SectionStore: YAML or XML store for a configured path, otherwise an
        empty in-memory store

    Raises:
        SettingsError: If the file format cannot be determined
    """
    if settings is None:
        settings = get_store_settings()

    if settings.config_path is None:
        return InMemorySectionStore(read_only=settings.read_only)

    store_format = settings.resolved_format()
    if store_format == "yaml":
        return YamlSectionStore(
            settings.config_path,
            read_only=settings.read_only,
            cache=settings.cache_sections,
        )
    if store_format == "xml":
        return XmlSectionStore(settings.config_path, read_only=settings.read_only)

    raise SettingsError(
        "Cannot determine store format; set SECTION_SETTINGS_STORE_FORMAT",
        context={"config_path": str(settings.config_path)},
    )


_default_store: SectionStore | None = None


def get_default_store() -> SectionStore:
    """Get the process-wide store, building it from settings on first use."""
    global _default_store
    if _default_store is None:
        _default_store = build_store()
    return _default_store


def set_default_store(store: SectionStore) -> None:
    """Replace the process-wide store."""
    global _default_store
    _default_store = store


def reset_default_store() -> None:
    """Forget the process-wide store so the next use rebuilds it."""
    global _default_store
    _default_store = None


__all__ = [
    "StoreSettings",
    "get_store_settings",
    "reload_store_settings",
    "build_store",
    "get_default_store",
    "set_default_store",
    "reset_default_store",
]
