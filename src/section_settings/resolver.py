"""
Hierarchical Settings Resolution

Looks settings up in a section, scoped by a type chain. For a chain
``("Base", "Buggy")`` and the setting ``LogLevel`` the keys are tried in
this order, most specific first:

1. ``Base.Buggy.LogLevel``
2. ``Base.LogLevel``
3. ``LogLevel`` (bare name, lowest precedence)

The first key present in the section wins and its raw string is converted
to the requested type. Writes always target the fully qualified key.
"""

from collections.abc import Sequence
from typing import Any

from .config import get_default_store
from .converters import ConverterRegistry, default_registry
from .events import SettingsEvents
from .exceptions import SectionNotFoundError, SettingNotFoundError, TypeConversionError
from .log_config import LookupLogContext, get_context_logger
from .stores import SectionStore
from .type_chain import KEY_SEPARATOR, normalize_type_chain, validate_name


def candidate_keys(type_chain: Sequence[str], setting_name: str) -> list[str]:
    """
    Keys to try for a setting, in precedence order.

    Examples:
        >>> candidate_keys(["Base", "Buggy"], "LogLevel")
        ['Base.Buggy.LogLevel', 'Base.LogLevel', 'LogLevel']
        >>> candidate_keys([], "LogLevel")
        ['LogLevel']
    """
    chain = list(type_chain)
    keys = [
        KEY_SEPARATOR.join(chain[:depth] + [setting_name])
        for depth in range(len(chain), 0, -1)
    ]
    keys.append(setting_name)
    return keys


def write_key(type_chain: Sequence[str], setting_name: str) -> str:
    """Key a setting is written to: the full chain plus the setting name."""
    return KEY_SEPARATOR.join([*type_chain, setting_name])


class HierarchicalSettingsResolver:
    """
    Reads and writes typed settings in one section for one type chain.

    Examples:
        >>> store = InMemorySectionStore({"logSection": {
        ...     "LogLevel": "Info",
        ...     "Base.LogLevel": "Warn",
        ...     "Base.Buggy.LogLevel": "Debug",
        ... }})
        >>> resolver = HierarchicalSettingsResolver("logSection", ["Base", "Buggy"], store)
        >>> resolver.get("LogLevel")
        'Debug'
        >>> HierarchicalSettingsResolver("logSection", store=store).get("LogLevel")
        'Info'
    """

    def __init__(
        self,
        section_name: str,
        type_chain: type | Sequence[str] | None = None,
        store: SectionStore | None = None,
        converters: ConverterRegistry | None = None,
    ):
        """
        Args:
            section_name: Section holding the settings
            type_chain: Ancestor names (most general first), a class to derive
                them from, or None for no type association
            store: Section store (defaults to the process-wide store)
            converters: Converter registry (defaults to the shared registry)

        Raises:
            InvalidNameError: If a type name is empty or contains the separator
        """
        self._section_name = section_name
        self._type_chain = normalize_type_chain(type_chain)
        self._store = store if store is not None else get_default_store()
        self._converters = converters if converters is not None else default_registry
        self.logger = get_context_logger("settings_resolver")

    @property
    def section_name(self) -> str:
        return self._section_name

    @property
    def type_chain(self) -> tuple[str, ...]:
        return self._type_chain

    @property
    def store(self) -> SectionStore:
        return self._store

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(section_name={self._section_name!r}, "
            f"type_chain={self._type_chain!r})"
        )

    def candidate_keys(self, setting_name: str) -> list[str]:
        """Keys tried for ``setting_name``, most specific first."""
        return candidate_keys(self._type_chain, validate_name(setting_name))

    def write_key(self, setting_name: str) -> str:
        """Key ``set`` writes ``setting_name`` to."""
        return write_key(self._type_chain, validate_name(setting_name))

    def _lookup(self, setting_name: str) -> tuple[str, str]:
        """Find the winning key and its raw value.

        Raises:
            SectionNotFoundError: If the section cannot be loaded
            SettingNotFoundError: If no candidate key is present
        """
        candidates = self.candidate_keys(setting_name)
        fields = self._store.load_section(self._section_name)

        for key in candidates:
            if key in fields:
                self.logger.debug(SettingsEvents.LOOKUP_RESOLVED, setting=setting_name, key=key)
                return key, fields[key]

        self.logger.debug(
            SettingsEvents.LOOKUP_MISSING, setting=setting_name, candidates=candidates
        )
        raise SettingNotFoundError(
            f"Setting {setting_name!r} not found in section {self._section_name!r}",
            section_name=self._section_name,
            setting_name=setting_name,
            candidates=candidates,
        )

    def _convert(self, key: str, raw: str, value_type: type) -> Any:
        try:
            return self._converters.parse(raw, value_type)
        except TypeConversionError:
            self.logger.warning(
                SettingsEvents.CONVERSION_FAILED,
                key=key,
                target_type=getattr(value_type, "__name__", repr(value_type)),
            )
            raise

    def resolve_key(self, setting_name: str) -> str | None:
        """Return the key a lookup would use, or None if nothing matches."""
        with LookupLogContext(self._section_name, self._type_chain):
            try:
                key, _ = self._lookup(setting_name)
            except (SectionNotFoundError, SettingNotFoundError):
                return None
        return key

    def get(self, setting_name: str, value_type: type = str) -> Any:
        """
        Get a setting, converted to ``value_type``.

        Args:
            setting_name: Logical setting name (e.g. "LogLevel")
            value_type: Requested type (str, bool, int, float, Decimal, any Enum)

        Returns:
            Converted value of the most specific matching key

        Raises:
            SectionNotFoundError: If the section cannot be loaded
            SettingNotFoundError: If no candidate key matches
            TypeConversionError: If the matched value does not convert
        """
        with LookupLogContext(self._section_name, self._type_chain):
            key, raw = self._lookup(setting_name)
            return self._convert(key, raw, value_type)

    def try_get(self, setting_name: str, value_type: type = str) -> tuple[bool, Any]:
        """
        Get a setting without failing when it is absent.

        Returns:
            ``(True, value)`` when found, ``(False, None)`` when the section or
            setting is missing

        Raises:
            TypeConversionError: If the matched value does not convert
        """
        with LookupLogContext(self._section_name, self._type_chain):
            try:
                key, raw = self._lookup(setting_name)
            except SectionNotFoundError as e:
                self.logger.warning(SettingsEvents.SECTION_MISSING, error=str(e))
                return False, None
            except SettingNotFoundError:
                return False, None
            return True, self._convert(key, raw, value_type)

    def get_or_default(
        self, setting_name: str, default: Any, value_type: type | None = None
    ) -> Any:
        """
        Get a setting, or ``default`` when it is absent.

        ``value_type`` is inferred from the default when omitted (``str`` for a
        None default). Conversion errors are not swallowed.
        """
        if value_type is None:
            value_type = str if default is None else type(default)
        found, value = self.try_get(setting_name, value_type)
        return value if found else default

    def set(self, setting_name: str, value: Any, value_type: type | None = None) -> None:
        """
        Store a setting under the fully qualified key for this type chain.

        Args:
            setting_name: Logical setting name
            value: Value to store
            value_type: Type to serialize as (defaults to ``type(value)``)

        Raises:
            TypeConversionError: If the value cannot be serialized
            WriteNotSupportedError: If the store is read-only
            PersistenceError: If the store fails to persist the write
        """
        key = self.write_key(setting_name)
        with LookupLogContext(self._section_name, self._type_chain):
            text = self._converters.serialize(value, value_type)
            self.logger.debug(SettingsEvents.WRITE_STARTED, key=key)
            self._store.write_field(self._section_name, key, text)


__all__ = ["HierarchicalSettingsResolver", "candidate_keys", "write_key"]
