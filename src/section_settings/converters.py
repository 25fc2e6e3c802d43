"""
Value Converters

Maps a target Python type to a pair of functions turning the raw string
stored in a section into a typed value and back. The resolver looks the
converter up by the requested type; enum types are handled generically by
member name so every ``Enum`` subclass works without registration.
"""

from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from .exceptions import TypeConversionError


@dataclass(frozen=True)
class Converter:
    """Parse/serialize pair for one value type."""

    parse: Callable[[str], Any]
    serialize: Callable[[Any], str]


def _parse_bool(raw: str) -> bool:
    text = raw.strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def _serialize_bool(value: Any) -> str:
    if not isinstance(value, bool):
        raise TypeError(f"expected bool, got {type(value).__name__}")
    return "true" if value else "false"


def _serialize_int(value: Any) -> str:
    # bool is an int subclass but "true" would not parse back as int
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")
    return str(value)


def _serialize_float(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected float, got {type(value).__name__}")
    return repr(float(value))


def _serialize_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected str, got {type(value).__name__}")
    return value


def _serialize_decimal(value: Any) -> str:
    if not isinstance(value, Decimal):
        raise TypeError(f"expected Decimal, got {type(value).__name__}")
    return str(value)


def _enum_converter(enum_type: type[Enum]) -> Converter:
    """Build a converter matching enum members by exact name."""

    def parse(raw: str) -> Enum:
        try:
            return enum_type[raw.strip()]
        except KeyError:
            raise ValueError(f"no member named {raw!r}") from None

    def serialize(value: Any) -> str:
        if not isinstance(value, enum_type):
            raise TypeError(f"expected {enum_type.__name__} member, got {value!r}")
        return value.name

    return Converter(parse=parse, serialize=serialize)


def _type_name(value_type: Any) -> str:
    return getattr(value_type, "__name__", repr(value_type))


class ConverterRegistry:
    """
    Registry of string converters keyed by target type.

    Examples:
        >>> registry = ConverterRegistry()
        >>> registry.parse("42", int)
        42
        >>> registry.serialize(True)
        'true'
        >>> registry.register(complex, complex, str)
        >>> registry.parse("1+2j", complex)
        (1+2j)
    """

    def __init__(self, include_defaults: bool = True):
        self._converters: dict[type, Converter] = {}
        if include_defaults:
            self.register(str, str, _serialize_str)
            self.register(bool, _parse_bool, _serialize_bool)
            self.register(int, lambda raw: int(raw.strip()), _serialize_int)
            self.register(float, lambda raw: float(raw.strip()), _serialize_float)
            self.register(Decimal, lambda raw: Decimal(raw.strip()), _serialize_decimal)

    def register(
        self,
        value_type: type,
        parse: Callable[[str], Any],
        serialize: Callable[[Any], str],
    ) -> None:
        """Register (or replace) the converter for a type."""
        self._converters[value_type] = Converter(parse=parse, serialize=serialize)

    def supports(self, value_type: type) -> bool:
        """Check whether values of the given type can be converted."""
        return self._lookup(value_type) is not None

    def _lookup(self, value_type: Any) -> Converter | None:
        converter = self._converters.get(value_type)
        if converter is not None:
            return converter
        if isinstance(value_type, type) and issubclass(value_type, Enum):
            return _enum_converter(value_type)
        return None

    def _require(self, value_type: Any, raw_value: Any) -> Converter:
        converter = self._lookup(value_type)
        if converter is None:
            raise TypeConversionError(
                f"No converter registered for type {_type_name(value_type)}",
                raw_value=raw_value,
                target_type=_type_name(value_type),
            )
        return converter

    def parse(self, raw: str, value_type: type) -> Any:
        """
        Convert a raw section value into the requested type.

        Args:
            raw: String stored in the section
            value_type: Requested Python type

        Returns:
            Converted value

        Raises:
            TypeConversionError: If the type is unsupported or the string
                does not parse as that type
        """
        converter = self._require(value_type, raw)
        try:
            return converter.parse(raw)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise TypeConversionError(
                f"Cannot convert {raw!r} to {_type_name(value_type)}: {e}",
                raw_value=raw,
                target_type=_type_name(value_type),
            ) from e

    def serialize(self, value: Any, value_type: type | None = None) -> str:
        """
        Convert a typed value into its stored string form.

        Args:
            value: Value to store
            value_type: Type to serialize as (defaults to ``type(value)``)

        Returns:
            String representation that ``parse`` reads back as ``value``

        Raises:
            TypeConversionError: If the value cannot be serialized
        """
        if value_type is None:
            value_type = type(value)
        converter = self._require(value_type, value)
        try:
            return converter.serialize(value)
        except (ValueError, TypeError) as e:
            raise TypeConversionError(
                f"Cannot serialize {value!r} as {_type_name(value_type)}: {e}",
                raw_value=value,
                target_type=_type_name(value_type),
            ) from e


default_registry = ConverterRegistry()


__all__ = ["Converter", "ConverterRegistry", "default_registry"]
