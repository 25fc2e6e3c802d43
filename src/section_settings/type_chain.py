"""Type chain helpers.

A type chain is the list of class names used to scope a setting, ordered
from the most general ancestor to the subject class itself. The walk
follows the primary base class and stops once the base lives in a different
top-level package than the subject, so framework or builtin ancestors never
end up in a key.
"""

from collections.abc import Sequence

from .exceptions import InvalidNameError


KEY_SEPARATOR = "."


def _top_level_package(cls: type) -> str:
    return cls.__module__.split(".", 1)[0]


def type_chain_for(cls: type | None) -> tuple[str, ...]:
    """Compute the type chain of a class.

    Args:
        cls: Subject class, or None for no type association

    Returns:
        Class names, most general ancestor first

    Example:
        >>> class Base: ...
        >>> class Buggy(Base): ...
        >>> type_chain_for(Buggy)
        ('Base', 'Buggy')
    """
    if cls is None:
        return ()
    if not isinstance(cls, type):
        raise TypeError(f"expected a class, got {type(cls).__name__}")

    package = _top_level_package(cls)
    names = []
    current = cls
    while current is not None and current is not object:
        if _top_level_package(current) != package:
            break
        names.append(current.__name__)
        current = current.__bases__[0] if current.__bases__ else None
    return tuple(reversed(names))


def validate_name(name: object) -> str:
    """Check that a type or setting name can be used as a key segment.

    Raises:
        InvalidNameError: If the name is not a non-empty string or contains
            the key separator
    """
    if not isinstance(name, str) or not name:
        raise InvalidNameError("Names must be non-empty strings", name=name)
    if KEY_SEPARATOR in name:
        raise InvalidNameError(
            f"Names must not contain the key separator {KEY_SEPARATOR!r}", name=name
        )
    return name


def normalize_type_chain(type_chain: type | Sequence[str] | None) -> tuple[str, ...]:
    """Turn a class, a sequence of names or None into a validated chain."""
    if type_chain is None:
        return ()
    if isinstance(type_chain, type):
        return type_chain_for(type_chain)
    if isinstance(type_chain, str):
        # a bare string would otherwise be split into characters
        raise InvalidNameError("Type chain must be a sequence of names", name=type_chain)
    return tuple(validate_name(name) for name in type_chain)


__all__ = [
    "KEY_SEPARATOR",
    "type_chain_for",
    "validate_name",
    "normalize_type_chain",
]
