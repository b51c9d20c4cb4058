from typing import Any, Dict, Mapping, Optional, TypeVar

T = TypeVar('T')


def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default


def fill_missing(values: Mapping[str, Any], defaults: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Build a dict holding one entry per key of ``defaults``.

    Keys missing from ``values`` (or mapped to None) take the default;
    every other value is kept as given, falsy ones included.
    """
    return {key: value_or_default(values.get(key), default) for key, default in defaults.items()}
