from enum import Enum
from typing import Any, Type, TypeVar

from ..errors import InvalidConfiguration

E = TypeVar("E", bound=Enum)


def coerce_enum(enum_cls: Type[E], option: str, value: Any) -> E:
    """Convert an option value to a member of ``enum_cls``."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise InvalidConfiguration(option, value, f"expected one of: {choices}") from None
