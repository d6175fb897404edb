from enum import Enum
from typing import Type, TypeVar

E = TypeVar("E", bound=Enum)


class FixedBitPolicy(Enum):
    """What the packer does with an identifier whose version/variant bits are not canonical."""
    LENIENT = "lenient"   # discard the bits silently (default)
    WARNING = "warning"   # discard the bits and log a warning
    STRICT = "strict"     # raise FixedBitMismatchError


def parse_enum(enum_cls: Type[E], value: str, key: str = "") -> E:
    """
    Case-insensitive look-up of an enum member by its name.

    :param enum_cls: Enum class to search
    :param value: member name as written by the user (e.g. in config.ini)
    :param key: name of the setting, used only in the error message
    :raises ValueError: if no member has that name
    """
    lut = {name.casefold(): member for name, member in enum_cls.__members__.items()}
    member = lut.get(value.strip().casefold())
    if member is None:
        allowed = ", ".join(enum_cls.__members__.keys())
        where = f" at key '{key}'" if key else ""
        raise ValueError(
            f"Invalid value '{value}' for {enum_cls.__name__}{where}. "
            f"Allowed: {allowed}"
        )
    return member
