"""Style enumerations and their textual names in config files."""

from __future__ import annotations

import re
from enum import IntEnum
from typing import TypeVar

E = TypeVar("E", bound=IntEnum)

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


class HorizontalAlignment(IntEnum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2


class FontStyle(IntEnum):
    DEFAULT = 0
    MONOSPACED = 1
    PROPORTIONAL = 2
    MONOSPACED_SANS = 3
    PROPORTIONAL_SANS = 4
    CASUAL = 5
    CURSIVE = 6
    SMALL_CAPITALS = 7


class EdgeType(IntEnum):
    NONE = 0
    HARD_SHADOW = 1
    BEVEL = 2
    GLOW_OUTLINE = 3
    SOFT_SHADOW = 4


class TextAlignment(IntEnum):
    LEFT = 0
    RIGHT = 1
    CENTER = 2


def enum_to_string(value: IntEnum) -> str:
    """Return the config-file name of a member, e.g. ``SoftShadow``."""
    return "".join(part.capitalize() for part in value.name.split("_"))


def enum_from_string(enum_type: type[E], text: str) -> E:
    """Look a member up by its config name or, failing that, its number.

    A number is read from the start of the text, as far as its digits go.
    Raises ValueError when neither gives a member.
    """
    for member in enum_type:
        if enum_to_string(member) == text:
            return member
    match = _LEADING_INT.match(text)
    if match:
        try:
            return enum_type(int(match.group(1)))
        except ValueError:
            pass
    raise ValueError(f"Invalid {enum_type.__name__} value: '{text}'")


def enum_options_comment(enum_type: type[IntEnum]) -> str:
    """Return an INI comment listing every member name."""
    return ";Options: " + ", ".join(enum_to_string(member) for member in enum_type)