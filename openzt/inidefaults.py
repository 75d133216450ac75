"""Default settings for INI parsing and formatting options for INI output."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass, field

_TRUE_WORDS = ("true", "yes", "t", "y", "on", "1")
_FALSE_WORDS = ("false", "no", "f", "n", "off", "0")


def _default_boolean_values() -> dict[bool, list[str]]:
    return {True: list(_TRUE_WORDS), False: list(_FALSE_WORDS)}


def _default_boolean_map() -> dict[str, bool]:
    mapping = {word: True for word in _TRUE_WORDS}
    mapping.update({word: False for word in _FALSE_WORDS})
    return mapping


@dataclass
class IniDefault:
    """Template of settings from which an ``Ini`` object is created."""

    default_section: str = "default"
    comment_symbols: list[str] = field(default_factory=lambda: [";", "#"])
    delimiters: list[str] = field(default_factory=lambda: ["=", ":"])
    boolean_values: dict[bool, list[str]] = field(default_factory=_default_boolean_values)
    case_sensitive: bool = False
    multiline: bool = False
    boolean_map: dict[str, bool] = field(default_factory=_default_boolean_map)

    def copy(self) -> IniDefault:
        """Return an independent deep copy of these defaults."""
        return _copy.deepcopy(self)


@dataclass
class WriteOptions:
    """Formatting options used when rendering a configuration to text."""

    space_around_delimiters: bool = False
    multiline_line_indentation: int = 4
    blank_lines_between_sections: int = 0