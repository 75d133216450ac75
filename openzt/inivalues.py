"""Conversion of stored INI string values into typed Python values."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import TypeVar

from openzt.inidefaults import IniDefault

T = TypeVar("T")


def coerce_bool(value: str, boolean_values: Mapping[bool, Sequence[str]] | None = None) -> bool:
    """Interpret ``value`` as a boolean using lists of true and false words.

    The comparison is case-insensitive. Raises ``ValueError`` when the value
    matches neither list.
    """
    words = boolean_values if boolean_values is not None else IniDefault().boolean_values
    lowered = value.lower()
    if lowered in words.get(True, ()):
        return True
    if lowered in words.get(False, ()):
        return False
    raise ValueError(f"Unable to parse value into bool: {value!r}")


def coerce_bool_map(value: str, boolean_map: Mapping[str, bool] | None = None) -> bool:
    """Interpret ``value`` as a boolean through a word-to-boolean mapping.

    The lookup is done on the lower-cased value. Raises ``ValueError`` when
    the word is not in the mapping.
    """
    mapping = boolean_map if boolean_map is not None else IniDefault().boolean_map
    try:
        return mapping[value.lower()]
    except KeyError:
        raise ValueError(f"Unable to parse value into bool: {value!r}") from None


def parse_value(value: str, converter: Callable[[str], T]) -> T:
    """Lower-case ``value`` and convert it with ``converter``.

    Any ``ValueError`` or ``TypeError`` from the converter is raised again as
    a ``ValueError`` carrying the converter's message.
    """
    try:
        return converter(value.lower())
    except (ValueError, TypeError) as err:
        raise ValueError(str(err)) from err