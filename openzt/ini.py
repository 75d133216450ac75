"""An INI-style configuration store with case handling and typed getters."""

from __future__ import annotations

import copy
import os
from collections.abc import Callable
from typing import Optional, TypeVar

from openzt.inidefaults import IniDefault, WriteOptions
from openzt.iniformat import ConfigMap, IniError, SectionMap, parse_ini, render_ini
from openzt.inivalues import coerce_bool, coerce_bool_map, parse_value

T = TypeVar("T")


class Ini:
    """A loaded configuration: ordered sections of keys, each holding a list of values.

    A key written without a delimiter holds ``None`` instead of a list.
    Unless the object is case-sensitive, section and key names are stored
    and looked up in lower case.
    """

    def __init__(self, defaults: IniDefault | None = None) -> None:
        settings = defaults.copy() if defaults is not None else IniDefault()
        self._map: ConfigMap = {}
        self._default_section = settings.default_section
        self._comment_symbols = list(settings.comment_symbols)
        self._delimiters = list(settings.delimiters)
        self._boolean_values = {flag: list(words) for flag, words in settings.boolean_values.items()}
        self._boolean_map = dict(settings.boolean_map)
        self._case_sensitive = settings.case_sensitive
        self._multiline = settings.multiline

    @classmethod
    def new_cs(cls) -> Ini:
        """Create a case-sensitive configuration."""
        return cls(IniDefault(case_sensitive=True))

    def defaults(self) -> IniDefault:
        """Return the current settings as an independent ``IniDefault``."""
        return IniDefault(
            default_section=self._default_section,
            comment_symbols=list(self._comment_symbols),
            delimiters=list(self._delimiters),
            boolean_values={flag: list(words) for flag, words in self._boolean_values.items()},
            case_sensitive=self._case_sensitive,
            multiline=self._multiline,
            boolean_map=dict(self._boolean_map),
        )

    def load_defaults(self, defaults: IniDefault) -> None:
        """Apply settings from ``defaults``; only later operations are affected."""
        self._default_section = defaults.default_section
        self._comment_symbols = list(defaults.comment_symbols)
        self._delimiters = list(defaults.delimiters)
        self._boolean_values = {flag: list(words) for flag, words in defaults.boolean_values.items()}
        self._case_sensitive = defaults.case_sensitive

    def set_default_section(self, section: str) -> None:
        """Set the name of the section that holds header-less keys."""
        self._default_section = section

    def set_comment_symbols(self, symbols: list[str]) -> None:
        """Replace the characters that start a comment."""
        self._comment_symbols = list(symbols)

    def set_multiline(self, multiline: bool) -> None:
        """Record whether multiline values are wanted."""
        self._multiline = multiline

    def sections(self) -> list[str]:
        """Return the section names in order."""
        return list(self._map)

    def _parse(self, text: str) -> ConfigMap:
        return parse_ini(text, self.defaults())

    def _read_file(self, path: str | os.PathLike[str]) -> ConfigMap:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
        try:
            return self._parse(text)
        except IniError as err:
            raise IniError(f"couldn't read {os.fspath(path)}: {err}") from err

    def _append(self, loaded: ConfigMap) -> None:
        for section, values in loaded.items():
            self._map.setdefault(section, {}).update(values)

    def load(self, path: str | os.PathLike[str]) -> ConfigMap:
        """Replace the configuration with the file at ``path``; return a copy of it."""
        self._map = self._read_file(path)
        return copy.deepcopy(self._map)

    def load_and_append(self, path: str | os.PathLike[str]) -> ConfigMap:
        """Merge the file at ``path`` over the current configuration; return a copy."""
        self._append(self._read_file(path))
        return copy.deepcopy(self._map)

    def read(self, text: str) -> ConfigMap:
        """Replace the configuration with parsed ``text``; return a copy of it."""
        self._map = self._parse(text)
        return copy.deepcopy(self._map)

    def read_and_append(self, text: str) -> ConfigMap:
        """Merge parsed ``text`` over the current configuration; return a copy."""
        self._append(self._parse(text))
        return copy.deepcopy(self._map)

    def write(self, path: str | os.PathLike[str], options: WriteOptions | None = None) -> None:
        """Write the configuration to ``path``, overwriting any existing file."""
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(self.writes(options))

    def writes(self, options: WriteOptions | None = None) -> str:
        """Return the configuration as INI text."""
        return render_ini(self._map, self._default_section, options)

    def _autocase(self, section: str, key: str) -> tuple[str, str]:
        if self._case_sensitive:
            return section, key
        return section.lower(), key.lower()

    def _lookup(self, section: str, key: str) -> Optional[list[str]]:
        section, key = self._autocase(section, key)
        return self._map.get(section, {}).get(key)

    def get(self, section: str, key: str) -> str | None:
        """Return the last value of ``key``, or ``None`` if absent or valueless."""
        values = self._lookup(section, key)
        return values[-1] if values else None

    def get_vec(self, section: str, key: str) -> list[str] | None:
        """Return all values of ``key``, or ``None`` if absent or valueless."""
        values = self._lookup(section, key)
        return list(values) if values is not None else None

    def get_bool_coerce(self, section: str, key: str) -> bool | None:
        """Interpret the last value of ``key`` as a boolean word.

        Raises ``IniError`` when the value is not a known boolean word.
        """
        values = self._lookup(section, key)
        if values is None:
            return None
        try:
            return coerce_bool(values[-1], self._boolean_values)
        except ValueError as err:
            cased_section, cased_key = self._autocase(section, key)
            raise IniError(
                f"Unable to parse value into bool at {cased_section}:{cased_key}"
            ) from err

    def get_bool_vec_coerce(self, section: str, key: str) -> list[bool] | None:
        """Interpret every value of ``key`` as a boolean word.

        Raises ``IniError`` when any value is not a known boolean word.
        """
        values = self._lookup(section, key)
        if values is None:
            return None
        try:
            return [coerce_bool_map(value, self._boolean_map) for value in values]
        except ValueError as err:
            raise IniError("Unable to parse value into bool") from err

    def get_parse(self, section: str, key: str, converter: Callable[[str], T]) -> T | None:
        """Convert the lower-cased last value of ``key`` with ``converter``."""
        values = self._lookup(section, key)
        if values is None:
            return None
        return parse_value(values[-1], converter)

    def get_vec_parse(
        self, section: str, key: str, converter: Callable[[str], T]
    ) -> list[T] | None:
        """Convert every lower-cased value of ``key`` with ``converter``."""
        values = self._lookup(section, key)
        if values is None:
            return None
        return [parse_value(value, converter) for value in values]

    def get_map(self) -> ConfigMap | None:
        """Return a copy of the whole configuration, or ``None`` if it is empty."""
        return copy.deepcopy(self._map) if self._map else None

    def set(self, section: str, key: str, value: str | None) -> list[str] | None:
        """Replace the values of ``key`` with ``value`` (or make it valueless).

        Returns the previous values, or ``None`` if there were none.
        """
        section, key = self._autocase(section, key)
        new_value = [value] if value is not None else None
        values = self._map.get(section)
        if values is None:
            self._map[section] = {key: new_value}
            return None
        previous = values.get(key)
        values[key] = new_value
        return previous

    def add(self, section: str, key: str, value: str) -> list[str] | None:
        """Append ``value`` to ``key``, creating section and key as needed.

        Returns the full list of values when appended to existing ones,
        otherwise ``None``.
        """
        section, key = self._autocase(section, key)
        values = self._map.get(section)
        if values is None:
            self._map[section] = {key: [value]}
            return None
        existing = values.get(key)
        if existing is None:
            values[key] = [value]
            return None
        existing.append(value)
        return list(existing)

    def clear(self) -> None:
        """Remove every section."""
        self._map.clear()

    def remove_section(self, section: str) -> SectionMap | None:
        """Remove ``section`` and return its keys, or ``None`` if absent."""
        if not self._case_sensitive:
            section = section.lower()
        return self._map.pop(section, None)

    def remove_key(self, section: str, key: str) -> list[str] | None:
        """Remove ``key`` from ``section`` and return its values, or ``None``."""
        section, key = self._autocase(section, key)
        values = self._map.get(section)
        if values is None:
            return None
        return values.pop(key, None)

    def get_keys(self, section: str) -> list[str] | None:
        """Return the keys of ``section`` as stored, or ``None`` if absent."""
        values = self._map.get(section)
        return list(values) if values is not None else None