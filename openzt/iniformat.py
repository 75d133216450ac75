"""Parsing of INI-style text into nested mappings, and rendering them back."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Optional

from openzt.inidefaults import IniDefault, WriteOptions

LINE_ENDING = os.linesep

SectionMap = dict[str, Optional[list[str]]]
ConfigMap = dict[str, SectionMap]


class IniError(ValueError):
    """Raised when INI text cannot be parsed."""


def _first_index_of_any(text: str, chars: list[str]) -> int | None:
    return next((idx for idx, ch in enumerate(text) if ch in chars), None)


def parse_ini(text: str, defaults: IniDefault | None = None) -> ConfigMap:
    """Parse INI-style ``text`` into an ordered mapping of sections to keys.

    Each key maps to a list of its values in order of appearance, or to
    ``None`` for a key written without a delimiter. Lines before any section
    header belong to the default section.
    """
    settings = defaults if defaults is not None else IniDefault()

    def caser(value: str) -> str:
        return value if settings.case_sensitive else value.lower()

    result: ConfigMap = {}
    section = settings.default_section

    for num, raw_line in enumerate(text.split("\n")):
        raw_line = raw_line.removesuffix("\r")
        cut = _first_index_of_any(raw_line, settings.comment_symbols)
        line = raw_line if cut is None else raw_line[:cut]
        trimmed = line.strip()
        if not trimmed:
            continue

        if trimmed.startswith("["):
            end = trimmed.rfind("]")
            if end == -1:
                raise IniError(
                    f"line {num}: Found opening bracket for section name but no closing bracket"
                )
            section = caser(trimmed[1:end].strip())
            continue

        values = result.setdefault(section, {})
        delimiter = _first_index_of_any(trimmed, settings.delimiters)
        if delimiter is None:
            values[caser(trimmed)] = None
            continue

        key = caser(trimmed[:delimiter].strip())
        if not key:
            raise IniError(f"line {num}:{delimiter}: Key cannot be empty")
        value = trimmed[delimiter + 1:].strip()
        existing = values.get(key)
        if existing is None:
            values[key] = [value]
        else:
            existing.append(value)

    return result


def _render_section(
    section_map: Mapping[str, Optional[list[str]]], space_around_delimiters: bool
) -> list[str]:
    delimiter = " = " if space_around_delimiters else "="
    bare_delimiter = delimiter.rstrip()
    parts: list[str] = []
    for key, values in section_map.items():
        if values is None:
            parts.append(key + LINE_ENDING)
            continue
        for value in values:
            parts.append(f"{key}{delimiter if value else bare_delimiter}{value}{LINE_ENDING}")
    return parts


def render_ini(
    sections: Mapping[str, Mapping[str, Optional[list[str]]]],
    default_section: str = "default",
    options: WriteOptions | None = None,
) -> str:
    """Render ``sections`` as INI text.

    Keys of the default section come first without a header; every other
    section follows under its ``[name]`` header.
    """
    opts = options if options is not None else WriteOptions()
    separator = LINE_ENDING * opts.blank_lines_between_sections
    parts: list[str] = []

    default_map = sections.get(default_section)
    if default_map is not None:
        parts.extend(_render_section(default_map, opts.space_around_delimiters))

    for position, (name, section_map) in enumerate(sections.items()):
        if position:
            parts.append(separator)
        if name != default_section:
            parts.append(f"[{name}]{LINE_ENDING}")
            parts.extend(_render_section(section_map, opts.space_around_delimiters))

    return "".join(parts)