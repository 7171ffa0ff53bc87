"""Line-level helpers for the CSV exported by published Google Sheets.

Two splitters live here on purpose:

  parse_csv_line     quote-aware; used for question sheets, whose cells
                     routinely contain commas
  split_simple_line  plain comma split; used for the master config sheet

Neither handles escaped quotes (``""`` inside a quoted field): the pair just
toggles the quote state twice and is dropped from the output.
"""
from __future__ import annotations

import re
from collections.abc import Iterator

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


def _clean_field(raw: str) -> str:
    value = raw.strip()
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value


def parse_csv_line(line: str) -> list[str]:
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append(_clean_field("".join(current)))
            current = []
        else:
            current.append(char)

    fields.append(_clean_field("".join(current)))
    return fields


def split_simple_line(line: str) -> list[str]:
    return [_clean_field(part) for part in line.split(",")]


def parse_int(text: str | None) -> int | None:
    """Parse a leading integer the way spreadsheet cells are usually read:
    ``"12"`` and ``"12 (draft)"`` both give 12, ``"abc"`` gives None."""
    if not text:
        return None
    m = _INT_PREFIX.match(text)
    if not m:
        return None
    return int(m.group(1))


def iter_data_lines(csv_text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_index, line)`` for every non-blank line after the header.

    ``line_index`` is the position in the original text, so gaps left by
    blank lines are preserved.
    """
    lines = csv_text.strip().split("\n")
    for i in range(1, len(lines)):
        line = lines[i].strip()
        if not line:
            continue
        yield i, line
