"""Reading of XPM pixmaps into plain pixel grids."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike

from solong.colors import lookup_color

TRANSPARENT = 0xFF000000
"""Pixel value used for the ``None`` colour."""

_BUFFER_LIMIT = 63
_WORD_SEPARATORS = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_LEADING_HEX = re.compile(
    r"[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)"
)
_QUOTED = re.compile(r'"([^"]*)"')


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded pixmap; ``rows`` holds one tuple of 0xAARRGGBB ints per line."""

    width: int
    height: int
    rows: tuple[tuple[int, ...], ...]


def split_words(text: str) -> list[str]:
    """Split on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _find_unquoted(text: str, token: str) -> int:
    quoted = False
    for pos, char in enumerate(text):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(token, pos):
            return pos
    return -1


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside double quotes with spaces.

    The length of the text is kept. A comment that is never closed runs
    to the end of the text.
    """
    while (begin := _find_unquoted(text, "/*")) != -1:
        close = text.find("*/", begin + 2)
        text = _blank(text, begin, len(text) if close == -1 else close + 2)
    while (begin := _find_unquoted(text, "//")) != -1:
        newline = text.find("\n", begin + 2)
        text = _blank(text, begin, len(text) if newline == -1 else newline + 1)
    return text


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _parse_hex(text: str) -> int:
    match = _LEADING_HEX.match(text)
    if not match or not match.group(2):
        return 0
    value = int(match.group(2), 16)
    return -value if match.group(1) == "-" else value


def _text_rgb(name: str, end: str | None) -> int:
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_BUFFER_LIMIT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"bad header: {line!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"bad header: {line!r}")
    return width, height, ncolors, cpp


def _parse_color(line: str, cpp: int) -> tuple[str, int]:
    if len(line) < cpp:
        raise XpmError(f"colour line too short: {line!r}")
    words = split_words(line[cpp:])
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError(f"no colour given in {line!r}") from None
    if index + 1 >= len(words):
        raise XpmError(f"no colour given in {line!r}")
    end = words[index + 2] if index + 2 < len(words) else None
    return line[:cpp], _text_rgb(words[index + 1], end)


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode the quoted strings of an XPM: header, colours, then pixel rows."""
    source = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(source, "header"))

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, rgb = _parse_color(_next_line(source, "colour line"), cpp)
        # Short keys let later definitions win; long keys keep the first one.
        if cpp <= 2 or key not in palette:
            palette[key] = rgb

    rows = []
    for _ in range(height):
        line = _next_line(source, "pixel row")
        if len(line) < cpp * width:
            raise XpmError(f"pixel row too short: {line!r}")
        row = []
        for x in range(width):
            colour = palette.get(line[cpp * x : cpp * (x + 1)], 0)
            row.append(TRANSPARENT if colour == -1 else colour)
        rows.append(tuple(row))
    return XpmImage(width=width, height=height, rows=tuple(rows))


def parse_xpm(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    return parse_xpm_lines(_QUOTED.findall(strip_comments(text)))


def load_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(text)