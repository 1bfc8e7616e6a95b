"""Reading XPM pixmaps into :class:`~cubscene.image.Image` objects."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

from .colornames import color_by_name
from .image import Image

_TRANSPARENT_PIXEL = 0xFF000000
_NAME_BUFFER = 63

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_HEX_RE = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


def _atoi(text: str) -> int:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


def _words(text: str) -> list[str]:
    return [word for word in re.split(r"[ \t]+", text) if word]


def _find_outside_quotes(text: str, needle: str) -> int:
    inside = False
    for i in range(len(text) - len(needle) + 1):
        if text[i] == '"':
            inside = not inside
        if not inside and text.startswith(needle, i):
            return i
    return -1


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quoted strings with spaces.

    Block comments are removed first, then line comments together with
    the newline ending them. The length of the text is kept.
    """
    while (begin := _find_outside_quotes(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        text = _blank(text, begin, len(text) if end == -1 else end + 2)
    while (begin := _find_outside_quotes(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        text = _blank(text, begin, len(text) if end == -1 else end + 1)
    return text


def quoted_strings(text: str) -> Iterator[str]:
    """Yield, in order, the contents of each pair of double quotes."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1 : end]
        pos = end + 1


def parse_color_spec(name: str, suffix: str | None) -> int:
    """Return the colour value given by an XPM colour word.

    ``#`` introduces a hexadecimal value. Otherwise ``name`` (joined with
    ``suffix`` by a space, when given) is looked up among the known colour
    names; ``none`` yields -1 and an unknown name yields 0.
    """
    if name.startswith("#"):
        match = _HEX_RE.match(name, 1)
        digits = match.group(2) if match else ""
        value = int(digits, 16) if digits else 0
        if match and match.group(1) == "-":
            value = -value
        return _to_int32(value)
    if suffix is not None:
        name = f"{name} {suffix}"[:_NAME_BUFFER]
    try:
        return color_by_name(name)
    except KeyError:
        return 0


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM data: a header, colour rows and pixel rows."""
    rows = iter(lines)

    def next_row() -> str:
        try:
            return next(rows)
        except StopIteration:
            raise XpmError("unexpected end of XPM data") from None

    header = _words(next_row())
    if len(header) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header: {' '.join(header[:4])}")

    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_row()
        words = _words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour row without 'c' key: {line!r}") from None
        if index >= len(words):
            raise XpmError(f"colour row without a colour: {line!r}")
        suffix = words[index + 1] if index + 1 < len(words) else None
        value = parse_color_spec(words[index], suffix)
        key = line[:cpp]
        if cpp <= 2:
            colors[key] = value
        else:
            colors.setdefault(key, value)

    image = Image(width, height)
    for y in range(height):
        line = next_row()
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is shorter than {width} pixels")
        for x in range(width):
            value = colors.get(line[x * cpp : (x + 1) * cpp], 0)
            if value == -1:
                value = _TRANSPARENT_PIXEL
            image.set_pixel(x, y, value)
    return image


def parse_xpm_text(text: str) -> Image:
    """Build an image from the text of an XPM file."""
    return parse_xpm(quoted_strings(strip_comments(text)))


def load_xpm(path: str | PathLike[str]) -> Image:
    """Read an XPM file into an image."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm_text(text)