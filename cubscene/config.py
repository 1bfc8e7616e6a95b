"""Reading scene description (``.cub``) files.

A scene file first names the four wall textures (``NO``, ``SO``, ``WE``,
``EA``) and the floor and ceiling colours (``F``, ``C``), in any order.
The map rows follow once every element has been given.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from os import PathLike

_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_TAB_WIDTH = 4


class ConfigError(ValueError):
    """Raised when a scene file or the command line is not acceptable."""


@dataclass
class MapConfig:
    """Everything read from a scene file."""

    north_texture_path: str | None = None
    south_texture_path: str | None = None
    west_texture_path: str | None = None
    east_texture_path: str | None = None
    floor_color: int = -1
    ceiling_color: int = -1
    map_rows: list[str] = field(default_factory=list)
    config_done: bool = False
    player_position: tuple[int, int] | None = None

    @property
    def map_size(self) -> int:
        return len(self.map_rows)

    def is_complete(self) -> bool:
        """True once all textures and both colours have been given."""
        return (
            self.north_texture_path is not None
            and self.south_texture_path is not None
            and self.west_texture_path is not None
            and self.east_texture_path is not None
            and self.floor_color != -1
            and self.ceiling_color != -1
        )


def skip_spaces(text: str) -> str:
    """Drop leading spaces and tabs."""
    return text.lstrip(" \t")


def trim_trailing_whitespace(text: str) -> str:
    """Drop trailing spaces, tabs and newlines."""
    return text.rstrip(" \n\t")


def convert_tabs_to_spaces(line: str) -> str:
    """Replace every tab by four spaces."""
    return line.replace("\t", " " * _TAB_WIDTH)


def _scan_int(text: str) -> int | None:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else None


def parse_color(text: str) -> int:
    """Parse ``R,G,B`` into a 0xRRGGBB integer.

    Each component is read like ``%d``: leading whitespace, an optional
    sign and digits; anything after the digits up to the next comma is
    ignored. Each component must lie in 0..255.
    """
    parts = skip_spaces(text).split(",", 2)
    if len(parts) != 3 or not parts[0]:
        raise ConfigError("Color format is incorrect.")
    values = [_scan_int(part) for part in parts]
    if any(value is None for value in values):
        raise ConfigError("Color format is incorrect.")
    r, g, b = values
    if not all(0 <= value <= 255 for value in (r, g, b)):
        raise ConfigError("Invalid color value.")
    return r << 16 | g << 8 | b


_TEXTURE_KEYS = (
    ("NO", "north_texture_path"),
    ("SO", "south_texture_path"),
    ("WE", "west_texture_path"),
    ("EA", "east_texture_path"),
)
_COLOR_KEYS = (
    ("F ", "floor_color"),
    ("C ", "ceiling_color"),
)


def _process_texture_or_color(line: str, config: MapConfig) -> bool:
    for prefix, attr in _TEXTURE_KEYS:
        if line.startswith(prefix) and getattr(config, attr) is None:
            value = trim_trailing_whitespace(skip_spaces(line[2:]))
            setattr(config, attr, value)
            return True
    for prefix, attr in _COLOR_KEYS:
        if line.startswith(prefix) and getattr(config, attr) == -1:
            setattr(config, attr, parse_color(skip_spaces(line[2:])))
            return True
    return False


def _process_map_line(line: str, config: MapConfig) -> bool:
    first = line[0]
    if first.isascii() and first.isdigit() or first in " \t":
        row = line[:-1] if line.endswith("\n") else line
        config.map_rows.append(convert_tabs_to_spaces(row))
        return True
    return False


def parse_line(line: str, config: MapConfig) -> None:
    """Apply one line of a scene file to ``config``.

    Blank lines are ignored. Before the configuration is complete a line
    must give a texture or colour not yet set; afterwards it must be a
    map row, starting with a digit, a space or a tab.
    """
    if config.is_complete():
        config.config_done = True
    if not config.config_done:
        line = skip_spaces(line)
    if not line or line[0] == "\n":
        return
    if not config.config_done and _process_texture_or_color(line, config):
        return
    if config.config_done and _process_map_line(line, config):
        return
    raise ConfigError("Invalid or incomplete configuration elements")


def parse_lines(lines: Iterable[str]) -> MapConfig:
    """Build a configuration from the lines of a scene file."""
    config = MapConfig()
    for line in lines:
        parse_line(line, config)
    return config


def load_config(path: str | PathLike[str]) -> MapConfig:
    """Read a scene file."""
    try:
        handle = open(path, encoding="latin-1", newline="")
    except OSError as exc:
        raise ConfigError("Map not found.") from exc
    with handle:
        return parse_lines(handle)


def check_args(argv: Sequence[str]) -> str:
    """Check the command-line arguments and return the scene file path."""
    if len(argv) != 1:
        raise ConfigError("Invalid number of arguments.\nInsert only one map.")
    path = argv[0]
    if ".cub" not in path:
        raise ConfigError("Invalid type of file.\nInsert .cub file")
    return path