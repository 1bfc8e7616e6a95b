"""Checks that a map has one player and is closed by walls."""

from __future__ import annotations

from collections.abc import Sequence

from .config import MapConfig

_PLAYER_CHARS = frozenset("NSEW")
# Cells the fill does not cross: walls, and cells already marked visited.
_BLOCKING = frozenset("1v")


def count_players(rows: Sequence[str]) -> int:
    """Count the player start cells (N, S, E or W) in the map."""
    return sum(1 for row in rows for cell in row if cell in _PLAYER_CHARS)


def player_valid(rows: Sequence[str]) -> bool:
    """True if the map holds exactly one player start."""
    return count_players(rows) == 1


def find_player(rows: Sequence[str]) -> tuple[int, int] | None:
    """Return (row, column) of the first player start, or None."""
    for x, row in enumerate(rows):
        for y, cell in enumerate(row):
            if cell in _PLAYER_CHARS:
                return x, y
    return None


def flood_fill(rows: Sequence[str], start: tuple[int, int]) -> bool:
    """True if every cell reachable from ``start`` is enclosed by walls.

    Reaching a space or leaving the map (including past the end of a
    shorter row) makes the map open.
    """
    seen: set[tuple[int, int]] = set()
    stack = [start]
    while stack:
        x, y = stack.pop()
        if not (0 <= x < len(rows) and 0 <= y < len(rows[x])) or rows[x][y] == " ":
            return False
        if (x, y) in seen or rows[x][y] in _BLOCKING:
            continue
        seen.add((x, y))
        stack.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return True


def map_valid(config: MapConfig) -> bool:
    """Check the map of ``config`` and record the player position in it."""
    rows = config.map_rows
    if not player_valid(rows):
        return False
    start = find_player(rows)
    if start is None:
        return False
    config.player_position = start
    return flood_fill(rows, start)