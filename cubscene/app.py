"""The program's entry point and the moving sprite it shows."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from .config import ConfigError, MapConfig, check_args, load_config
from .image import Color, Image
from .mapcheck import map_valid
from .textures import load_textures
from .xpm import XpmError, load_xpm

ANIMATION_FRAMES = 10
SPRITE_PATH = "xpm/player.xpm"

_RIGHT = frozenset({2, 100})
_LEFT = frozenset({0, 97})
_DOWN = frozenset({1, 115})
_UP = frozenset({13, 119})
_QUIT = frozenset({53, 65307})
_FILLS = {
    114: Color(255, 0, 0, 0),
    65470: Color(255, 0, 0, 0),
    103: Color(0, 255, 0, 0),
    65471: Color(0, 255, 0, 0),
    98: Color(0, 0, 255, 0),
    65473: Color(0, 0, 255, 0),
}


@dataclass
class Program:
    """A sprite image and where it is drawn."""

    image: Image
    x: int = 100
    y: int = 100
    frame: int = 0
    running: bool = True

    def handle_key(self, key: int) -> None:
        """React to a key: move the sprite, recolour it or quit."""
        if key in _RIGHT:
            self.x += self.image.width
        elif key in _LEFT:
            self.x -= self.image.width
        elif key in _DOWN:
            self.y += self.image.height
        elif key in _UP:
            self.y -= self.image.height
        elif key in _QUIT:
            self.running = False
            return
        elif key in _FILLS:
            self.image.fill(_FILLS[key])
        print(f"Key pressed -> {key}")

    def animate(self) -> None:
        """Advance one frame of the bobbing animation."""
        self.frame += 1
        if self.frame == ANIMATION_FRAMES:
            self.y += 1
        elif self.frame >= ANIMATION_FRAMES * 2:
            self.y -= 1
            self.frame = 0


def _signed32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


def _report_config(config: MapConfig) -> None:
    print(f"North texture: {config.north_texture_path}")
    print(f"South texture: {config.south_texture_path}")
    print(f"West texture: {config.west_texture_path}")
    print(f"East texture: {config.east_texture_path}")
    print(f"Floor color: {config.floor_color}")
    print(f"Ceiling color: {config.ceiling_color}")
    print(f"Map size: {config.map_size}")
    for row in config.map_rows:
        print(f"Map array: {row}")


def main(argv: Sequence[str] | None = None) -> int:
    """Check a scene file, load its textures and drive the sprite.

    Key codes are read one per line from standard input until it ends or
    a quit key is given.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = load_config(check_args(args))
    except ConfigError as exc:
        print(f"Error\n{exc}")
        return 1
    _report_config(config)

    textures = None
    if map_valid(config):
        try:
            textures = load_textures(config)
        except XpmError:
            textures = None
    if textures is None:
        print("Error\nMap is not valid.")
        return 1

    for direction, texture in textures.items():
        print(f"{direction} texture width: {texture.width}")
        print(f"{direction} texture height: {texture.height}")
    north = textures["north"]
    for x, y in ((0, 0), (0, 1), (0, 2), (1, 0), (2, 0)):
        print(f"pixel color: {_signed32(north.get_pixel_color(x, y))}")

    try:
        sprite = load_xpm(SPRITE_PATH)
    except XpmError as exc:
        print(f"Error\n{exc}")
        return 1

    program = Program(sprite)
    for line in sys.stdin:
        text = line.strip()
        if not text:
            continue
        try:
            key = int(text)
        except ValueError:
            continue
        program.handle_key(key)
        if not program.running:
            break
        program.animate()
    return 0


if __name__ == "__main__":
    sys.exit(main())