"""Wall textures: pixel grids read from XPM files."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from os import PathLike

from .config import MapConfig
from .image import Image
from .xpm import XpmError, load_xpm

_DIRECTIONS = (
    ("north", "north_texture_path"),
    ("south", "south_texture_path"),
    ("west", "west_texture_path"),
    ("east", "east_texture_path"),
)


@dataclass(frozen=True)
class Texture:
    """A texture of ``width`` x ``height`` pixels stored row by row."""

    width: int
    height: int
    data: Sequence[int]

    def get_pixel_color(self, x: int, y: int) -> int:
        """Return the pixel value at (x, y), or 0 outside the texture."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return 0
        return self.data[y * self.width + x]


def _texture_from_image(image: Image) -> Texture:
    data = tuple(
        image.get_pixel(x, y) for y in range(image.height) for x in range(image.width)
    )
    return Texture(image.width, image.height, data)


def load_texture(path: str | PathLike[str]) -> Texture:
    """Read one texture from an XPM file."""
    return _texture_from_image(load_xpm(path))


def load_textures(config: MapConfig) -> dict[str, Texture]:
    """Load the four wall textures named by ``config``.

    The result maps ``north``, ``south``, ``west`` and ``east`` to their
    textures. Loading stops at the first texture that cannot be read.
    """
    textures: dict[str, Texture] = {}
    for direction, attr in _DIRECTIONS:
        path = getattr(config, attr)
        if path is None:
            raise XpmError(f"no {direction} texture given")
        textures[direction] = load_texture(path)
    return textures