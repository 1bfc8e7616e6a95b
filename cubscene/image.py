"""In-memory 32-bit images and RGBA colours."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Color:
    """A colour with four channels, each stored in one byte.

    Alpha 0 is opaque and 255 is fully transparent. Values outside
    0..255 wrap around as a byte would.
    """

    r: int
    g: int
    b: int
    a: int = 0

    def to_bgra(self) -> bytes:
        """Return the four bytes of one pixel: blue, green, red, alpha."""
        return bytes(channel & 0xFF for channel in (self.b, self.g, self.r, self.a))


@dataclass
class Image:
    """A ZPixmap image of 32 bits per pixel, stored row by row.

    ``line_size`` is the number of bytes in one row; ``big_endian`` gives
    the byte order of the pixel values written by :meth:`set_pixel`.
    """

    width: int
    height: int
    big_endian: bool = False
    bits_per_pixel: int = field(default=32, init=False)
    line_size: int = field(init=False)
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"image size must be positive, got {self.width}x{self.height}"
            )
        self.line_size = self.width * self.bytes_per_pixel
        self.data = bytearray(self.line_size * self.height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    def pixel_offset(self, x: int, y: int) -> int:
        """Return the index in :attr:`data` of the first byte of pixel (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} image"
            )
        return x * self.bytes_per_pixel + self.line_size * y

    def set_pixel(self, x: int, y: int, value: int) -> None:
        """Store an integer pixel value in the image's byte order."""
        size = self.bytes_per_pixel
        offset = self.pixel_offset(x, y)
        masked = value & ((1 << (size * 8)) - 1)
        order = "big" if self.big_endian else "little"
        self.data[offset : offset + size] = masked.to_bytes(size, order)

    def get_pixel(self, x: int, y: int) -> int:
        """Read back the unsigned integer value of pixel (x, y)."""
        size = self.bytes_per_pixel
        offset = self.pixel_offset(x, y)
        order = "big" if self.big_endian else "little"
        return int.from_bytes(self.data[offset : offset + size], order)

    def fill(self, color: Color) -> None:
        """Turn every pixel of the image to ``color``."""
        row = color.to_bgra() * self.width
        for y in range(self.height):
            start = self.line_size * y
            self.data[start : start + len(row)] = row