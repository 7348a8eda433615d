"""A software model of a 240x160 mode-3 display, its buttons and its RNG."""

from __future__ import annotations

import enum
import operator
from array import array
from collections.abc import Sequence
from itertools import islice

from pixelchase.font import GLYPH_HEIGHT, GLYPH_WIDTH, glyph_pixels

__all__ = [
    "WIDTH",
    "HEIGHT",
    "WHITE",
    "RED",
    "GREEN",
    "BLUE",
    "MAGENTA",
    "CYAN",
    "YELLOW",
    "BLACK",
    "GRAY",
    "Button",
    "Random",
    "Screen",
    "color",
    "offset",
    "key_down",
    "key_just_pressed",
]

WIDTH = 240
HEIGHT = 160

_PIXEL_MASK = 0xFFFF


def color(r: int, g: int, b: int) -> int:
    """Pack 5-bit red, green and blue channels into a 15-bit pixel value."""
    return r | g << 5 | b << 10


def offset(row: int, col: int, row_length: int) -> int:
    """Return the index of (row, col) in a row-major buffer."""
    return col + row_length * row


WHITE = color(31, 31, 31)
RED = color(31, 0, 0)
GREEN = color(0, 31, 0)
BLUE = color(0, 0, 31)
MAGENTA = color(31, 0, 31)
CYAN = color(0, 31, 31)
YELLOW = color(31, 31, 0)
BLACK = 0
GRAY = color(5, 5, 5)


class Button(enum.IntFlag):
    """Bits of the key input register; a cleared bit means the key is held."""

    A = 1 << 0
    B = 1 << 1
    SELECT = 1 << 2
    START = 1 << 3
    RIGHT = 1 << 4
    LEFT = 1 << 5
    UP = 1 << 6
    DOWN = 1 << 7
    R = 1 << 8
    L = 1 << 9


def key_down(key: int, buttons: int) -> bool:
    """Return whether ``key`` is held in the active-low ``buttons`` value."""
    return bool(~buttons & key)


def key_just_pressed(key: int, buttons: int, old_buttons: int) -> bool:
    """Return whether ``key`` is held now but was not held before."""
    return key_down(key, buttons) and not key_down(key, old_buttons)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


class Random:
    """The small linear congruential generator used for spawn positions."""

    def __init__(self, seed: int = 42) -> None:
        self.seed = _to_int32(operator.index(seed))

    def _next(self) -> int:
        self.seed = _to_int32(1664525 * self.seed + 1013904223)
        return (self.seed >> 16) & 0x7FFF

    def randint(self, low: int, high: int) -> int:
        """Return a pseudo-random integer in ``[low, high)`` (``low`` if equal)."""
        return (self._next() * (high - low) >> 15) + low


class Screen:
    """An in-memory 16-bit frame buffer with the drawing primitives of the game."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"screen size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.buffer = array("H", [0]) * (width * height)
        self.vblank_counter = 0

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the {self.width}x{self.height} screen")
        return offset(y, x, self.width)

    def _check_region(self, x: int, y: int, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"region size must not be negative, got {width}x{height}")
        if x < 0 or y < 0 or x + width > self.width or y + height > self.height:
            raise IndexError(
                f"region at ({x}, {y}) of {width}x{height} does not fit the screen"
            )

    def wait_for_vblank(self) -> None:
        """Mark the start of a new frame."""
        self.vblank_counter += 1

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x``, row ``y``."""
        return self.buffer[self._index(x, y)]

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Write one pixel, truncating the colour to 16 bits."""
        self.buffer[self._index(x, y)] = color & _PIXEL_MASK

    def draw_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        """Fill a rectangle with one colour."""
        self._check_region(x, y, width, height)
        line = array("H", [color & _PIXEL_MASK]) * width
        for row in range(y, y + height):
            start = offset(row, x, self.width)
            self.buffer[start : start + width] = line

    def draw_full_screen_image(self, image: Sequence[int]) -> None:
        """Copy the first width*height pixels of ``image`` onto the screen."""
        count = self.width * self.height
        pixels = array("H", (p & _PIXEL_MASK for p in islice(image, count)))
        if len(pixels) < count:
            raise ValueError(f"image holds {len(pixels)} pixels, the screen needs {count}")
        self.buffer[:] = pixels

    def draw_image(
        self, x: int, y: int, width: int, height: int, image: Sequence[int]
    ) -> None:
        """Copy a ``width`` x ``height`` row-major image to (x, y)."""
        self._check_region(x, y, width, height)
        if len(image) < width * height:
            raise ValueError(
                f"image holds {len(image)} pixels, {width}x{height} needs {width * height}"
            )
        for row in range(height):
            source = image[row * width : (row + 1) * width]
            start = offset(y + row, x, self.width)
            self.buffer[start : start + width] = array("H", (p & _PIXEL_MASK for p in source))

    def fill(self, color: int) -> None:
        """Set every pixel to one colour."""
        self.buffer[:] = array("H", [color & _PIXEL_MASK]) * (self.width * self.height)

    def draw_char(self, col: int, row: int, ch: int | str, color: int) -> None:
        """Draw the lit cells of one font glyph with its top left at (col, row)."""
        for dx, dy in glyph_pixels(ch):
            self.set_pixel(col + dx, row + dy, color)

    def draw_string(self, col: int, row: int, text: str, color: int) -> None:
        """Draw text left to right, stopping at a NUL character."""
        for position, ch in enumerate(text.partition("\0")[0]):
            self.draw_char(col + GLYPH_WIDTH * position, row, ch, color)

    def draw_centered_string(
        self, x: int, y: int, width: int, height: int, text: str, color: int
    ) -> None:
        """Draw text centred in the box at (x, y) of the given size."""
        text = text.partition("\0")[0]
        col = x + ((width - GLYPH_WIDTH * len(text)) >> 1)
        row = y + ((height - GLYPH_HEIGHT) >> 1)
        self.draw_string(col, row, text, color)