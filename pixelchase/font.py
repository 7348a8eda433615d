"""Lookup of 6x8 font bitmaps by character code or single character."""

from __future__ import annotations

import operator

from pixelchase.glyphs_lower import GLYPH_HEIGHT, GLYPH_WIDTH, Glyph, lower_glyph
from pixelchase.glyphs_lower import LAST_CODE as _LOWER_LAST
from pixelchase.glyphs_upper import LAST_CODE as _UPPER_LAST
from pixelchase.glyphs_upper import upper_glyph

__all__ = ["GLYPH_WIDTH", "GLYPH_HEIGHT", "Glyph", "glyph", "glyph_pixels"]


def _code_of(code: int | str) -> int:
    if isinstance(code, str):
        if len(code) != 1:
            raise TypeError(f"expected a single character, got {code!r}")
        return ord(code)
    return operator.index(code)


def glyph(code: int | str) -> Glyph:
    """Return the bitmap for a character code 0-255 or a one-character string."""
    index = _code_of(code)
    if 0 <= index <= _LOWER_LAST:
        return lower_glyph(index)
    if index <= _UPPER_LAST:
        return upper_glyph(index)
    raise ValueError(f"character code {index} is outside 0-{_UPPER_LAST}")


def glyph_pixels(code: int | str) -> tuple[tuple[int, int], ...]:
    """Return the (column, row) offsets of the lit cells, row by row."""
    return tuple(
        (col, row)
        for row, cells in enumerate(glyph(code))
        for col, cell in enumerate(cells)
        if cell
    )