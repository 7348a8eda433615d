"""Bitmaps for character codes 0-127 of the 6x8 console font."""

from __future__ import annotations

import operator

GLYPH_WIDTH = 6
GLYPH_HEIGHT = 8
FIRST_CODE = 0
LAST_CODE = 127

Glyph = tuple[tuple[int, ...], ...]

# One glyph per entry: eight rows of six cells, '#' lit and '.' dark.
_LOWER_GLYPH_ROWS = (
    "...... ...... ...... ..##.. ..##.. ...... ...... ......",  # 0
    "..###. .#...# .##.## .#...# .#.#.# .#...# ..###. ......",  # 1
    "..###. .##### .#.#.# .##### .#...# .##### ..###. ......",  # 2
    "...... ..#.#. .##### .##### .##### ..###. ...#.. ......",  # 3
    "...... ...... ..#.#. ..###. ..###. ...#.. ...... ......",  # 4
    "...#.. ..###. ..###. ...#.. .##### .##### ...#.. ......",  # 5
    "...... ...#.. ..###. .##### .##### ...#.. ..###. ......",  # 6
    "...... ...... ...... ..##.. ..##.. ...... ...... ......",  # 7
    "###### ###### ###### ##..## ##..## ###### ###### ######",  # 8
    "...... ...... .####. .#..#. .#..#. .####. ...... ......",  # 9
    "###### ###### #....# #.##.# #.##.# #....# ###### ######",  # 10
    "...... ...### ....## ..##.# .#..#. .#..#. ..##.. ......",  # 11
    "..###. .#...# .#...# ..###. ...#.. ..###. ...#.. ......",  # 12
    "...#.. ...##. ...#.# ...#.. ..##.. .###.. .##... ......",  # 13
    "....## ..##.# ..#.## ..##.# ..#.## .##.## .##... ......",  # 14
    "...... .#.#.# ..###. .##.## ..###. .#.#.# ...... ......",  # 15
    "..#... ..##.. ..###. ..#### ..###. ..##.. ..#... ......",  # 16
    "....#. ...##. ..###. .####. ..###. ...##. ....#. ......",  # 17
    "...#.. ..###. .##### ...#.. .##### ..###. ...#.. ......",  # 18
    "..#.#. ..#.#. ..#.#. ..#.#. ..#.#. ...... ..#.#. ......",  # 19
    "..#### .#.#.# .#.#.# ..##.# ...#.# ...#.# ...#.# ......",  # 20
    "..###. .#...# ..##.. ..#.#. ...##. .#...# ..###. ......",  # 21
    "...... ...... ...... ...... ...... .####. .####. ......",  # 22
    "...#.. ..###. .##### ...#.. .##### ..###. ...#.. ..###.",  # 23
    "...#.. ..###. .##### ...#.. ...#.. ...#.. ...#.. ......",  # 24
    "...#.. ...#.. ...#.. ...#.. .##### ..###. ...#.. ......",  # 25
    "...... ...#.. ...##. .##### ...##. ...#.. ...... ......",  # 26
    "...... ...#.. ..##.. .##### ..##.. ...#.. ...... ......",  # 27
    "...... ...... ...... .#.... .#.... .#.... .##### ......",  # 28
    "...... ..#.#. ..#.#. .##### ..#.#. ..#.#. ...... ......",  # 29
    "...#.. ...#.. ..###. ..###. .##### .##### ...... ......",  # 30
    ".##### .##### ..###. ..###. ...#.. ...#.. ...... ......",  # 31
    "...... ...... ...... ...... ...... ...... ...... ......",  # 32
    "...#.. ..###. ..###. ...#.. ...#.. ...... ...#.. ......",  # 33
    ".##.## .##.## .#..#. ...... ...... ...... ...... ......",  # 34
    "...... ..#.#. .##### ..#.#. ..#.#. .##### ..#.#. ......",  # 35
    "..#... ..###. .#.... ..##.. ....#. .###.. ...#.. ......",  # 36
    ".##..# .##..# ....#. ...#.. ..#... .#..## .#..## ......",  # 37
    "..#... .#.#.. .#.#.. ..#... .#.#.# .#..#. ..##.# ......",  # 38
    "..##.. ..##.. ..#... ...... ...... ...... ...... ......",  # 39
    "...#.. ..#... ..#... ..#... ..#... ..#... ...#.. ......",  # 40
    "..#... ...#.. ...#.. ...#.. ...#.. ...#.. ..#... ......",  # 41
    "...... ..#.#. ..###. .##### ..###. ..#.#. ...... ......",  # 42
    "...... ...#.. ...#.. .##### ...#.. ...#.. ...... ......",  # 43
    "...... ...... ...... ...... ...... ..##.. ..##.. ..#...",  # 44
    "...... ...... ...... .##### ...... ...... ...... ......",  # 45
    "...... ...... ...... ...... ...... ..##.. ..##.. ......",  # 46
    "...... .....# ....#. ...#.. ..#... .#.... ...... ......",  # 47
    "..###. .#...# .#..## .#.#.# .##..# .#...# ..###. ......",  # 48
    "...#.. ..##.. ...#.. ...#.. ...#.. ...#.. ..###. ......",  # 49
    "..###. .#...# .....# ...##. ..#... .#.... .##### ......",  # 50
    "..###. .#...# .....# ..###. .....# .#...# ..###. ......",  # 51
    "....#. ...##. ..#.#. .#..#. .##### ....#. ....#. ......",  # 52
    ".##### .#.... .#.... .####. .....# .#...# ..###. ......",  # 53
    "...##. ..#... .#.... .####. .#...# .#...# ..###. ......",  # 54
    ".##### .....# ....#. ...#.. ..#... ..#... ..#... ......",  # 55
    "..###. .#...# .#...# ..###. .#...# .#...# ..###. ......",  # 56
    "..###. .#...# .#...# ..#### .....# ....#. ..##.. ......",  # 57
    "...... ...... ..##.. ..##.. ...... ..##.. ..##.. ......",  # 58
    "...... ...... ..##.. ..##.. ...... ..##.. ..##.. ..#...",  # 59
    "....#. ...#.. ..#... .#.... ..#... ...#.. ....#. ......",  # 60
    "...... ...... .##### ...... ...... .##### ...... ......",  # 61
    "..#... ...#.. ....#. .....# ....#. ...#.. ..#... ......",  # 62
    "..###. .#...# .....# ...##. ...#.. ...... ...#.. ......",  # 63
    "..###. .#...# .#.### .#.#.# .#.### .#.... ..###. ......",  # 64
    "..###. .#...# .#...# .#...# .##### .#...# .#...# ......",  # 65
    ".####. .#...# .#...# .####. .#...# .#...# .####. ......",  # 66
    "..###. .#...# .#.... .#.... .#.... .#...# ..###. ......",  # 67
    ".####. .#...# .#...# .#...# .#...# .#...# .####. ......",  # 68
    ".##### .#.... .#.... .####. .#.... .#.... .##### ......",  # 69
    ".##### .#.... .#.... .####. .#.... .#.... .#.... ......",  # 70
    "..###. .#...# .#.... .#.### .#...# .#...# ..#### ......",  # 71
    ".#...# .#...# .#...# .##### .#...# .#...# .#...# ......",  # 72
    "..###. ...#.. ...#.. ...#.. ...#.. ...#.. ..###. ......",  # 73
    ".....# .....# .....# .....# .#...# .#...# ..###. ......",  # 74
    ".#...# .#..#. .#.#.. .##... .#.#.. .#..#. .#...# ......",  # 75
    ".#.... .#.... .#.... .#.... .#.... .#.... .##### ......",  # 76
    ".#...# .##.## .#.#.# .#...# .#...# .#...# .#...# ......",  # 77
    ".#...# .##..# .#.#.# .#..## .#...# .#...# .#...# ......",  # 78
    "..###. .#...# .#...# .#...# .#...# .#...# ..###. ......",  # 79
    ".####. .#...# .#...# .####. .#.... .#.... .#.... ......",  # 80
    "..###. .#...# .#...# .#...# .#.#.# .#..#. ..##.# ......",  # 81
    ".####. .#...# .#...# .####. .#..#. .#...# .#...# ......",  # 82
    "..###. .#...# .#.... ..###. .....# .#...# ..###. ......",  # 83
    ".##### ...#.. ...#.. ...#.. ...#.. ...#.. ...#.. ......",  # 84
    ".#...# .#...# .#...# .#...# .#...# .#...# ..###. ......",  # 85
    ".#...# .#...# .#...# .#...# .#...# ..#.#. ...#.. ......",  # 86
    ".#...# .#...# .#.#.# .#.#.# .#.#.# .#.#.# ..#.#. ......",  # 87
    ".#...# .#...# ..#.#. ...#.. ..#.#. .#...# .#...# ......",  # 88
    ".#...# .#...# .#...# ..#.#. ...#.. ...#.. ...#.. ......",  # 89
    ".####. ....#. ...#.. ..#... .#.... .#.... .####. ......",  # 90
    "..###. ..#... ..#... ..#... ..#... ..#... ..###. ......",  # 91
    "...... .#.... ..#... ...#.. ....#. .....# ...... ......",  # 92
    "..###. ....#. ....#. ....#. ....#. ....#. ..###. ......",  # 93
    "...#.. ..#.#. .#...# ...... ...... ...... ...... ......",  # 94
    "...... ...... ...... ...... ...... ...... ...... ######",  # 95
    "..##.. ..##.. ...#.. ...... ...... ...... ...... ......",  # 96
    "...... ...... ..###. .....# ..#### .#...# ..#### ......",  # 97
    ".#.... .#.... .####. .#...# .#...# .#...# .####. ......",  # 98
    "...... ...... ..###. .#...# .#.... .#...# ..###. ......",  # 99
    ".....# .....# ..#### .#...# .#...# .#...# ..#### ......",  # 100
    "...... ...... ..###. .#...# .####. .#.... ..###. ......",  # 101
    "...##. ..#... ..#... .####. ..#... ..#... ..#... ......",  # 102
    "...... ...... ..#### .#...# .#...# ..#### .....# ..###.",  # 103
    ".#.... .#.... .###.. .#..#. .#..#. .#..#. .#..#. ......",  # 104
    "...#.. ...... ...#.. ...#.. ...#.. ...#.. ...##. ......",  # 105
    "....#. ...... ...##. ....#. ....#. ....#. .#..#. ..##..",  # 106
    ".#.... .#.... .#..#. .#.#.. .##... .#.#.. .#..#. ......",  # 107
    "...#.. ...#.. ...#.. ...#.. ...#.. ...#.. ...##. ......",  # 108
    "...... ...... .##.#. .#.#.# .#.#.# .#...# .#...# ......",  # 109
    "...... ...... .###.. .#..#. .#..#. .#..#. .#..#. ......",  # 110
    "...... ...... ..###. .#...# .#...# .#...# ..###. ......",  # 111
    "...... ...... .####. .#...# .#...# .#...# .####. .#....",  # 112
    "...... ...... ..#### .#...# .#...# .#...# ..#### .....#",  # 113
    "...... ...... .#.##. ..#..# ..#... ..#... .###.. ......",  # 114
    "...... ...... ..###. .#.... ..###. .....# ..###. ......",  # 115
    "...... ..#... .####. ..#... ..#... ..#.#. ...#.. ......",  # 116
    "...... ...... .#..#. .#..#. .#..#. .#.##. ..#.#. ......",  # 117
    "...... ...... .#...# .#...# .#...# ..#.#. ...#.. ......",  # 118
    "...... ...... .#...# .#...# .#.#.# .##### ..#.#. ......",  # 119
    "...... ...... .#..#. .#..#. ..##.. .#..#. .#..#. ......",  # 120
    "...... ...... .#..#. .#..#. .#..#. ..###. ...#.. .##...",  # 121
    "...... ...... .####. ....#. ..##.. .#.... .####. ......",  # 122
    "...##. ..#... ..#... .##... ..#... ..#... ...##. ......",  # 123
    "...#.. ...#.. ...#.. ...#.. ...#.. ...#.. ...#.. ...#..",  # 124
    "..##.. ....#. ....#. ....## ....#. ....#. ..##.. ......",  # 125
    "..#.#. .#.#.. ...... ...... ...... ...... ...... ......",  # 126
    "...#.. ..###. .##.## .#...# .#...# .##### ...... ......",  # 127
)


def _parse(rows: str) -> Glyph:
    return tuple(tuple(int(cell == "#") for cell in row) for row in rows.split())


_LOWER_GLYPHS: tuple[Glyph, ...] = tuple(_parse(rows) for rows in _LOWER_GLYPH_ROWS)


def lower_glyph(code: int) -> Glyph:
    """Return the 8x6 bitmap (rows of 0/1 cells) for a code in 0-127."""
    index = operator.index(code)
    if not FIRST_CODE <= index <= LAST_CODE:
        raise ValueError(
            f"character code {index} is outside {FIRST_CODE}-{LAST_CODE}"
        )
    return _LOWER_GLYPHS[index]