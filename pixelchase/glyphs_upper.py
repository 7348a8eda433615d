"""Bitmaps for character codes 128-255 of the 6x8 console font."""

from __future__ import annotations

import operator

from pixelchase.glyphs_lower import GLYPH_HEIGHT, GLYPH_WIDTH, Glyph

FIRST_CODE = 128
LAST_CODE = 255

# One glyph per entry: eight rows of six cells, '#' lit and '.' dark.
_UPPER_GLYPH_ROWS = (
    "..###. .#...# .#.... .#.... .#...# ..###. ...#.. ..##..",  # 128
    ".#..#. ...... .#..#. .#..#. .#..#. .#.##. ..#.#. ......",  # 129
    "....## ...... ..###. .#...# .####. .#.... ..###. ......",  # 130
    "..###. ...... ..###. .....# ..#### .#...# ..#### ......",  # 131
    "..#.#. ...... ..###. .....# ..#### .#...# ..#### ......",  # 132
    "..##.. ...... ..###. .....# ..#### .#...# ..#### ......",  # 133
    "..###. ..#.#. ..###. .....# ..#### .#...# ..#### ......",  # 134
    "...... ..###. .#...# .#.... .#...# ..###. ...#.. ..##..",  # 135
    "..###. ...... ..###. .#...# .####. .#.... ..###. ......",  # 136
    "..#.#. ...... ..###. .#...# .####. .#.... ..###. ......",  # 137
    "..##.. ...... ..###. .#...# .####. .#.... ..###. ......",  # 138
    "..#.#. ...... ...#.. ...#.. ...#.. ...#.. ...##. ......",  # 139
    "...#.. ..#.#. ...... ...#.. ...#.. ...#.. ...##. ......",  # 140
    "..#... ...... ...#.. ...#.. ...#.. ...#.. ...##. ......",  # 141
    "..#.#. ...... ...#.. ..#.#. .#...# .##### .#...# ......",  # 142
    "..###. ..#.#. ..###. .##.## .#...# .##### .#...# ......",  # 143
    "....## ...... .##### .#.... .####. .#.... .##### ......",  # 144
    "...... ...... .####. ...#.# .##### .#.#.. ..#### ......",  # 145
    "..#### .#.#.. .#.#.. .##### .#.#.. .#.#.. .#.### ......",  # 146
    "..###. ...... ..##.. .#..#. .#..#. .#..#. ..##.. ......",  # 147
    "..#.#. ...... ..##.. .#..#. .#..#. .#..#. ..##.. ......",  # 148
    ".##... ...... ..##.. .#..#. .#..#. .#..#. ..##.. ......",  # 149
    "..###. ...... .#..#. .#..#. .#..#. .#.##. ..#.#. ......",  # 150
    ".##... ...... .#..#. .#..#. .#..#. .#.##. ..#.#. ......",  # 151
    "..#.#. ...... .#..#. .#..#. .#..#. ..###. ...#.. .##...",  # 152
    ".#..#. ..##.. .#..#. .#..#. .#..#. .#..#. ..##.. ......",  # 153
    "..#.#. ...... .#..#. .#..#. .#..#. .#..#. ..##.. ......",  # 154
    "...... ...#.. ..###. .#.... .#.... ..###. ...#.. ......",  # 155
    "...##. ..#..# ..#... .####. ..#... ..#..# .#.### ......",  # 156
    ".#...# ..#.#. ...#.. .##### ...#.. .##### ...#.. ......",  # 157
    ".##... .#.#.. .#.#.. .##.#. .#.### .#..#. .#..#. ......",  # 158
    "....#. ...#.# ...#.. ..###. ...#.. ...#.. .#.#.. ..#...",  # 159
    "...##. ...... ..###. .....# ..#### .#...# ..#### ......",  # 160
    "...##. ...... ...#.. ...#.. ...#.. ...#.. ...##. ......",  # 161
    "...##. ...... ..##.. .#..#. .#..#. .#..#. ..##.. ......",  # 162
    "...##. ...... .#..#. .#..#. .#..#. .#.##. ..#.#. ......",  # 163
    "..#.#. .#.#.. ...... .###.. .#..#. .#..#. .#..#. ......",  # 164
    "..#.#. .#.#.. ...... .#..#. .##.#. .#.##. .#..#. ......",  # 165
    "..###. .....# ..#### .#...# ..#### ...... ..#### ......",  # 166
    "..##.. .#..#. .#..#. .#..#. ..##.. ...... .####. ......",  # 167
    "...#.. ...... ...#.. ..##.. .#.... .#...# ..###. ......",  # 168
    "...... ...... .##### .#.... .#.... .#.... ...... ......",  # 169
    "...... ...... ###### .....# .....# ...... ...... ......",  # 170
    ".#.... .#..#. .#.#.. ..###. .#...# ....#. ...### ......",  # 171
    ".#.... .#..#. .#.#.. ..#.## .#.#.# ...### .....# ......",  # 172
    "...#.. ...... ...#.. ...#.. ..###. ..###. ...#.. ......",  # 173
    "...... ...... ..#..# .#..#. ..#..# ...... ...... ......",  # 174
    "...... ...... .#..#. ..#..# .#..#. ...... ...... ......",  # 175
    ".#.#.# ...... #.#.#. ...... .#.#.# ...... #.#.#. ......",  # 176
    ".#.#.# #.#.#. .#.#.# #.#.#. .#.#.# #.#.#. .#.#.# #.#.#.",  # 177
    "#.#.#. ###### .#.#.# ###### #.#.#. ###### .#.#.# ######",  # 178
    "...#.. ...#.. ...#.. ...#.. ...#.. ...#.. ...#.. ...#..",  # 179
    "...#.. ...#.. ...#.. ####.. ...#.. ...#.. ...#.. ...#..",  # 180
    "...... ...... .#..#. .#..#. .#..#. .###.. .#.... .#....",  # 181
    ".#.#.. .#.#.. .#.#.. ##.#.. .#.#.. .#.#.. .#.#.. .#.#..",  # 182
    "...... ...... ...... ####.. .#.#.. .#.#.. .#.#.. .#.#..",  # 183
    "...... ####.. ...#.. ####.. ...#.. ...#.. ...#.. ...#..",  # 184
    ".#.#.. ##.#.. ...#.. ##.#.. .#.#.. .#.#.. .#.#.. .#.#..",  # 185
    ".#.#.. .#.#.. .#.#.. .#.#.. .#.#.. .#.#.. .#.#.. .#.#..",  # 186
    "...... ####.. ...#.. ##.#.. .#.#.. .#.#.. .#.#.. .#.#..",  # 187
    ".#.#.. ##.#.. ...#.. ####.. ...... ...... ...... ......",  # 188
    ".#.#.. .#.#.. .#.#.. ####.. ...... ...... ...... ......",  # 189
    "...#.. ####.. ...#.. ####.. ...... ...... ...... ......",  # 190
    "...... ...... ...... ####.. ...#.. ...#.. ...#.. ...#..",  # 191
    "...#.. ...#.. ...#.. ...### ...... ...... ...... ......",  # 192
    "...#.. ...#.. ...#.. ###### ...... ...... ...... ......",  # 193
    "...... ...... ...... ###### ...#.. ...#.. ...#.. ...#..",  # 194
    "...#.. ...#.. ...#.. ...### ...#.. ...#.. ...#.. ...#..",  # 195
    "...... ...... ...... ###### ...... ...... ...... ......",  # 196
    "...#.. ...#.. ...#.. ###### ...#.. ...#.. ...#.. ...#..",  # 197
    "...#.. ...### ...#.. ...### ...#.. ...#.. ...#.. ...#..",  # 198
    ".#.#.. .#.#.. .#.#.. .#.### .#.#.. .#.#.. .#.#.. .#.#..",  # 199
    ".#.#.. .#.### .#.... .##### ...... ...... ...... ......",  # 200
    "...... .##### .#.... .#.### .#.#.. .#.#.. .#.#.. .#.#..",  # 201
    ".#.#.. ##.### ...... ###### ...... ...... ...... ......",  # 202
    "...... ###### ...... ##.### .#.#.. .#.#.. .#.#.. .#.#..",  # 203
    ".#.#.. .#.### .#.... .#.### .#.#.. .#.#.. .#.#.. .#.#..",  # 204
    "...... ###### ...... ###### ...... ...... ...... ......",  # 205
    ".#.#.. ##.### ...... ##.### .#.#.. .#.#.. .#.#.. .#.#..",  # 206
    "...#.. ###### ...... ###### ...... ...... ...... ......",  # 207
    ".#.#.. .#.#.. .#.#.. ###### ...... ...... ...... ......",  # 208
    "...... ###### ...... ###### ...#.. ...#.. ...#.. ...#..",  # 209
    "...... ...... ...... ###### .#.#.. .#.#.. .#.#.. .#.#..",  # 210
    ".#.#.. .#.#.. .#.#.. .##### ...... ...... ...... ......",  # 211
    "...... ...... ...... ...... ...... ...... ...... ######",  # 212
    "...... ...... ...... ...... ...... ...... ###### ######",  # 213
    "...... ...... ...... ...... ...... ###### ###### ######",  # 214
    "...... ...... ...... ...... ###### ###### ###### ######",  # 215
    "...... ...... ...... ###### ###### ###### ###### ######",  # 216
    "...... ...... ###### ###### ###### ###### ###### ######",  # 217
    "...... ###### ###### ###### ###### ###### ###### ######",  # 218
    "###### ###### ###### ###### ###### ###### ###### ######",  # 219
    "#..... #..... #..... #..... #..... #..... #..... #.....",  # 220
    "##.... ##.... ##.... ##.... ##.... ##.... ##.... ##....",  # 221
    "###... ###... ###... ###... ###... ###... ###... ###...",  # 222
    "####.. ####.. ####.. ####.. ####.. ####.. ####.. ####..",  # 223
    "#####. #####. #####. #####. #####. #####. #####. #####.",  # 224
    "...... .###.. .#..#. .###.. .#..#. .#..#. .###.. .#....",  # 225
    ".####. .#..#. .#.... .#.... .#.... .#.... .#.... ......",  # 226
    "...... .##### ..#.#. ..#.#. ..#.#. ..#.#. ..#.#. ......",  # 227
    "..#.#. ...... ..###. .....# ..#### .#...# ..#### ......",  # 228
    "...... ...... ..#### .#..#. .#..#. ..##.. ...... ......",  # 229
    "...... ...... .#..#. .#..#. .#..#. .###.. .#.... .#....",  # 230
    "...... ...... ..#.#. .#.#.. ...#.. ...#.. ...#.. ......",  # 231
    "..###. ...#.. ..###. .#...# ..###. ...#.. ..###. ......",  # 232
    "..##.. .#..#. .#..#. .####. .#..#. .#..#. ..##.. ......",  # 233
    "...... ..###. .#...# .#...# ..#.#. ..#.#. .##.## ......",  # 234
    "..##.. .#.... ..#... ...#.. ..###. .#..#. ..##.. ......",  # 235
    "...... ...... ..#.#. .#.#.# .#.#.# ..#.#. ...... ......",  # 236
    "...... ...#.. ..###. .#.#.# .#.#.# ..###. ...#.. ......",  # 237
    "...... ..###. .#.... .####. .#.... ..###. ...... ......",  # 238
    "...... ..##.. .#..#. .#..#. .#..#. .#..#. ...... ......",  # 239
    "...... .####. ...... .####. ...... .####. ...... ......",  # 240
    "...... ...#.. ..###. ...#.. ...... ..###. ...... ......",  # 241
    ".#.... ..##.. ....#. ..##.. .#.... ...... .####. ......",  # 242
    "...... ...... ###### ###... #..##. #....# #..... ######",  # 243
    "...... ...... ###### ...### .##..# #....# .....# ######",  # 244
    "...#.. ...#.. ...#.. ...#.. ...#.. .#.#.. ..#... ......",  # 245
    "..#.#. ...... ..###. .#...# .#...# .#...# ..###. ......",  # 246
    "#####. #####. #####. #####. #####. #####. #####. #####.",  # 247
    "####.. ####.. ####.. ####.. ####.. ####.. ####.. ####..",  # 248
    "###... ###... ###... ###... ###... ###... ###... ###...",  # 249
    "##.... ##.... ##.... ##.... ##.... ##.... ##.... ##....",  # 250
    "#..... #..... #..... #..... #..... #..... #..... #.....",  # 251
    "..#.#. ...... .#..#. .#..#. .#..#. .#.##. ..#.#. ......",  # 252
    ".##... ...#.. ..#... .###.. ...... ...... ...... ......",  # 253
    "...... ...... ...... .####. ##..#. ##..## #####. ..####",  # 254
    ".#..#. ###### .#..#. .#..#. ###### .#..#. ...... ......",  # 255
)


def _parse(rows: str) -> Glyph:
    parsed = tuple(tuple(int(cell == "#") for cell in row) for row in rows.split())
    if len(parsed) != GLYPH_HEIGHT or any(len(row) != GLYPH_WIDTH for row in parsed):
        raise ValueError(f"malformed glyph rows: {rows!r}")
    return parsed


_UPPER_GLYPHS: tuple[Glyph, ...] = tuple(_parse(rows) for rows in _UPPER_GLYPH_ROWS)


def upper_glyph(code: int) -> Glyph:
    """Return the 8x6 bitmap (rows of 0/1 cells) for a code in 128-255."""
    index = operator.index(code)
    if not FIRST_CODE <= index <= LAST_CODE:
        raise ValueError(
            f"character code {index} is outside {FIRST_CODE}-{LAST_CODE}"
        )
    return _UPPER_GLYPHS[index - FIRST_CODE]