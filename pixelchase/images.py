"""The 20x20 sprites of the player and the target."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["Sprite", "SMILE", "CROSS"]


@dataclass(frozen=True)
class Sprite:
    """A named image of ``width`` x ``height`` 16-bit pixels in row-major order."""

    name: str
    width: int
    height: int
    pixels: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "pixels", tuple(self.pixels))
        if self.width < 0 or self.height < 0:
            raise ValueError(f"size must not be negative, got {self.width}x{self.height}")
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"{self.name}: {len(self.pixels)} pixels for a "
                f"{self.width}x{self.height} sprite"
            )

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside {self.name}")
        return self.pixels[y * self.width + x]

    def rows(self) -> Iterator[tuple[int, ...]]:
        """Yield the rows of pixels from top to bottom."""
        for start in range(0, len(self.pixels), self.width or 1):
            yield self.pixels[start : start + self.width]


def _decode(name: str, palette: dict[str, int], rows: tuple[str, ...]) -> Sprite:
    width = len(rows[0])
    return Sprite(name, width, len(rows), tuple(palette[c] for row in rows for c in row))


_SMILE_PALETTE = {
    ".": 0x03BF, "a": 0x0B1A, "b": 0x1211, "c": 0x031A, "d": 0x075B,
    "e": 0x1611, "f": 0x06F8, "g": 0x0E54, "h": 0x14A6, "i": 0x0675,
    "j": 0x0A96, "k": 0x18C6, "l": 0x0632, "m": 0x037D, "n": 0x06D7,
    "o": 0x07BF, "p": 0x3F5F, "q": 0x277F, "r": 0x375F, "s": 0x235F,
    "t": 0x121E, "u": 0x15DE, "v": 0x039F, "w": 0x20DD, "x": 0x20FD,
    "y": 0x073F, "z": 0x199E, "A": 0x211D, "B": 0x037F, "C": 0x0AFF,
}

_SMILE_ROWS = (
    "....................",
    "....................",
    "....................",
    "....................",
    "....................",
    "....................",
    "....................",
    ".....abc....def.....",
    ".....ghi....jkl.....",
    ".....mnm....mnm.....",
    "....................",
    "....opq......qpo....",
    "....orstuuuutsro....",
    "......vuwxxwuv......",
    ".......yzAAzy.......",
    "........BCCB........",
    "....................",
    "....................",
    "....................",
    "....................",
)

_CROSS_PALETTE = {
    ".": 0x0019, "a": 0x109A, "b": 0x421C, "c": 0x295B,
    "d": 0x7FFF, "e": 0x7BDF, "f": 0x319C, "g": 0x35BC,
}

_CROSS_ROWS = (
    "....................",
    "....................",
    "....................",
    "...abc........cba...",
    "...bdef......gedb...",
    "...cedef....gedec...",
    "....gedef..fedeg....",
    ".....gedeggedeg.....",
    "......gedeedef......",
    ".......geddeg.......",
    ".......geddeg.......",
    "......gedeedef......",
    ".....gedeggedef.....",
    "....fedeg..gedef....",
    "...cedeg....gedec...",
    "...bdef......gedb...",
    "...abc........cba...",
    "....................",
    "....................",
    "....................",
)

SMILE = _decode("smile", _SMILE_PALETTE, _SMILE_ROWS)
CROSS = _decode("cross", _CROSS_PALETTE, _CROSS_ROWS)