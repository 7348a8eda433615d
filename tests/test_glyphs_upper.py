import pytest

from pixelchase.glyphs_lower import GLYPH_HEIGHT, GLYPH_WIDTH
from pixelchase.glyphs_upper import FIRST_CODE, LAST_CODE, upper_glyph


@pytest.mark.parametrize("code", range(128, 256))
def test_every_glyph_has_font_shape(code):
    bitmap = upper_glyph(code)
    assert len(bitmap) == GLYPH_HEIGHT
    assert all(len(row) == GLYPH_WIDTH for row in bitmap)
    assert all(cell in (0, 1) for row in bitmap for cell in row)


def test_range_bounds():
    assert (FIRST_CODE, LAST_CODE) == (128, 255)
    assert len(upper_glyph(FIRST_CODE)) == GLYPH_HEIGHT
    assert len(upper_glyph(LAST_CODE)) == GLYPH_HEIGHT
    with pytest.raises(ValueError):
        upper_glyph(FIRST_CODE - 1)
    with pytest.raises(ValueError):
        upper_glyph(LAST_CODE + 1)


def test_full_block_is_all_lit():
    assert all(cell == 1 for row in upper_glyph(219) for cell in row)


def test_partial_blocks_grow_from_the_left():
    widths = [sum(upper_glyph(code)[0]) for code in range(220, 225)]
    assert widths == [1, 2, 3, 4, 5]
    for code in range(220, 225):
        bitmap = upper_glyph(code)
        assert all(row == bitmap[0] for row in bitmap)


def test_right_blocks_mirror_left_blocks():
    # 247-251 repeat 224-220 in reverse order.
    for left, right in zip(range(220, 225), range(251, 246, -1)):
        assert upper_glyph(left) == upper_glyph(right)


def test_bottom_blocks_grow_upwards():
    lit_rows = [
        sum(1 for row in upper_glyph(code) if all(row)) for code in range(212, 219)
    ]
    assert lit_rows == list(range(1, 8))


def test_vertical_bar_is_single_column():
    bitmap = upper_glyph(179)
    columns = {col for row in bitmap for col, cell in enumerate(row) if cell}
    assert len(columns) == 1
    assert all(sum(row) == 1 for row in bitmap)


def test_bitmap_is_immutable():
    bitmap = upper_glyph(200)
    with pytest.raises(TypeError):
        bitmap[0] = (0,) * GLYPH_WIDTH  # type: ignore[index]
    assert list(bitmap[0]) == [0, 1, 0, 1, 0, 0]
    assert upper_glyph(200) == bitmap


@pytest.mark.parametrize("code", [127, 0, 256, -1])
def test_out_of_range_rejected(code):
    with pytest.raises(ValueError):
        upper_glyph(code)


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        upper_glyph(200.0)  # type: ignore[arg-type]