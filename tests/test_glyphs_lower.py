import pytest

from pixelchase.glyphs_lower import lower_glyph


def _invert(glyph):
    return tuple(tuple(1 - cell for cell in row) for row in glyph)


@pytest.mark.parametrize("code", range(128))
def test_every_glyph_is_eight_rows_of_six_binary_cells(code):
    glyph = lower_glyph(code)
    assert len(glyph) == 8
    assert all(len(row) == 6 for row in glyph)
    assert {cell for row in glyph for cell in row} <= {0, 1}


def test_space_is_blank():
    assert not any(cell for row in lower_glyph(32) for cell in row)


def test_glyphs_zero_and_seven_share_a_bitmap():
    assert lower_glyph(0) == lower_glyph(7)


def test_inverse_bullet_glyphs():
    assert lower_glyph(8) == _invert(lower_glyph(0))
    assert lower_glyph(10) == _invert(lower_glyph(9))


def test_underscore_lights_only_bottom_row():
    glyph = lower_glyph(95)
    assert all(cell == 1 for cell in glyph[-1])
    assert not any(cell for row in glyph[:-1] for cell in row)


def test_vertical_bar_is_one_column():
    glyph = lower_glyph(ord("|"))
    lit = {(r, c) for r, row in enumerate(glyph) for c, cell in enumerate(row) if cell}
    assert lit == {(r, 3) for r in range(8)}


def test_parentheses_are_mirror_images():
    left = lower_glyph(ord("("))
    right = lower_glyph(ord(")"))
    assert right == tuple(tuple(reversed(row)) for row in left)


def test_e_and_f_differ_only_in_bottom_stroke():
    e = lower_glyph(ord("E"))
    f = lower_glyph(ord("F"))
    assert e[:6] == f[:6]
    assert e[6] == (0, 1, 1, 1, 1, 1)
    assert f[6] == (0, 1, 0, 0, 0, 0)


@pytest.mark.parametrize("code", range(ord("0"), ord("9") + 1))
def test_digits_are_not_blank(code):
    assert any(cell for row in lower_glyph(code) for cell in row)


def test_glyph_is_immutable_and_stable():
    first = lower_glyph(65)
    assert lower_glyph(65) is first
    with pytest.raises(TypeError):
        first[0] = (1, 1, 1, 1, 1, 1)


@pytest.mark.parametrize("code", [-1, 128, 255])
def test_out_of_range_code_raises(code):
    with pytest.raises(ValueError):
        lower_glyph(code)


def test_non_integer_code_raises():
    with pytest.raises(TypeError):
        lower_glyph("A")