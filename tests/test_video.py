import pytest

from pixelchase.font import glyph_pixels
from pixelchase.video import (
    BLACK,
    HEIGHT,
    WHITE,
    WIDTH,
    Button,
    Random,
    Screen,
    color,
    key_down,
    key_just_pressed,
    offset,
)

ALL_RELEASED = 0x3FF


def lit(screen):
    return {
        (x, y)
        for y in range(screen.height)
        for x in range(screen.width)
        if screen.get_pixel(x, y)
    }


def test_white_is_full_15_bit():
    assert WHITE == 0x7FFF
    assert color(31, 31, 31) == WHITE
    assert BLACK == 0


def test_color_channels_do_not_overlap():
    assert color(31, 0, 0) & color(0, 31, 0) == 0
    assert color(0, 31, 0) & color(0, 0, 31) == 0
    assert color(31, 0, 0) | color(0, 31, 0) | color(0, 0, 31) == WHITE


def test_offset_round_trip():
    for row, col in [(0, 0), (5, 17), (159, 239)]:
        assert divmod(offset(row, col, WIDTH), WIDTH) == (row, col)


@pytest.mark.parametrize(
    "button, bit", [(Button.A, 0), (Button.DOWN, 7), (Button.L, 9)]
)
def test_button_bits_drive_key_down(button, bit):
    assert key_down(button, ALL_RELEASED & ~(1 << bit))
    assert not key_down(button, ALL_RELEASED)


def test_key_down_is_active_low():
    assert key_down(Button.A, ALL_RELEASED & ~Button.A)
    assert not key_down(Button.A, ALL_RELEASED)
    assert not key_down(Button.B, ALL_RELEASED & ~Button.A)


def test_key_just_pressed():
    held = ALL_RELEASED & ~Button.START
    assert key_just_pressed(Button.START, held, ALL_RELEASED)
    assert not key_just_pressed(Button.START, held, held)
    assert not key_just_pressed(Button.START, ALL_RELEASED, held)


def test_random_is_deterministic():
    a, b = Random(42), Random(42)
    assert [a.randint(0, 220) for _ in range(50)] == [b.randint(0, 220) for _ in range(50)]


def test_random_default_seed_matches_explicit():
    assert [Random().randint(0, 100) for _ in range(1)] == [Random(42).randint(0, 100)]


def test_random_range():
    rng = Random(7)
    values = [rng.randint(10, 30) for _ in range(500)]
    assert all(10 <= v < 30 for v in values)
    assert len(set(values)) > 5


def test_random_empty_range():
    assert Random(3).randint(5, 5) == 5


def test_screen_starts_black():
    screen = Screen()
    assert (screen.width, screen.height) == (WIDTH, HEIGHT)
    assert len(screen.buffer) == WIDTH * HEIGHT
    assert not any(screen.buffer)


def test_invalid_screen_size():
    with pytest.raises(ValueError):
        Screen(0, 10)


def test_set_and_get_pixel():
    screen = Screen(10, 8)
    screen.set_pixel(3, 5, 0x1234)
    assert screen.get_pixel(3, 5) == 0x1234
    assert lit(screen) == {(3, 5)}


def test_set_pixel_truncates_to_16_bits():
    screen = Screen(4, 4)
    screen.set_pixel(0, 0, 0x1FFFF)
    assert screen.get_pixel(0, 0) == 0xFFFF


@pytest.mark.parametrize("x, y", [(-1, 0), (10, 0), (0, 8), (0, -1)])
def test_pixel_out_of_bounds(x, y):
    screen = Screen(10, 8)
    with pytest.raises(IndexError):
        screen.set_pixel(x, y, WHITE)
    with pytest.raises(IndexError):
        screen.get_pixel(x, y)


def test_wait_for_vblank_counts_frames():
    screen = Screen()
    screen.wait_for_vblank()
    screen.wait_for_vblank()
    assert screen.vblank_counter == 2


def test_draw_rect_fills_region():
    screen = Screen(20, 20)
    screen.draw_rect(2, 3, 4, 5, WHITE)
    assert lit(screen) == {(x, y) for x in range(2, 6) for y in range(3, 8)}


def test_draw_rect_outside_raises():
    screen = Screen(20, 20)
    with pytest.raises(IndexError):
        screen.draw_rect(18, 0, 4, 4, WHITE)
    with pytest.raises(ValueError):
        screen.draw_rect(0, 0, -1, 4, WHITE)


def test_fill():
    screen = Screen(6, 6)
    screen.fill(WHITE)
    assert set(screen.buffer) == {WHITE}


def test_draw_full_screen_image_uses_leading_pixels():
    screen = Screen(4, 3)
    image = list(range(1, 4 * 5 + 1))
    screen.draw_full_screen_image(image)
    assert list(screen.buffer) == image[: 4 * 3]


def test_draw_full_screen_image_too_short():
    with pytest.raises(ValueError):
        Screen(4, 3).draw_full_screen_image([1] * 11)


def test_draw_image_places_rows():
    screen = Screen(10, 10)
    image = list(range(1, 7))
    screen.draw_image(4, 2, 3, 2, image)
    for j in range(2):
        for i in range(3):
            assert screen.get_pixel(4 + i, 2 + j) == image[j * 3 + i]
    assert len(lit(screen)) == 6


def test_draw_image_errors():
    screen = Screen(10, 10)
    with pytest.raises(ValueError):
        screen.draw_image(0, 0, 3, 3, [1] * 8)
    with pytest.raises(IndexError):
        screen.draw_image(9, 9, 3, 3, [1] * 9)


def test_draw_char_matches_glyph():
    screen = Screen(20, 20)
    screen.draw_char(5, 4, "A", WHITE)
    assert lit(screen) == {(5 + dx, 4 + dy) for dx, dy in glyph_pixels("A")}


def test_draw_string_advances_six_columns():
    a, b = Screen(30, 10), Screen(30, 10)
    a.draw_string(0, 0, "AB", WHITE)
    b.draw_char(0, 0, "A", WHITE)
    b.draw_char(6, 0, "B", WHITE)
    assert a.buffer == b.buffer


def test_draw_string_stops_at_nul():
    a, b = Screen(30, 10), Screen(30, 10)
    a.draw_string(0, 0, "A\0B", WHITE)
    b.draw_string(0, 0, "A", WHITE)
    assert a.buffer == b.buffer


def test_centered_string_without_slack():
    a, b = Screen(40, 20), Screen(40, 20)
    a.draw_centered_string(3, 2, 12, 8, "HI", WHITE)
    b.draw_string(3, 2, "HI", WHITE)
    assert a.buffer == b.buffer


def test_centered_string_with_even_slack():
    a, b = Screen(40, 20), Screen(40, 20)
    a.draw_centered_string(3, 2, 16, 12, "HI", WHITE)
    b.draw_string(5, 4, "HI", WHITE)
    assert a.buffer == b.buffer


def test_centered_string_wider_than_box():
    a, b = Screen(), Screen()
    a.draw_centered_string(95, 55, 50, 50, "PRESS A TO START", WHITE)
    b.draw_string(72, 76, "PRESS A TO START", WHITE)
    assert a.buffer == b.buffer