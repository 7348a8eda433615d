"""Drawing and erasing the pieces of a game state on a screen."""

from __future__ import annotations

from pixelchase.logic import AppState, Character
from pixelchase.video import BLACK, WHITE, Screen

__all__ = [
    "SCORE_POSITION",
    "TIME_POSITION",
    "draw_character",
    "draw_num",
    "full_draw_app_state",
    "undraw_app_state",
    "draw_app_state",
]

SCORE_POSITION = (10, 20)
TIME_POSITION = (10, 10)


def draw_character(screen: Screen, character: Character, clear: bool) -> None:
    """Draw a character's sprite, or blank its square when ``clear`` is true."""
    if clear:
        screen.draw_rect(character.x, character.y, character.size, character.size, BLACK)
    else:
        screen.draw_image(
            character.x, character.y, character.size, character.size, character.image.pixels
        )


def draw_num(screen: Screen, x: int, y: int, number: int, color: int) -> None:
    """Draw a number in decimal at (x, y)."""
    screen.draw_string(x, y, str(number), color)


def _draw_pieces(screen: Screen, state: AppState, clear: bool) -> None:
    text_color = BLACK if clear else WHITE
    draw_character(screen, state.player, clear)
    draw_character(screen, state.enemy, clear)
    draw_num(screen, *SCORE_POSITION, state.score, text_color)
    draw_num(screen, *TIME_POSITION, state.time, text_color)


def full_draw_app_state(screen: Screen, state: AppState) -> None:
    """Clear the screen and draw the whole state."""
    screen.fill(BLACK)
    draw_app_state(screen, state)


def undraw_app_state(screen: Screen, state: AppState) -> None:
    """Erase everything of ``state`` that may move between frames."""
    _draw_pieces(screen, state, clear=True)


def draw_app_state(screen: Screen, state: AppState) -> None:
    """Draw everything of ``state`` that may move between frames."""
    _draw_pieces(screen, state, clear=False)