"""The screen state machine that runs the game frame by frame."""

from __future__ import annotations

import argparse
import enum
import sys
from collections.abc import Iterable
from functools import reduce
from operator import or_
from pathlib import Path

from pixelchase.graphics import draw_app_state, full_draw_app_state, undraw_app_state
from pixelchase.logic import AppState, initialize_app_state, process_app_state
from pixelchase.video import BLACK, HEIGHT, WHITE, WIDTH, Button, Random, Screen, key_down

__all__ = [
    "RELEASED",
    "START_BACKGROUND",
    "EXIT_BACKGROUND",
    "GameState",
    "Game",
    "main",
]

RELEASED = reduce(or_, Button, 0)
START_BACKGROUND = WHITE
EXIT_BACKGROUND = BLACK


class GameState(enum.Enum):
    """Screens of the game; the NODRAW states wait for input without redrawing."""

    START = enum.auto()
    START_NODRAW = enum.auto()
    APP_INIT = enum.auto()
    APP = enum.auto()
    APP_EXIT = enum.auto()
    APP_EXIT_NODRAW = enum.auto()


class Game:
    """Drives the title screen, play and game-over screen on a ``Screen``."""

    def __init__(self, screen: Screen, rng: Random | None = None) -> None:
        self.screen = screen
        self.rng = rng if rng is not None else Random()
        self.state = GameState.START
        self.app_state: AppState | None = None
        self.previous_buttons = RELEASED

    def step(self, buttons: int) -> GameState:
        """Run one frame with the active-low button value ``buttons``."""
        if key_down(Button.SELECT, buttons):
            self.state = GameState.START

        screen = self.screen
        match self.state:
            case GameState.START:
                screen.wait_for_vblank()
                screen.fill(START_BACKGROUND)
                screen.draw_centered_string(
                    WIDTH // 2 - 25, HEIGHT // 2 - 25, 50, 50, "PRESS A TO START", BLACK
                )
                self.state = GameState.START_NODRAW
            case GameState.START_NODRAW:
                if key_down(Button.A, buttons):
                    self.state = GameState.APP_INIT
            case GameState.APP_INIT:
                self.app_state = initialize_app_state(self.rng)
                full_draw_app_state(screen, self.app_state)
                self.state = GameState.APP
            case GameState.APP:
                current = self.app_state
                if current is None:
                    raise RuntimeError("play started without an initialised state")
                following = process_app_state(
                    current, self.previous_buttons, buttons, screen.vblank_counter, self.rng
                )
                screen.wait_for_vblank()
                undraw_app_state(screen, current)
                draw_app_state(screen, following)
                self.app_state = following
                if following.game_over:
                    self.state = GameState.APP_EXIT
            case GameState.APP_EXIT:
                screen.wait_for_vblank()
                screen.fill(EXIT_BACKGROUND)
                screen.draw_centered_string(
                    WIDTH // 2 - 25, 10, 50, 10, "PRESS B TO RESTART", WHITE
                )
                self.state = GameState.APP_EXIT_NODRAW
            case GameState.APP_EXIT_NODRAW:
                if key_down(Button.B, buttons):
                    self.state = GameState.START

        self.previous_buttons = buttons
        return self.state

    def run(self, button_frames: Iterable[int]) -> GameState:
        """Run one frame per button value and return the final screen state."""
        for buttons in button_frames:
            self.step(buttons)
        return self.state


def _parse_frame(line: str) -> int:
    mask = 0
    for name in line.replace(",", " ").split():
        try:
            mask |= Button[name.upper()]
        except KeyError:
            raise ValueError(f"unknown button {name!r}") from None
    return RELEASED & ~mask


def main(argv: list[str] | None = None) -> int:
    """Play a script of held buttons, one line per frame, and report the result."""
    parser = argparse.ArgumentParser(
        prog="pixelchase",
        description="Run the chase game headless, one frame per line of held buttons.",
    )
    parser.add_argument(
        "script", nargs="?", default="-", help="file of frames, or - for standard input"
    )
    parser.add_argument("--seed", type=int, default=42, help="seed for target placement")
    args = parser.parse_args(argv)

    if args.script == "-":
        text = sys.stdin.read()
    else:
        try:
            text = Path(args.script).read_text()
        except OSError as exc:
            parser.error(f"cannot read {args.script}: {exc}")

    try:
        frames = [_parse_frame(line) for line in text.splitlines()]
    except ValueError as exc:
        parser.error(str(exc))

    game = Game(Screen(), Random(args.seed))
    state = game.run(frames)
    print(state.name)
    if game.app_state is not None:
        print(f"score {game.app_state.score}")
        print(f"time {game.app_state.time}")
    return 0