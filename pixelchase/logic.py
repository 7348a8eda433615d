"""Game rules: the player, the target, the score and the countdown."""

from __future__ import annotations

from dataclasses import dataclass, replace

from pixelchase.images import CROSS, SMILE, Sprite
from pixelchase.video import HEIGHT, WIDTH, Button, Random, key_down

__all__ = [
    "START_TIME",
    "FRAMES_PER_SECOND",
    "Character",
    "AppState",
    "intersect",
    "spawn_enemy",
    "initialize_app_state",
    "process_app_state",
]

START_TIME = 30
FRAMES_PER_SECOND = 60


@dataclass(frozen=True)
class Character:
    """A square sprite placed with its top left corner at (x, y)."""

    x: int
    y: int
    size: int
    image: Sprite


@dataclass(frozen=True)
class AppState:
    """Everything that changes from one frame of play to the next."""

    score: int
    time: int
    player: Character
    enemy: Character
    game_over: bool = False


def intersect(a: Character, b: Character) -> bool:
    """Return whether the squares of two characters overlap."""
    return (a.x + a.size > b.x and a.x < b.x + b.size) and (
        a.y + a.size > b.y and a.y < b.y + b.size
    )


def spawn_enemy(rng: Random) -> Character:
    """Place a new target at a pseudo-random spot on the screen."""
    size = CROSS.height
    x = rng.randint(0, WIDTH - size)
    y = rng.randint(0, HEIGHT - size)
    return Character(x, y, size, CROSS)


def initialize_app_state(rng: Random) -> AppState:
    """Return the state at the start of a round."""
    player = Character(WIDTH // 2, HEIGHT // 2, SMILE.height, SMILE)
    return AppState(
        score=0,
        time=START_TIME,
        player=player,
        enemy=spawn_enemy(rng),
        game_over=False,
    )


def process_app_state(
    state: AppState,
    buttons_before: int,
    buttons_now: int,
    vblank_counter: int,
    rng: Random,
) -> AppState:
    """Return the state one frame after ``state``; ``state`` itself is unchanged."""
    del buttons_before  # movement follows held keys, not fresh presses

    time = state.time - 1 if vblank_counter % FRAMES_PER_SECOND == 0 else state.time
    game_over = state.game_over or state.time == 0

    player = state.player
    x, y = player.x, player.y
    if key_down(Button.UP, buttons_now) and player.y > 0:
        y -= 1
    if key_down(Button.LEFT, buttons_now) and player.x > 0:
        x -= 1
    if key_down(Button.DOWN, buttons_now) and player.y < HEIGHT - player.size:
        y += 1
    if key_down(Button.RIGHT, buttons_now) and player.x < WIDTH - player.size:
        x += 1
    moved = replace(player, x=x, y=y)

    score, enemy = state.score, state.enemy
    if intersect(moved, enemy):
        score += 1
        enemy = spawn_enemy(rng)

    return replace(
        state,
        score=score,
        time=time,
        player=moved,
        enemy=enemy,
        game_over=game_over,
    )