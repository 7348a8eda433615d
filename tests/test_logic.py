from functools import reduce
from operator import or_

import pytest

from pixelchase.images import CROSS, SMILE
from pixelchase.logic import (
    FRAMES_PER_SECOND,
    START_TIME,
    AppState,
    Character,
    initialize_app_state,
    intersect,
    process_app_state,
    spawn_enemy,
)
from pixelchase.video import HEIGHT, WIDTH, Button, Random

RELEASED = reduce(or_, Button, 0)


def press(*keys):
    return RELEASED & ~reduce(or_, keys, 0)


def make_state(px=100, py=100, ex=0, ey=0, time=START_TIME, score=0):
    return AppState(
        score=score,
        time=time,
        player=Character(px, py, SMILE.height, SMILE),
        enemy=Character(ex, ey, CROSS.height, CROSS),
    )


def test_intersect_overlap_and_touching_edges():
    a = Character(0, 0, 20, SMILE)
    assert intersect(a, Character(19, 19, 20, CROSS))
    assert not intersect(a, Character(20, 0, 20, CROSS))
    assert not intersect(a, Character(0, 20, 20, CROSS))


@pytest.mark.parametrize("bx,by", [(5, 5), (30, 30), (-19, 0), (-20, 0)])
def test_intersect_is_symmetric(bx, by):
    a = Character(0, 0, 20, SMILE)
    b = Character(bx, by, 20, CROSS)
    assert intersect(a, b) == intersect(b, a)


def test_spawn_enemy_is_deterministic_and_in_bounds():
    first = spawn_enemy(Random(42))
    assert first == spawn_enemy(Random(42))
    assert first.image is CROSS
    assert first.size == CROSS.height
    assert 0 <= first.x <= WIDTH - first.size
    assert 0 <= first.y <= HEIGHT - first.size


def test_many_spawns_stay_on_screen():
    rng = Random(3)
    for _ in range(200):
        enemy = spawn_enemy(rng)
        assert 0 <= enemy.x < WIDTH - enemy.size
        assert 0 <= enemy.y < HEIGHT - enemy.size


def test_initialize_app_state():
    state = initialize_app_state(Random(42))
    assert state.player == Character(WIDTH // 2, HEIGHT // 2, SMILE.height, SMILE)
    assert state.enemy == spawn_enemy(Random(42))
    assert state.score == 0
    assert state.time == START_TIME
    assert state.game_over is False


def test_time_decreases_once_a_second():
    state = make_state()
    assert process_app_state(state, RELEASED, RELEASED, FRAMES_PER_SECOND, Random()).time == START_TIME - 1
    assert process_app_state(state, RELEASED, RELEASED, FRAMES_PER_SECOND + 1, Random()).time == START_TIME


def test_game_over_when_time_reaches_zero():
    assert process_app_state(make_state(time=0), RELEASED, RELEASED, 1, Random()).game_over
    assert not process_app_state(make_state(time=1), RELEASED, RELEASED, 1, Random()).game_over


@pytest.mark.parametrize(
    "key,dx,dy",
    [(Button.UP, 0, -1), (Button.DOWN, 0, 1), (Button.LEFT, -1, 0), (Button.RIGHT, 1, 0)],
)
def test_movement(key, dx, dy):
    state = make_state(px=100, py=100, ex=0, ey=0)
    player = process_app_state(state, RELEASED, press(key), 1, Random()).player
    assert (player.x, player.y) == (100 + dx, 100 + dy)


def test_movement_stops_at_edges():
    top_left = make_state(px=0, py=0, ex=WIDTH - 20, ey=HEIGHT - 20)
    player = process_app_state(top_left, RELEASED, press(Button.UP, Button.LEFT), 1, Random()).player
    assert (player.x, player.y) == (0, 0)

    size = SMILE.height
    corner = make_state(px=WIDTH - size, py=HEIGHT - size)
    player = process_app_state(corner, RELEASED, press(Button.DOWN, Button.RIGHT), 1, Random()).player
    assert (player.x, player.y) == (WIDTH - size, HEIGHT - size)


def test_input_state_is_unchanged():
    state = make_state()
    copy = make_state()
    process_app_state(state, RELEASED, press(Button.UP), FRAMES_PER_SECOND, Random())
    assert state == copy


def test_collision_scores_and_respawns():
    state = make_state(px=0, py=0, ex=10, ey=10, score=4)
    after = process_app_state(state, RELEASED, RELEASED, 1, Random(7))
    assert after.score == 5
    assert after.enemy == spawn_enemy(Random(7))


def test_no_collision_keeps_enemy():
    state = make_state(px=100, py=100, ex=0, ey=0, score=2)
    after = process_app_state(state, RELEASED, RELEASED, 1, Random(7))
    assert after.score == 2
    assert after.enemy == state.enemy