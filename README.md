# pixelchase

A small arcade chase game that runs entirely in memory on a simulated
240x160 screen of 16-bit pixels (5 bits each of red, green and blue). You
steer a smiley sprite with the direction buttons and catch the target before
the 30-second clock runs out; every catch adds a point and puts the target
somewhere new. One second is 60 frames.

## Modules

- `pixelchase.video`: the `Screen` frame buffer (`get_pixel`, `set_pixel`,
  `draw_rect`, `draw_image`, `draw_full_screen_image`, `fill`, `draw_char`,
  `draw_string`, `draw_centered_string`, `wait_for_vblank`), the `color`,
  `offset`, `key_down` and `key_just_pressed` helpers, colour constants
  (`WHITE`, `RED`, `BLACK`, ...), the `Button` flags and the deterministic
  `Random` generator (seed 42 by default).
- `pixelchase.font`: `glyph(code)` and `glyph_pixels(code)` for the 256
  characters of the 6x8 font, by code or by one-character string.
  `pixelchase.glyphs_lower` and `pixelchase.glyphs_upper` hold the bitmaps.
- `pixelchase.geometry`: plain shape records (`Vector`, `Surface`,
  `Circle`, `Line`, `Rectangle`, `Polygon`, `Image`).
- `pixelchase.images`: the `Sprite` type and the built-in 20x20 sprites
  `SMILE` (the player) and `CROSS` (the target).
- `pixelchase.garbage`: a 50x37 `Sprite` named `GARBAGE`.
- `pixelchase.logic`: the game rules: `Character`, `AppState`,
  `intersect`, `spawn_enemy`, `initialize_app_state` and
  `process_app_state`.
- `pixelchase.graphics`: functions that draw and erase a game state on a
  `Screen`.
- `pixelchase.app`: the `Game` state machine (`GameState`), driven one frame
  at a time by `Game.step(buttons)` or over many frames by
  `Game.run(button_frames)`, and the `main` command.

## Buttons

Button values are active-low, as on the key register of a handheld: a bit
that is *cleared* means the button is held. `pixelchase.app.RELEASED` is
the value with every button up; clear a `Button` bit from it to hold that
button. `key_down(key, buttons)` reports whether `key` is held, and
`key_just_pressed` whether it is held now but was not before. Holding
SELECT returns the game to the title screen from anywhere.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
pixelchase [SCRIPT] [--seed N]
```

plays the game without a display. SCRIPT is a text file (or `-`, the
default, for standard input) with one line per frame naming the buttons held
during that frame, separated by spaces or commas, case-insensitive
(`a`, `b`, `select`, `start`, `right`, `left`, `up`, `down`, `r`, `l`); an
empty line means nothing is held. `--seed` seeds the target placement
(default 42). When the script ends it prints the name of the final screen
state and, if a round was started, the score and remaining time.

```
printf '\na\n\nright\nright\n' | pixelchase
```

## Using it from Python

```python
from pixelchase.app import RELEASED, Game
from pixelchase.video import Button, Random, Screen

game = Game(Screen(), Random(42))

game.step(RELEASED)                 # draws the title screen
game.step(RELEASED & ~Button.A)     # A held: leave the title screen
game.step(RELEASED)                 # start a round and draw it
game.step(RELEASED & ~Button.RIGHT) # move the player one pixel right
print(game.state, game.app_state.player.x)
```

## What it does not do

The screen exists only in memory: nothing opens a window or reads a live
keyboard or gamepad, so play is driven by button values passed to `Game`
or by a script given to the command. The title screen is a plain white
background and the game-over screen a plain black one, each with a line of
text; there are no background pictures.