# notehero

A small rhythm game engine. It plays a sequence of notes. For each note the
player must hold the button that matches it before the note's time window
closes. A missed note or a wrong button ends the game. Reaching the end of the
sequence wins it. The score is the number of notes hit.

The game logic talks to its board through a `Hardware` object: a clock, a
buzzer, four button LEDs, two launchpad LEDs and a text display. The
`Hardware` class in the package is a simulation that records what happens.
Subclass it to drive real devices.

## Modules

- `notehero.hero` holds the game:
  - `HeroGame(hardware=None, sequence=None)` is the state machine. If you leave
    out `hardware`, it uses a fresh `Hardware()`. If you leave out `sequence`,
    it plays the built-in song `DEFAULT_SEQUENCE`. A sequence is a list of
    `(duration, pitch)` pairs, each value from 0 to 255. It may not be empty.
  - `State` lists the states: `MENU`, `START`, `PLAY`, `WIN` and `GAME_OVER`.
  - `HeroGame.step(key, buttons)` runs one pass of the main loop and returns
    the new state. `key` is the latest keypad key, or `None`. `buttons` is the
    bitmask of buttons held: 1, 2, 4 and 8 for the four buttons.
  - `HeroGame.run(steps)` feeds an iterable of `(key, buttons)` samples
    through `step` and returns the final state.
  - The phases can also be called one at a time: `menu(key)`, `countdown()`,
    `play(buttons)` (which returns an `Outcome`: `PLAYING`, `WIN` or
    `GAME_OVER`), `game_over()`, `win()`, `reset_to_menu()` and
    `delay(units)`.
  - `Pitch` names the buzzer periods of the notes. `led_for_pitch(value)`
    gives the button mask (1, 2, 4 or 8, or 0 for none) that goes with a
    pitch. `score_text(value)` formats a score from 0 to 65535 and raises
    `ValueError` outside that range.
  - `Hardware` keeps `millis`, `buzzer`, `leds`, `launchpad`, `screen` (the
    `(text, x, y)` lines drawn since the last clear) and `frames` (the text
    of every flushed screen). `advance(ticks)` moves its clock forward.
- `notehero.colors` has the named 24-bit `Color` palette, with `red`, `green`
  and `blue` properties, and `split_rgb` and `join_rgb` to unpack and pack
  `0x00RRGGBB` values.
- `notehero.formats` has the font and image format codes (`FontFormat`,
  `ImageFormat`), the text drawing modes (`TextMode`) and the language
  identifiers (`Language`).
- `notehero.geometry` has `Rectangle`, with inclusive edges, `width`,
  `height`, `contains`, `overlaps` and `intersection`. It also has the
  `Image`, `Font` and `FontEx` descriptions, which check their fields on
  construction.
- `notehero.widgets` describes on-screen controls: `Button`, `CheckBox`,
  `RadioButton` and `ImageButton`, with their geometry (`bounds()`) and
  labels (`label()`).

## How a game goes

1. In the menu, the welcome screen is drawn once. The button mask is mirrored
   on the LEDs. Pressing `*` moves the game to `START`.
2. On the next step, the display counts down "3", "2", "1" and then shows
   "GO", waiting 1000 clock ticks at each stage while the launchpad LEDs
   blink. Then the first note starts and the game is in `PLAY`.
3. Each note sounds on the buzzer and lights its LED for `duration × 10`
   ticks. Holding the matching button scores the note once, even if the
   button stays down. Holding any other nonzero mask ends the game. A note
   whose time runs out without a hit also ends the game.
4. When every note has been hit, the game goes to `WIN`. Otherwise it goes to
   `GAME_OVER`. The next step shows the result screen with the score. The
   screen stays up for 150 delay units and is then cleared. The game then
   returns to `MENU`.

Pressing `#` at any time silences everything and goes straight back to the
menu. A key that is the same as the one in the previous step is treated as no
key, so a held key acts only once.

## Example

```python
from notehero.hero import Hardware, HeroGame, Pitch, State

hw = Hardware()
game = HeroGame(hw, sequence=[(5, Pitch.A), (5, Pitch.D)])

game.step(None, 0)      # welcome screen
game.step("*", 0)       # State.START
game.step(None, 0)      # countdown, first note playing: State.PLAY
game.step(None, 1)      # hit the first note
hw.advance(50)
game.step(None, 2)      # second note starts and is hit
hw.advance(50)
game.step(None, 0)      # sequence finished: State.WIN
game.step(None, 0)      # win screen, back to State.MENU
print(game.score)       # 2
```

## What it does not do

notehero has no command-line program and no window. The `Hardware` class
records text lines and LED and buzzer settings, but it does not render pixels
or play sound. The widget, image and font classes only describe controls and
bitmaps. The package has no code that draws them.

## Installing

notehero has no runtime dependencies and needs Python 3.10 or later. The
`test` extra installs pytest.