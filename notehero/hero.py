"""A rhythm game: follow the notes on four buttons before each one runs out."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Iterable, Optional, Sequence

START_KEY = "*"
"""Keypad key that starts a game from the menu."""

RESET_KEY = "#"
"""Keypad key that returns to the menu from any state."""

DURATION_SCALE = 10
"""Clock ticks per unit of note duration or delay."""

COUNTDOWN_STEP_TICKS = 1000
RESULT_DELAY_UNITS = 150
SCREEN_CENTER_X = 48

_UINT8_MAX = 0xFF
_UINT16_MAX = 0xFFFF


class State(Enum):
    """Where the game is in its cycle."""

    MENU = "menu"
    START = "start"
    PLAY = "play"
    WIN = "win"
    GAME_OVER = "game_over"


class Pitch(IntEnum):
    """Buzzer PWM periods for the notes the game can play."""

    A = 74
    AS = 70
    B = 66
    C1 = 62
    CS = 59
    D = 55
    DS = 52
    E = 49
    F = 47
    FS = 44
    G = 42
    GS = 39
    A2 = 37


class Outcome(IntEnum):
    """Result of one round of play."""

    PLAYING = 0
    WIN = 1
    GAME_OVER = 2


_P = Pitch
DEFAULT_SEQUENCE: tuple[tuple[int, int], ...] = tuple(
    (80, pitch)
    for pitch in (
        _P.G, _P.A, _P.CS, _P.G, _P.E, _P.F, _P.D, _P.D, _P.C1, _P.E,
        _P.G, _P.A, _P.C1, _P.A, _P.C1, _P.D, _P.B, _P.A, _P.G, _P.G,
        _P.D, _P.C1, _P.A, _P.C1, _P.A, _P.C1, _P.D, _P.B, _P.A, _P.G,
        _P.G, _P.D, _P.C1, _P.A, _P.C1, _P.A, _P.C1, _P.D, _P.B, _P.A,
        _P.G, _P.G, _P.D, _P.C1, _P.A, _P.C1, _P.A, _P.C1, _P.D, _P.B,
        _P.A, _P.G, _P.G, _P.D, _P.C1,
    )
)
"""The built-in song as (duration, pitch) pairs."""


def led_for_pitch(value: int) -> int:
    """The LED mask (1, 2, 4 or 8) that goes with a pitch, or 0 for none."""
    if 66 <= value <= 74:
        return 1
    if 55 <= value <= 65:
        return 2
    if 46 <= value <= 54:
        return 4
    if 37 <= value <= 45:
        return 8
    return 0


def score_text(value: int) -> str:
    """Decimal text of a score, which must fit in 16 unsigned bits."""
    if not 0 <= value <= _UINT16_MAX:
        raise ValueError(f"score out of range [0, {_UINT16_MAX}]: {value}")
    return str(value)


class Hardware:
    """A simulated board: clock, buzzer, LEDs and a text display.

    Subclasses may drive real devices; this one records what was shown.
    """

    def __init__(self, millis: int = 0) -> None:
        self.millis = millis
        self.buzzer: Optional[int] = None
        self.leds = 0
        self.launchpad: tuple[bool, bool] = (False, False)
        self.screen: list[tuple[str, int, int]] = []
        self.frames: list[tuple[str, ...]] = []

    def now(self) -> int:
        """Current clock reading in ticks."""
        return self.millis

    def advance(self, ticks: int) -> None:
        """Let the clock run on by the given number of ticks."""
        if ticks < 0:
            raise ValueError(f"cannot move the clock backwards: {ticks}")
        self.millis += ticks

    def wait_until(self, deadline: int) -> None:
        """Block until the clock has reached the deadline."""
        self.millis = max(self.millis, deadline)

    def buzzer_on(self, period: int) -> None:
        self.buzzer = int(period)

    def buzzer_off(self) -> None:
        self.buzzer = None

    def set_leds(self, mask: int) -> None:
        self.leds = mask

    def set_launchpad_leds(self, led1: bool, led2: bool) -> None:
        self.launchpad = (bool(led1), bool(led2))

    def clear_display(self) -> None:
        self.screen = []

    def draw_centered(self, text: str, x: int, y: int) -> None:
        self.screen.append((text, x, y))

    def flush(self) -> None:
        self.frames.append(tuple(text for text, _, _ in self.screen))


def _check_sequence(sequence: Iterable[tuple[int, int]]) -> tuple[tuple[int, int], ...]:
    notes = tuple((int(duration), int(pitch)) for duration, pitch in sequence)
    if not notes:
        raise ValueError("a note sequence needs at least one note")
    for duration, pitch in notes:
        if not 0 <= duration <= _UINT8_MAX:
            raise ValueError(f"note duration out of range: {duration}")
        if not 0 <= pitch <= _UINT8_MAX:
            raise ValueError(f"note pitch out of range: {pitch}")
    return notes


class HeroGame:
    """The game's state machine, driven one input sample at a time."""

    def __init__(
        self,
        hardware: Optional[Hardware] = None,
        sequence: Optional[Sequence[tuple[int, int]]] = None,
    ) -> None:
        self.hardware = hardware if hardware is not None else Hardware()
        self.sequence = _check_sequence(DEFAULT_SEQUENCE if sequence is None else sequence)
        self.state = State.MENU
        self.position = 0
        self.did_good = False
        self.score = 0
        self.menu_displayed = False
        self.note_deadline = 0
        self._prev_key: Optional[str] = None
        self.hardware.clear_display()
        self.hardware.flush()

    def _show(self, lines: Iterable[tuple[str, int]]) -> None:
        hw = self.hardware
        hw.clear_display()
        for text, y in lines:
            hw.draw_centered(text, SCREEN_CENTER_X, y)
        hw.flush()

    def _start_note(self) -> None:
        duration, pitch = self.sequence[self.position]
        self.note_deadline = self.hardware.now() + duration * DURATION_SCALE
        self.hardware.buzzer_on(pitch)
        self.hardware.set_leds(led_for_pitch(pitch))

    def _all_off(self) -> None:
        self.hardware.buzzer_off()
        self.hardware.set_leds(0)

    def delay(self, units: int) -> None:
        """Wait until more than units * DURATION_SCALE ticks have passed."""
        if units < 0:
            raise ValueError(f"delay must not be negative: {units}")
        deadline = self.hardware.now() + units * DURATION_SCALE
        self.hardware.wait_until(deadline + 1)

    def reset_to_menu(self) -> None:
        """Silence everything, forget the game and go back to the menu."""
        self._all_off()
        self.hardware.set_launchpad_leds(False, False)
        self.position = 0
        self.did_good = False
        self.score = 0
        self.menu_displayed = False
        self.state = State.MENU
        self.hardware.clear_display()
        self.hardware.flush()

    def menu(self, key: Optional[str]) -> None:
        """Start on the start key; otherwise show the welcome screen once."""
        if key == START_KEY:
            self.state = State.START
            self.menu_displayed = False
        elif not self.menu_displayed:
            self.menu_displayed = True
            self._show(
                (
                    ("Welcome To", 18),
                    ("MSP430 Hero", 28),
                    ("Press *", 40),
                    ("To Begin", 50),
                    ("Press #", 62),
                    ("To Reset", 72),
                )
            )

    def countdown(self) -> None:
        """Count down 3, 2, 1, GO, then start the first note."""
        hw = self.hardware
        for text, leds in (
            ("3", (True, False)),
            ("2", (False, True)),
            ("1", (True, False)),
            ("GO", (True, True)),
        ):
            self._show(((text, 48),))
            hw.set_launchpad_leds(*leds)
            hw.wait_until(hw.now() + COUNTDOWN_STEP_TICKS)
        hw.clear_display()
        hw.flush()
        hw.set_launchpad_leds(False, False)

        self.position = 0
        self.did_good = False
        self.score = 0
        self._start_note()

    def play(self, buttons: int) -> Outcome:
        """Judge the buttons held against the current note."""
        expected = led_for_pitch(self.sequence[self.position][1])

        if self.hardware.now() >= self.note_deadline:
            if not self.did_good:
                return Outcome.GAME_OVER
            self.position += 1
            if self.position >= len(self.sequence):
                self._all_off()
                return Outcome.WIN
            self.did_good = False
            self._all_off()
            self._start_note()
            expected = led_for_pitch(self.sequence[self.position][1])

        if not self.did_good and buttons == expected:
            self.did_good = True
            self.score += 1

        if buttons != 0 and buttons != expected:
            return Outcome.GAME_OVER
        return Outcome.PLAYING

    def _result_screen(self, middle: str, last: str) -> None:
        self._all_off()
        self.hardware.set_launchpad_leds(False, False)
        self._show(
            (
                ("YOU", 8),
                (middle, 18),
                (last, 30),
                ("Score", 44),
                (score_text(self.score), 54),
            )
        )
        self.delay(RESULT_DELAY_UNITS)
        self.hardware.clear_display()
        self.hardware.flush()

    def game_over(self) -> None:
        """Show the losing screen with the score, then clear it."""
        self._result_screen("SUCK", "GAMEOVER")

    def win(self) -> None:
        """Show the winning screen with the score, then clear it."""
        self._result_screen("DONT SUCK", "YAY")

    def step(self, key: Optional[str], buttons: int) -> State:
        """Run one pass of the main loop with a keypad key and a button mask."""
        if key == self._prev_key:
            key = None
        self._prev_key = key

        if key == RESET_KEY:
            self.reset_to_menu()
            return self.state

        if self.state is State.MENU:
            self.menu(key)
            self.hardware.set_leds(buttons)
        elif self.state is State.START:
            self.countdown()
            self.state = State.PLAY
        elif self.state is State.PLAY:
            outcome = self.play(buttons)
            if outcome is Outcome.WIN:
                self.state = State.WIN
                self.menu_displayed = False
            elif outcome is Outcome.GAME_OVER:
                self.state = State.GAME_OVER
                self.menu_displayed = False
        elif self.state is State.GAME_OVER:
            self.game_over()
            self.state = State.MENU
        elif self.state is State.WIN:
            self.win()
            self.state = State.MENU
        return self.state

    def run(self, steps: Iterable[tuple[Optional[str], int]]) -> State:
        """Feed (key, buttons) samples through step and return the final state."""
        for key, buttons in steps:
            self.step(key, buttons)
        return self.state