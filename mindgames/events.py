"""Key events and the curses key-code translation."""

import curses
from dataclasses import dataclass

# key names
CHAR = "char"
ENTER = "enter"
BACKSPACE = "backspace"
ESCAPE = "escape"
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
OTHER = "other"

# event kinds; curses only ever reports presses
PRESS = "press"
RELEASE = "release"
REPEAT = "repeat"

_SPECIAL_KEYS = {
    curses.KEY_ENTER: ENTER,
    10: ENTER,
    13: ENTER,
    curses.KEY_BACKSPACE: BACKSPACE,
    127: BACKSPACE,
    8: BACKSPACE,
    27: ESCAPE,
    curses.KEY_UP: UP,
    curses.KEY_DOWN: DOWN,
    curses.KEY_LEFT: LEFT,
    curses.KEY_RIGHT: RIGHT,
}

# terminal notifications that arrive through getch but are not key presses
_NON_KEYS = {curses.KEY_RESIZE, curses.KEY_MOUSE}


@dataclass(frozen=True)
class KeyEvent:
    key: str
    char: str = ""
    kind: str = PRESS

    @classmethod
    def of(cls, char: str) -> "KeyEvent":
        """Press event for a printable character."""
        return cls(CHAR, char)

    def is_char(self, *chars: str) -> bool:
        return self.key == CHAR and self.char in chars

    def is_quit(self) -> bool:
        return self.key == ESCAPE or self.is_char("q")

    def is_digit(self) -> bool:
        return self.key == CHAR and len(self.char) == 1 and self.char in "0123456789"


def translate_key(code: int) -> KeyEvent | None:
    """Map a curses getch() code to a KeyEvent; None for resize and mouse reports."""
    if code in _NON_KEYS:
        return None
    if code in _SPECIAL_KEYS:
        return KeyEvent(_SPECIAL_KEYS[code])
    if 32 <= code < 256:
        return KeyEvent(CHAR, chr(code))
    return KeyEvent(OTHER)
