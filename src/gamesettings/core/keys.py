"""Key codes understood by the settings.

Values are the key names used by pynput, so a configured key can be handed
straight to a keyboard listener.
"""

from __future__ import annotations

from enum import Enum


class KeyCode(Enum):
    """Keyboard key usable as a binding (e.g. the menu key)."""

    ESCAPE = "esc"
    ENTER = "enter"
    SPACE = "space"
    TAB = "tab"
    BACKSPACE = "backspace"
    DELETE = "delete"
    INSERT = "insert"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAUSE = "pause"
    F1 = "f1"
    F2 = "f2"
    F3 = "f3"
    F4 = "f4"
    F5 = "f5"
    F6 = "f6"
    F7 = "f7"
    F8 = "f8"
    F9 = "f9"
    F10 = "f10"
    F11 = "f11"
    F12 = "f12"
    A = "a"
    B = "b"
    C = "c"
    D = "d"
    E = "e"
    F = "f"
    G = "g"
    H = "h"
    I = "i"
    J = "j"
    K = "k"
    L = "l"
    M = "m"
    N = "n"
    O = "o"
    P = "p"
    Q = "q"
    R = "r"
    S = "s"
    T = "t"
    U = "u"
    V = "v"
    W = "w"
    X = "x"
    Y = "y"
    Z = "z"
    DIGIT0 = "0"
    DIGIT1 = "1"
    DIGIT2 = "2"
    DIGIT3 = "3"
    DIGIT4 = "4"
    DIGIT5 = "5"
    DIGIT6 = "6"
    DIGIT7 = "7"
    DIGIT8 = "8"
    DIGIT9 = "9"

    @property
    def is_character(self) -> bool:
        """True for printable keys (letters and digits)."""
        return len(self.value) == 1

    def to_pynput(self):
        """Return the matching pynput key object.

        pynput is imported lazily: it needs a display backend, which must not
        be required just to build settings.
        """
        from pynput import keyboard

        if self.is_character:
            return keyboard.KeyCode.from_char(self.value)
        return getattr(keyboard.Key, self.value)

    @classmethod
    def from_name(cls, name: str) -> "KeyCode":
        """Parse a key by member name or pynput name, ignoring case.

        Raises:
            ValueError: If no key matches
        """
        text = name.strip()
        member = cls.__members__.get(text.upper())
        if member is not None:
            return member
        lowered = text.lower()
        for key in cls:
            if key.value == lowered:
                return key
        raise ValueError(f"Unknown key code: {name!r}")
