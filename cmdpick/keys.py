"""Key events as the picker sees them.

textual decodes the raw terminal input; ``parse_key`` folds its key names down
to the handful of keys the picker reacts to.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class KeyKind(Enum):
    CHAR = "char"
    ENTER = "enter"
    TAB = "tab"
    SPACE = "space"
    BACKSPACE = "backspace"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    OTHER = "other"


@dataclass(frozen=True)
class Key:
    kind: KeyKind
    char: str = ""

    @classmethod
    def of(cls, ch: str) -> "Key":
        return cls(KeyKind.CHAR, ch)

    def __str__(self) -> str:
        return self.char if self.kind is KeyKind.CHAR else self.kind.value


ENTER = Key(KeyKind.ENTER)
TAB = Key(KeyKind.TAB)
SPACE = Key(KeyKind.SPACE)
BACKSPACE = Key(KeyKind.BACKSPACE)
UP = Key(KeyKind.UP)
DOWN = Key(KeyKind.DOWN)
LEFT = Key(KeyKind.LEFT)
RIGHT = Key(KeyKind.RIGHT)
OTHER = Key(KeyKind.OTHER)

# textual key names
_NAMED = {
    "enter": ENTER,
    "ctrl+m": ENTER,
    "ctrl+j": ENTER,
    "tab": TAB,
    "ctrl+i": TAB,
    "space": SPACE,
    "backspace": BACKSPACE,
    "ctrl+h": BACKSPACE,
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}


def parse_key(name: str, character: Optional[str] = None) -> Key:
    """Map a textual key (name plus printable character, if any) to a Key."""
    key = _NAMED.get(name)
    if key is not None:
        return key
    if character is None and len(name) == 1:
        character = name
    if character is not None and len(character) == 1 and character.isprintable():
        return Key.of(character)
    return OTHER
