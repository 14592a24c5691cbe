from __future__ import annotations

"""Semantic input events delivered to the controller."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EventKind(Enum):
    CHARACTER = "character"
    ERASE = "erase"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    CONFIRM = "confirm"
    QUIT = "quit"


@dataclass(frozen=True)
class InputEvent:
    kind: EventKind
    char: Optional[str] = None

    @classmethod
    def character(cls, char: str) -> "InputEvent":
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")
        return cls(EventKind.CHARACTER, char)

    @classmethod
    def erase(cls) -> "InputEvent":
        return cls(EventKind.ERASE)

    @classmethod
    def move_up(cls) -> "InputEvent":
        return cls(EventKind.MOVE_UP)

    @classmethod
    def move_down(cls) -> "InputEvent":
        return cls(EventKind.MOVE_DOWN)

    @classmethod
    def confirm(cls) -> "InputEvent":
        return cls(EventKind.CONFIRM)

    @classmethod
    def quit(cls) -> "InputEvent":
        return cls(EventKind.QUIT)
