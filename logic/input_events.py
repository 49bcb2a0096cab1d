"""logic/input_events.py — Closed set of input events the game understands.

Raw pygame events are translated once, at the edge of the frame loop,
into one of six plain dataclasses.  The router handles each kind
explicitly; anything pygame produces that we don't model becomes
``Other`` and keeps the raw event for diagnostics.

    QUIT          → Quit
    KEYDOWN       → KeyDown(key, repeat)
    KEYUP         → KeyUp(key, repeat)
    TEXTINPUT     → Fire(text)
    MOUSEMOTION   → PointerMove(pos)
    anything else → Other(raw)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Union
import pygame


@dataclass(frozen=True)
class Quit:
    """Window close / OS quit request."""


@dataclass(frozen=True)
class KeyDown:
    key: int
    repeat: bool = False


@dataclass(frozen=True)
class KeyUp:
    key: int
    repeat: bool = False


@dataclass(frozen=True)
class Fire:
    """Text was typed — any text input fires a projectile."""
    text: str = ""


@dataclass(frozen=True)
class PointerMove:
    pos: tuple[int, int] = (0, 0)


@dataclass(frozen=True)
class Other:
    raw: Any = None


InputEvent = Union[Quit, KeyDown, KeyUp, Fire, PointerMove, Other]


def translate(event: pygame.event.Event) -> InputEvent:
    """Map a raw pygame event onto an ``InputEvent``."""
    if event.type == pygame.QUIT:
        return Quit()
    if event.type == pygame.KEYDOWN:
        return KeyDown(key=event.key, repeat=bool(getattr(event, "repeat", False)))
    if event.type == pygame.KEYUP:
        return KeyUp(key=event.key, repeat=bool(getattr(event, "repeat", False)))
    if event.type == pygame.TEXTINPUT:
        return Fire(text=event.text)
    if event.type == pygame.MOUSEMOTION:
        return PointerMove(pos=tuple(event.pos))
    return Other(raw=event)
