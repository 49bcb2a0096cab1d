"""logic/input_router.py — Applies input events to the game state.

Sits between the translated event queue and the game state.  The scene
drains the whole queue once per frame, before movement runs:

    running = drain_events(state, events)
    if not running:
        ...                     # stop the loop, skip update/draw

Event handling:

    Quit / Escape down      stop (nothing after it is processed)
    arrow key down          player.press(direction)    (repeats ignored)
    arrow key up            player.release(direction)  (see release policy)
    text input              fire a projectile from the player
    pointer motion          ignored
    anything else           logged to the dev log
"""

from __future__ import annotations
from typing import Iterable
import pygame

from components.spatial import Direction
from components.resources import GameState
from core.constants import RELEASE_STOP
from logic.input_events import (
    InputEvent, Quit, KeyDown, KeyUp, Fire, PointerMove, Other,
)


# ── Key bindings ────────────────────────────────────────────────────

_MOVE_BINDS: dict[int, Direction] = {
    pygame.K_UP:    Direction.UP,
    pygame.K_DOWN:  Direction.DOWN,
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}

_QUIT_KEYS: frozenset[int] = frozenset({pygame.K_ESCAPE})


def bound_direction(key: int) -> Direction | None:
    """Return the movement direction bound to *key*, if any."""
    return _MOVE_BINDS.get(key)


def is_quit(event: InputEvent) -> bool:
    """True for events that end the game: Quit, or Escape pressed."""
    if isinstance(event, Quit):
        return True
    return isinstance(event, KeyDown) and event.key in _QUIT_KEYS


# ── Routing ─────────────────────────────────────────────────────────

def route_event(state: GameState, event: InputEvent) -> bool:
    """Apply one event.  Returns False when the game should stop."""
    player = state.player

    if is_quit(event):
        return False

    if isinstance(event, KeyDown):
        direction = bound_direction(event.key)
        if direction is not None and not event.repeat:
            player.press(direction, state.rules.player_speed)
            return True
        _unhandled(state, event)
        return True

    if isinstance(event, KeyUp):
        direction = bound_direction(event.key)
        if direction is not None and not event.repeat:
            player.release(direction)
            if state.rules.release_policy == RELEASE_STOP:
                player.speed = 0
            return True
        _unhandled(state, event)
        return True

    if isinstance(event, Fire):
        proj = player.spawn_projectile()
        state.projectiles.append(proj)
        state.log.record(
            "spawn",
            f"bullet at ({proj.position.x}, {proj.position.y})",
            frame=state.frame)
        return True

    if isinstance(event, PointerMove):
        return True

    if isinstance(event, Other):
        _unhandled(state, event)
        return True

    raise TypeError(f"not an input event: {event!r}")


def drain_events(state: GameState, events: Iterable[InputEvent]) -> bool:
    """Route *events* in order, stopping at the first quit.

    Returns False if a quit was seen — events queued after it are
    dropped unprocessed.
    """
    for event in events:
        if not route_event(state, event):
            return False
    return True


# ── internal ────────────────────────────────────────────────────────

def _unhandled(state: GameState, event: InputEvent) -> None:
    if isinstance(event, Other):
        desc = repr(event.raw)
    else:
        desc = repr(event)
    state.log.record("input", desc, frame=state.frame)
