"""logic/movement.py — Direction resolution and the per-frame movement step.

Movement is purely kinematic: no collision, no acceleration.  Each held
direction contributes ``speed`` pixels along its axis, and contributions
simply add up — a diagonal is NOT normalised, so it covers √2× the
distance of a straight move.
"""

from __future__ import annotations
from typing import Iterable

from components.spatial import Direction
from components.resources import GameState


# Unit step per direction (screen y grows downwards)
_STEP: dict[Direction, tuple[int, int]] = {
    Direction.UP:    (0, -1),
    Direction.DOWN:  (0, 1),
    Direction.LEFT:  (-1, 0),
    Direction.RIGHT: (1, 0),
}


def resolve_move(directions: Iterable[Direction], speed: int) -> tuple[int, int]:
    """Return the net (dx, dy) for *directions* at *speed*.

    Every occurrence counts, so a plain list with duplicates is summed
    as-is.  No directions → (0, 0) whatever the speed.
    """
    dx = 0
    dy = 0
    for d in directions:
        sx, sy = _STEP[d]
        dx += sx * speed
        dy += sy * speed
    return dx, dy


def movement_system(state: GameState) -> None:
    """Advance the player and every projectile by one frame."""
    player = state.player
    dx, dy = resolve_move(player.directions, player.speed)
    player.position.offset(dx, dy)

    speed = state.rules.projectile_speed
    for proj in state.projectiles:
        dx, dy = resolve_move(proj.directions, speed)
        proj.position.offset(dx, dy)

    state.frame += 1
