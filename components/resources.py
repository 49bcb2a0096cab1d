"""components.resources — Game-wide state (not per-entity)."""

from __future__ import annotations
from dataclasses import dataclass, field

from components.entities import Player, Projectile
from core.constants import (
    PLAYER_MOVEMENT_SPEED, PROJECTILE_SPEED, PROJECTILE_SIZE,
    RELEASE_REMOVE, RELEASE_POLICIES,
)
from core.dev_log import DevLog
from core.errors import SetupError
from core.tuning import get as _tun, get_int as _tun_int


@dataclass
class GameRules:
    """Movement constants for one session, read from tuning."""
    player_speed: int = PLAYER_MOVEMENT_SPEED       # px / frame
    projectile_speed: int = PROJECTILE_SPEED        # px / frame
    projectile_size: int = PROJECTILE_SIZE          # px
    release_policy: str = RELEASE_REMOVE

    @classmethod
    def from_tuning(cls) -> GameRules:
        policy = _tun("input", "release_policy", RELEASE_REMOVE)
        if policy not in RELEASE_POLICIES:
            raise SetupError(
                f"unknown input.release_policy {policy!r} "
                f"(expected one of {', '.join(RELEASE_POLICIES)})")
        return cls(
            player_speed=_tun_int("player", "speed", PLAYER_MOVEMENT_SPEED),
            projectile_speed=_tun_int("projectile", "speed", PROJECTILE_SPEED),
            projectile_size=_tun_int("projectile", "size", PROJECTILE_SIZE),
            release_policy=policy,
        )


@dataclass
class GameState:
    """Everything the frame loop mutates.

    Owned by the play scene and handed to each phase (input, movement,
    draw) in turn.  ``frame`` counts completed simulation steps.
    """
    player: Player = field(default_factory=Player)
    projectiles: list[Projectile] = field(default_factory=list)
    rules: GameRules = field(default_factory=GameRules)
    log: DevLog = field(default_factory=DevLog)
    frame: int = 0
