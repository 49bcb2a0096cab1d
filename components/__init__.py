"""components — Game data types, organised by domain.

Submodules
----------
spatial        Direction, DirectionSet, Position
entities       Player, Projectile
resources      GameRules, GameState

All public names are re-exported here so code can simply do
``from components import Player``.
"""

# ── Spatial ──────────────────────────────────────────────────────────
from components.spatial import Direction, DirectionSet, Position

# ── Entities ─────────────────────────────────────────────────────────
from components.entities import Player, Projectile

# ── Game-wide state ──────────────────────────────────────────────────
from components.resources import GameRules, GameState

__all__ = [
    # spatial
    "Direction", "DirectionSet", "Position",
    # entities
    "Player", "Projectile",
    # resources
    "GameRules", "GameState",
]
