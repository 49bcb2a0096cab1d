"""components.entities — The player and the projectiles it fires."""

from __future__ import annotations
from dataclasses import dataclass, field
import pygame

from components.spatial import Direction, DirectionSet, Position
from core.constants import PLAYER_SPRITE_SIZE


def _player_sprite() -> pygame.Rect:
    return pygame.Rect(0, 0, PLAYER_SPRITE_SIZE, PLAYER_SPRITE_SIZE)


@dataclass
class Projectile:
    """A moving point.  Its directions are fixed when it is spawned.

    Projectiles have no lifetime — once fired they fly forever.
    """
    position: Position = field(default_factory=Position)
    directions: DirectionSet = field(
        default_factory=lambda: DirectionSet([Direction.UP]))


@dataclass
class Player:
    """The single player-controlled entity.

    ``sprite`` is the source rectangle inside the player texture; its
    width/height are also the on-screen size.  ``directions`` holds the
    direction keys currently held down.
    """
    position: Position = field(default_factory=Position)
    sprite: pygame.Rect = field(default_factory=_player_sprite)
    directions: DirectionSet = field(default_factory=DirectionSet)
    speed: int = 0        # px / frame

    def press(self, direction: Direction, speed: int) -> None:
        """A direction key went down."""
        self.speed = speed
        self.directions.add(direction)

    def release(self, direction: Direction) -> None:
        """A direction key came up — drop it from the active set."""
        self.directions.discard(direction)

    def spawn_projectile(self) -> Projectile:
        """Build a projectile at the player's current position, heading up."""
        return Projectile(position=self.position.copy(),
                          directions=DirectionSet([Direction.UP]))
